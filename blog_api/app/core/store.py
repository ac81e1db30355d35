"""
In-memory stores for posts and comments.

Each store keeps its records in a plain list, in insertion order, and
looks them up with a linear scan.  Records are only ever inserted;
there is no update or delete.  Nothing is persisted: a store starts
empty (or with the records it is seeded with) and lives as long as
the object that owns it, normally the FastAPI application.  Seed
records are checked for duplicate ids like any other insert.

Uvicorn runs synchronous endpoints in a thread pool, so a store may
be touched by several requests at once.  Every store guards its list
with a single lock.
"""

import logging
import threading
from typing import Generic, Iterable, List, Optional, TypeVar

from ..schemas.comment import Comment
from ..schemas.post import Post

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", Post, Comment)


class StoreError(Exception):
    """Base class for errors raised by the stores."""


class AlreadyExistsError(StoreError):
    """A record with the same id is already stored."""

    entity = "Record"

    def __init__(self, record_id: int) -> None:
        self.id = record_id
        super().__init__(
            f"Error: {self.entity} with id: {record_id} already exists in the repository!"
        )


class NotFoundError(StoreError):
    """No stored record has the requested id."""

    entity = "Record"

    def __init__(self, record_id: int) -> None:
        self.id = record_id
        super().__init__(
            f"Error: {self.entity} with id: {record_id} was not found in the repository!"
        )


class PostAlreadyExistsError(AlreadyExistsError):
    entity = "Post"


class PostNotFoundError(NotFoundError):
    entity = "Post"


class CommentAlreadyExistsError(AlreadyExistsError):
    entity = "Comment"


class CommentNotFoundError(NotFoundError):
    entity = "Comment"


class _RecordStore(Generic[RecordT]):
    """Shared insert/lookup logic for the concrete stores.

    Subclasses set the error classes raised on a duplicate insert and
    on a lookup miss.
    """

    already_exists_error = AlreadyExistsError
    not_found_error = NotFoundError

    def __init__(self, records: Optional[Iterable[RecordT]] = None) -> None:
        self._records: List[RecordT] = []
        self._lock = threading.Lock()
        # Seeds go through the same duplicate check as later inserts.
        for record in records or []:
            self.insert(record)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def insert(self, record: RecordT) -> None:
        """Append ``record`` unless a record with its id is already stored.

        Raises the store's ``already_exists_error`` on a duplicate id;
        the store is left untouched in that case.
        """
        with self._lock:
            for existing in self._records:
                if existing.id == record.id:
                    raise self.already_exists_error(record.id)
            self._records.append(record)
        logger.debug("%s stored record %s", type(self).__name__, record.id)

    def get_by_id(self, record_id: int) -> RecordT:
        """Return the record with ``record_id`` or raise ``not_found_error``."""
        with self._lock:
            for record in self._records:
                if record.id == record_id:
                    return record
        raise self.not_found_error(record_id)


class PostStore(_RecordStore[Post]):
    """Store of :class:`Post` records keyed by ``id``."""

    already_exists_error = PostAlreadyExistsError
    not_found_error = PostNotFoundError


class CommentStore(_RecordStore[Comment]):
    """Store of :class:`Comment` records keyed by ``id``."""

    already_exists_error = CommentAlreadyExistsError
    not_found_error = CommentNotFoundError

    def get_all_by_post_id(self, post_id: int) -> List[Comment]:
        """Return every comment on ``post_id`` in insertion order.

        The result is a new list and is empty, never ``None``, when the
        post has no comments.
        """
        with self._lock:
            return [c for c in self._records if c.post_id == post_id]
