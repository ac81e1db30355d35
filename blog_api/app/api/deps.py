"""
Shared dependencies for the API endpoints.

Stores are created by ``create_app`` and kept on ``app.state``; the
getters below hand them to endpoints through ``Depends`` so that no
endpoint reaches for module-level state.
"""

import re
from typing import Tuple

from fastapi import Request

from blog_api.app.core.errors import InvalidPathVariableError
from blog_api.app.core.store import CommentStore, PostStore
from blog_api.app.schemas.post import MAX_ID

_DIGITS = re.compile(r"[0-9]+")


def get_post_store(request: Request) -> PostStore:
    return request.app.state.post_store


def get_comment_store(request: Request) -> CommentStore:
    return request.app.state.comment_store


def parse_id_path_variable(path: str) -> Tuple[str, int]:
    """Parse the final ``/``-delimited segment of ``path`` as an id.

    Returns the raw segment together with its integer value.  Only
    plain ASCII digits are accepted, and the value must fit in an
    unsigned 64-bit integer.  Anything else (including an empty
    segment) raises :class:`InvalidPathVariableError` carrying the raw
    segment.
    """
    raw = path.split("/")[-1]
    if not _DIGITS.fullmatch(raw):
        raise InvalidPathVariableError(raw)
    value = int(raw)
    if value > MAX_ID:
        raise InvalidPathVariableError(raw)
    return raw, value
