"""
API endpoints for post comments.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError

from blog_api.app.api.deps import get_comment_store, parse_id_path_variable
from blog_api.app.core.errors import AlreadyExistsApiError, MalformedInputError
from blog_api.app.core.store import CommentAlreadyExistsError, CommentStore
from blog_api.app.schemas.ack import AckResponse
from blog_api.app.schemas.comment import Comment

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/get/comments/{raw_id:path}", response_model=List[Comment], summary="List comments of a post")
def list_comments(
    raw_id: str,
    store: CommentStore = Depends(get_comment_store),
) -> List[Comment]:
    """Return every comment on the post, oldest first.

    An empty list is returned when the post has no comments or does
    not exist.
    """
    _, post_id = parse_id_path_variable(raw_id)
    return store.get_all_by_post_id(post_id)


@router.post("/post/comment", response_model=AckResponse, summary="Add a comment")
async def add_comment(
    request: Request,
    store: CommentStore = Depends(get_comment_store),
) -> AckResponse:
    """Decode a comment from the JSON body and store it.

    example: ``POST /api/post/comment`` with
    ``{"Id": 1, "PostId": 101, "Comment": "comment1", "Author": "author1",
    "CreationDate": "1970-01-01T03:46:40+01:00"}``
    """
    body = await request.body()
    try:
        comment = Comment.model_validate_json(body)
    except ValidationError as e:
        logger.warning("Rejected comment payload (%d validation errors)", e.error_count())
        raise MalformedInputError("could not deserialize comment json payload")
    try:
        store.insert(comment)
    except CommentAlreadyExistsError:
        logger.warning("Comment %s already exists", comment.id)
        raise AlreadyExistsApiError(f"Comment with id: {comment.id} already exists in the database")
    logger.info("Comment %s added to post %s", comment.id, comment.post_id)
    return AckResponse(message=f"comment id: {comment.id} successfully added", status=status.HTTP_200_OK)
