"""
API endpoints for blog posts.

``POST /api/post/post`` adds a post and ``GET /api/get/post/{id}``
returns one.  Failures are reported with the ``{"Message", "Status"}``
envelope; a successful lookup returns the raw post record.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError

from blog_api.app.api.deps import get_post_store, parse_id_path_variable
from blog_api.app.core.errors import InternalStoreError, MalformedInputError, NotFoundApiError
from blog_api.app.core.store import PostNotFoundError, PostStore, StoreError
from blog_api.app.schemas.ack import AckResponse
from blog_api.app.schemas.post import Post

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/post/post", response_model=AckResponse, summary="Add a post")
async def add_post(
    request: Request,
    store: PostStore = Depends(get_post_store),
) -> AckResponse:
    """Decode a post from the JSON body and store it.

    A body that is not a complete post yields 400.  Any store failure,
    including a duplicate id, yields 500 with the store's error text.
    """
    body = await request.body()
    try:
        post = Post.model_validate_json(body)
    except ValidationError as e:
        logger.warning("Rejected post payload (%d validation errors)", e.error_count())
        raise MalformedInputError("could not deserialize post json payload")
    try:
        store.insert(post)
    except StoreError as e:
        logger.warning("Could not store post %s: %s", post.id, e)
        raise InternalStoreError(str(e))
    logger.info("Post %s added", post.id)
    return AckResponse(message=f"post id: {post.id} successfully added", status=status.HTTP_200_OK)


@router.get("/get/post/{raw_id:path}", response_model=Post, summary="Get a post by id")
def get_post(
    raw_id: str,
    store: PostStore = Depends(get_post_store),
) -> Post:
    """Return the post whose id is the final path segment.

    example: ``GET /api/get/post/42``
    """
    raw, post_id = parse_id_path_variable(raw_id)
    try:
        return store.get_by_id(post_id)
    except PostNotFoundError:
        logger.warning("Post %s requested but not found", raw)
        raise NotFoundApiError(f"post with id: {raw} does not exist")
