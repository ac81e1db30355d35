"""
Top‑level API router.

Aggregates the post and comment routers.  The application mounts this
router under ``/api``; the endpoint modules carry the remaining path
(``/post/post``, ``/get/post/{id}`` and so on) themselves.
"""

from fastapi import APIRouter

from .endpoints import comments, posts

router = APIRouter()

router.include_router(posts.router, tags=["posts"])
router.include_router(comments.router, tags=["comments"])
