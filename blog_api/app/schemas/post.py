"""
Pydantic schemas for blog posts.

A post is both the request body of ``POST /api/post/post`` and the
response body of ``GET /api/get/post/{id}``.  Every field is
required; a payload missing any of them is rejected as malformed.
"""

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

# Identifiers are unsigned 64-bit integers on the wire.
MAX_ID = 2**64 - 1


class Post(BaseModel):
    """A blog post as stored and returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="Id", ge=0, le=MAX_ID, strict=True, description="Unique post identifier")
    title: str = Field(..., alias="Title", description="Post title")
    content: str = Field(..., alias="Content", description="Post body text")
    creation_date: AwareDatetime = Field(
        ...,
        alias="CreationDate",
        strict=True,
        description="RFC 3339 timestamp with a UTC offset; the offset is preserved",
    )
