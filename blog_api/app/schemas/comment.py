"""
Pydantic schemas for post comments.

Comments reference a post through ``PostId`` but the reference is
not checked: a comment may be added for a post that does not exist.
"""

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from .post import MAX_ID


class Comment(BaseModel):
    """A comment as stored and returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="Id", ge=0, le=MAX_ID, strict=True, description="Unique comment identifier")
    post_id: int = Field(..., alias="PostId", ge=0, le=MAX_ID, strict=True, description="Identifier of the commented post")
    comment: str = Field(..., alias="Comment", description="Comment text")
    author: str = Field(..., alias="Author", description="Name of the comment author")
    creation_date: AwareDatetime = Field(
        ...,
        alias="CreationDate",
        strict=True,
        description="RFC 3339 timestamp with a UTC offset; the offset is preserved",
    )
