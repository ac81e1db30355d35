"""
Acknowledgement envelope returned by every non-entity response.
"""

from pydantic import BaseModel, ConfigDict, Field


class AckResponse(BaseModel):
    """``{"Message": ..., "Status": ...}`` wrapper.

    ``status`` always mirrors the HTTP status code of the response.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., alias="Message")
    status: int = Field(..., alias="Status")
