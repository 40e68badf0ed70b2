"""Photo response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PhotoResponse(BaseModel):
    """A photo row."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    userid: int
    businessid: int
    caption: str | None = None
