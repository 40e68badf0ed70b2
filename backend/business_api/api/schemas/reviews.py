"""Review response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ReviewResponse(BaseModel):
    """A review row."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    userid: int
    businessid: int
    dollars: int
    stars: int
    review: str | None = None
