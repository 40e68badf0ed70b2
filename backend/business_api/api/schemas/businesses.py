"""Business response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from business_api.api.schemas.photos import PhotoResponse
from business_api.api.schemas.reviews import ReviewResponse


class BusinessResponse(BaseModel):
    """A business row."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    ownerid: int
    name: str
    address: str
    city: str
    state: str
    zip: str
    phone: str
    category: str
    subcategory: str
    website: str | None = None
    email: str | None = None


class BusinessDetailResponse(BusinessResponse):
    """A business with its reviews and photos embedded."""

    reviews: list[ReviewResponse] = Field(default_factory=list)
    photos: list[PhotoResponse] = Field(default_factory=list)


class BusinessPage(BaseModel):
    """One page of the business listing."""

    model_config = ConfigDict(populate_by_name=True)

    businesses: list[BusinessResponse]
    page: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0, alias="totalPages")
    page_size: int = Field(..., ge=1, alias="pageSize")
    count: int = Field(..., ge=0)
