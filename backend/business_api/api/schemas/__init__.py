"""API schema package."""

from business_api.api.schemas.businesses import BusinessDetailResponse, BusinessPage, BusinessResponse
from business_api.api.schemas.common import CreatedResponse, ErrorResponse, UpdatedResponse
from business_api.api.schemas.photos import PhotoResponse
from business_api.api.schemas.reviews import ReviewResponse

__all__ = [
    "BusinessResponse",
    "BusinessDetailResponse",
    "BusinessPage",
    "ReviewResponse",
    "PhotoResponse",
    "CreatedResponse",
    "UpdatedResponse",
    "ErrorResponse",
]
