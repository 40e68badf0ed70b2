"""Review CRUD endpoints and table bootstrap."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from business_api.api.deps import get_db
from business_api.api.schemas.common import ERROR_RESPONSES, CreatedResponse, ErrorResponse, UpdatedResponse
from business_api.api.schemas.reviews import ReviewResponse
from business_api.core.constants import ResourceName
from business_api.core.errors import (
    BusinessApiError,
    DataAccessError,
    DuplicateReviewError,
    InvalidPayloadError,
    ResourceNotFoundError,
)
from business_api.core.logging import get_logger
from business_api.repositories import reviews as review_repository
from business_api.repositories.reviews import REVIEW_SCHEMA
from business_api.validation.schema import extract_valid_fields, validate_against_schema

router = APIRouter(
    prefix=f"/{ResourceName.REVIEWS}",
    tags=["Reviews"],
    responses={**ERROR_RESPONSES, 403: {"model": ErrorResponse, "description": "Duplicate review"}},
)

logger = get_logger("api.reviews")

INVALID_REVIEW = "Request body is not a valid review object"
DUPLICATE_REVIEW = "User has already posted a review of this business"


def _not_found(review_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        f"Requested review {review_id} does not exist",
        resource=ResourceName.REVIEWS,
        resource_id=review_id,
    )


def _duplicate(review: dict[str, Any]) -> DuplicateReviewError:
    return DuplicateReviewError(
        DUPLICATE_REVIEW,
        resource=ResourceName.REVIEWS,
        details={"userid": review.get("userid"), "businessid": review.get("businessid")},
    )


async def _classify_integrity_error(
    db: AsyncSession,
    review: dict[str, Any],
    exc: IntegrityError,
    *,
    message: str,
    review_id: int | None = None,
) -> BusinessApiError:
    """
    Tell a user/business uniqueness violation (403) apart from other
    constraint failures such as NOT NULL (500).
    """
    await db.rollback()
    others = await review_repository.count_user_reviews_of_business(
        db,
        userid=review.get("userid"),
        businessid=review.get("businessid"),
        exclude_id=review_id,
    )
    if others > 0:
        return _duplicate(review)
    return DataAccessError(
        message,
        resource=ResourceName.REVIEWS,
        details={"review_id": review_id, "cause": str(exc)},
    )


@router.post("/createReviewsTable")
async def create_reviews_table(db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    """Create the reviews table."""
    try:
        await review_repository.create_table(db)
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Error creating reviews table",
            resource=ResourceName.REVIEWS,
            details={"cause": str(exc)},
        ) from exc
    logger.info("Reviews table ready")
    return {}


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreatedResponse)
async def create_review(
    payload: Any = Body(None),
    db: AsyncSession = Depends(get_db),
) -> CreatedResponse:
    """Create a new review; a user may review each business only once."""
    if not validate_against_schema(payload, REVIEW_SCHEMA):
        raise InvalidPayloadError(INVALID_REVIEW, resource=ResourceName.REVIEWS)

    review = extract_valid_fields(payload, REVIEW_SCHEMA)

    try:
        previous = await review_repository.count_user_reviews_of_business(
            db,
            userid=review["userid"],
            businessid=review["businessid"],
        )
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Error validating user review history",
            resource=ResourceName.REVIEWS,
            details={"cause": str(exc)},
        ) from exc

    if previous > 0:
        raise _duplicate(review)

    try:
        review_id = await review_repository.insert_review(db, review)
    except IntegrityError as exc:
        # a concurrent request may have inserted the same user/business pair first
        raise await _classify_integrity_error(
            db, review, exc, message="Error inserting review into database"
        ) from exc
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Error inserting review into database",
            resource=ResourceName.REVIEWS,
            details={"cause": str(exc)},
        ) from exc

    logger.info("Review created", review_id=review_id, business_id=review["businessid"])
    return CreatedResponse(id=review_id)


@router.get("/{review_id}", response_model=ReviewResponse)
async def read_review(
    review_id: int,
    db: AsyncSession = Depends(get_db),
) -> ReviewResponse:
    """Fetch a review."""
    try:
        review = await review_repository.get_review_by_id(db, review_id)
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Error fetching review",
            resource=ResourceName.REVIEWS,
            details={"review_id": review_id, "cause": str(exc)},
        ) from exc

    if review is None:
        raise _not_found(review_id)
    return ReviewResponse.model_validate(review)


@router.put("/{review_id}", response_model=UpdatedResponse)
async def replace_review(
    review_id: int,
    payload: Any = Body(None),
    db: AsyncSession = Depends(get_db),
) -> UpdatedResponse:
    """Replace the data of an existing review."""
    if not validate_against_schema(payload, REVIEW_SCHEMA):
        raise InvalidPayloadError(INVALID_REVIEW, resource=ResourceName.REVIEWS)

    try:
        updated = await review_repository.update_review_by_id(db, review_id, payload)
    except IntegrityError as exc:
        raise await _classify_integrity_error(
            db,
            extract_valid_fields(payload, REVIEW_SCHEMA),
            exc,
            message="Unable to update review",
            review_id=review_id,
        ) from exc
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Unable to update review",
            resource=ResourceName.REVIEWS,
            details={"review_id": review_id, "cause": str(exc)},
        ) from exc

    if not updated:
        raise _not_found(review_id)

    return UpdatedResponse(
        id=review_id,
        links={"review": f"/{ResourceName.REVIEWS}/{review_id}"},
    )


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_review(
    review_id: int,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a review."""
    try:
        deleted = await review_repository.delete_review_by_id(db, review_id)
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Unable to delete review",
            resource=ResourceName.REVIEWS,
            details={"review_id": review_id, "cause": str(exc)},
        ) from exc

    if not deleted:
        raise _not_found(review_id)

    logger.info("Review deleted", review_id=review_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
