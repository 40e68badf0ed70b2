"""Business CRUD endpoints, paginated listing and table bootstrap."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from business_api.api.deps import get_db, parse_page
from business_api.api.schemas.businesses import BusinessDetailResponse, BusinessPage, BusinessResponse
from business_api.api.schemas.common import ERROR_RESPONSES, CreatedResponse, UpdatedResponse
from business_api.api.schemas.photos import PhotoResponse
from business_api.api.schemas.reviews import ReviewResponse
from business_api.core.constants import ResourceName
from business_api.core.errors import DataAccessError, InvalidPayloadError, ResourceNotFoundError
from business_api.core.logging import get_logger
from business_api.repositories import businesses as business_repository
from business_api.repositories import photos as photo_repository
from business_api.repositories import reviews as review_repository
from business_api.repositories.businesses import BUSINESS_SCHEMA
from business_api.validation.schema import validate_against_schema

router = APIRouter(
    prefix=f"/{ResourceName.BUSINESSES}",
    tags=["Businesses"],
    responses=ERROR_RESPONSES,
)

logger = get_logger("api.businesses")

INVALID_BUSINESS = "Request body is not a valid business object"


def _not_found(business_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        f"Requested business {business_id} does not exist",
        resource=ResourceName.BUSINESSES,
        resource_id=business_id,
    )


@router.post("/createBusinessesTable")
async def create_businesses_table(db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    """Create the businesses table."""
    try:
        await business_repository.create_table(db)
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Error creating businesses table",
            resource=ResourceName.BUSINESSES,
            details={"cause": str(exc)},
        ) from exc
    logger.info("Businesses table ready")
    return {}


@router.get("", response_model=BusinessPage)
async def list_businesses(
    page: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
) -> BusinessPage:
    """Return one page of businesses."""
    try:
        result = await business_repository.get_businesses_page(db, parse_page(page))
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Error fetching businesses list. Try again later.",
            resource=ResourceName.BUSINESSES,
            details={"cause": str(exc)},
        ) from exc

    return BusinessPage(
        businesses=[BusinessResponse.model_validate(b) for b in result["businesses"]],
        page=result["page"],
        total_pages=result["total_pages"],
        page_size=result["page_size"],
        count=result["count"],
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreatedResponse)
async def create_business(
    payload: Any = Body(None),
    db: AsyncSession = Depends(get_db),
) -> CreatedResponse:
    """Create a new business."""
    if not validate_against_schema(payload, BUSINESS_SCHEMA):
        raise InvalidPayloadError(INVALID_BUSINESS, resource=ResourceName.BUSINESSES)

    try:
        business_id = await business_repository.insert_business(db, payload)
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Error inserting business into DB",
            resource=ResourceName.BUSINESSES,
            details={"cause": str(exc)},
        ) from exc

    logger.info("Business created", business_id=business_id)
    return CreatedResponse(id=business_id)


@router.get("/{business_id}", response_model=BusinessDetailResponse)
async def read_business(
    business_id: int,
    db: AsyncSession = Depends(get_db),
) -> BusinessDetailResponse:
    """Fetch a business together with its reviews and photos."""
    try:
        business = await business_repository.get_business_by_id(db, business_id)
        if business is None:
            raise _not_found(business_id)
        reviews = await review_repository.list_reviews_for_business(db, business_id)
        photos = await photo_repository.list_photos_for_business(db, business_id)
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Error fetching business",
            resource=ResourceName.BUSINESSES,
            details={"business_id": business_id, "cause": str(exc)},
        ) from exc

    return BusinessDetailResponse(
        **BusinessResponse.model_validate(business).model_dump(),
        reviews=[ReviewResponse.model_validate(r) for r in reviews],
        photos=[PhotoResponse.model_validate(p) for p in photos],
    )


@router.put("/{business_id}", response_model=UpdatedResponse)
async def replace_business(
    business_id: int,
    payload: Any = Body(None),
    db: AsyncSession = Depends(get_db),
) -> UpdatedResponse:
    """Replace the data of an existing business."""
    if not validate_against_schema(payload, BUSINESS_SCHEMA):
        raise InvalidPayloadError(INVALID_BUSINESS, resource=ResourceName.BUSINESSES)

    try:
        updated = await business_repository.update_business_by_id(db, business_id, payload)
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Unable to update business",
            resource=ResourceName.BUSINESSES,
            details={"business_id": business_id, "cause": str(exc)},
        ) from exc

    if not updated:
        raise _not_found(business_id)

    return UpdatedResponse(
        id=business_id,
        links={"business": f"/{ResourceName.BUSINESSES}/{business_id}"},
    )


@router.delete("/{business_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_business(
    business_id: int,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a business."""
    try:
        deleted = await business_repository.delete_business_by_id(db, business_id)
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Unable to delete business",
            resource=ResourceName.BUSINESSES,
            details={"business_id": business_id, "cause": str(exc)},
        ) from exc

    if not deleted:
        raise _not_found(business_id)

    logger.info("Business deleted", business_id=business_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
