"""Photo CRUD endpoints and table bootstrap."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from business_api.api.deps import get_db
from business_api.api.schemas.common import ERROR_RESPONSES, CreatedResponse, UpdatedResponse
from business_api.api.schemas.photos import PhotoResponse
from business_api.core.constants import ResourceName
from business_api.core.errors import DataAccessError, InvalidPayloadError, ResourceNotFoundError
from business_api.core.logging import get_logger
from business_api.repositories import photos as photo_repository
from business_api.repositories.photos import PHOTO_SCHEMA
from business_api.validation.schema import validate_against_schema

router = APIRouter(
    prefix=f"/{ResourceName.PHOTOS}",
    tags=["Photos"],
    responses=ERROR_RESPONSES,
)

logger = get_logger("api.photos")

INVALID_PHOTO = "Request body is not a valid photo object"


def _not_found(photo_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        f"Requested photo {photo_id} does not exist",
        resource=ResourceName.PHOTOS,
        resource_id=photo_id,
    )


@router.post("/createPhotosTable")
async def create_photos_table(db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    """Create the photos table."""
    try:
        await photo_repository.create_table(db)
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Error creating photos table",
            resource=ResourceName.PHOTOS,
            details={"cause": str(exc)},
        ) from exc
    logger.info("Photos table ready")
    return {}


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreatedResponse)
async def create_photo(
    payload: Any = Body(None),
    db: AsyncSession = Depends(get_db),
) -> CreatedResponse:
    """Create a new photo."""
    if not validate_against_schema(payload, PHOTO_SCHEMA):
        raise InvalidPayloadError(INVALID_PHOTO, resource=ResourceName.PHOTOS)

    try:
        photo_id = await photo_repository.insert_photo(db, payload)
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Error inserting photo into database",
            resource=ResourceName.PHOTOS,
            details={"cause": str(exc)},
        ) from exc

    logger.info("Photo created", photo_id=photo_id)
    return CreatedResponse(id=photo_id)


@router.get("/{photo_id}", response_model=PhotoResponse)
async def read_photo(
    photo_id: int,
    db: AsyncSession = Depends(get_db),
) -> PhotoResponse:
    """Fetch a photo."""
    try:
        photo = await photo_repository.get_photo_by_id(db, photo_id)
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Error fetching photo",
            resource=ResourceName.PHOTOS,
            details={"photo_id": photo_id, "cause": str(exc)},
        ) from exc

    if photo is None:
        raise _not_found(photo_id)
    return PhotoResponse.model_validate(photo)


@router.put("/{photo_id}", response_model=UpdatedResponse)
async def replace_photo(
    photo_id: int,
    payload: Any = Body(None),
    db: AsyncSession = Depends(get_db),
) -> UpdatedResponse:
    """Replace the data of an existing photo."""
    if not validate_against_schema(payload, PHOTO_SCHEMA):
        raise InvalidPayloadError(INVALID_PHOTO, resource=ResourceName.PHOTOS)

    try:
        updated = await photo_repository.update_photo_by_id(db, photo_id, payload)
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Unable to update photo",
            resource=ResourceName.PHOTOS,
            details={"photo_id": photo_id, "cause": str(exc)},
        ) from exc

    if not updated:
        raise _not_found(photo_id)

    return UpdatedResponse(
        id=photo_id,
        links={"photo": f"/{ResourceName.PHOTOS}/{photo_id}"},
    )


@router.delete("/{photo_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_photo(
    photo_id: int,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a photo."""
    try:
        deleted = await photo_repository.delete_photo_by_id(db, photo_id)
    except SQLAlchemyError as exc:
        raise DataAccessError(
            "Unable to delete photo",
            resource=ResourceName.PHOTOS,
            details={"photo_id": photo_id, "cause": str(exc)},
        ) from exc

    if not deleted:
        raise _not_found(photo_id)

    logger.info("Photo deleted", photo_id=photo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
