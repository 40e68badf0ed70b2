"""
Photo repository containing all data-access operations for the photos table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
- Every write goes through extract_valid_fields(payload, PHOTO_SCHEMA)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from business_api.core.constants import MAX_EMBEDDED_ROWS
from business_api.core.logging import get_logger
from business_api.db.models.photo import Photo
from business_api.validation.schema import build_schema, extract_valid_fields

logger = get_logger(__name__)

PHOTO_SCHEMA = build_schema(
    userid=True,
    businessid=True,
    caption=False,
)


async def create_table(db: AsyncSession) -> None:
    """Create the photos table if it does not exist yet."""
    conn = await db.connection()
    await conn.run_sync(Photo.__table__.create, checkfirst=True)


async def get_photo_by_id(db: AsyncSession, photo_id: int) -> Photo | None:
    """Fetch a photo by primary key."""
    return await db.get(Photo, photo_id)


async def list_photos_for_business(
    db: AsyncSession,
    business_id: int,
    *,
    limit: int = MAX_EMBEDDED_ROWS,
) -> list[Photo]:
    """List photos of one business, oldest first."""
    stmt = (
        select(Photo)
        .where(Photo.businessid == business_id)
        .order_by(Photo.id)
        .limit(limit)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def insert_photo(db: AsyncSession, payload: Mapping[str, Any]) -> int:
    """Insert a photo built from the schema fields of ``payload``; return its id."""
    photo = Photo(**extract_valid_fields(payload, PHOTO_SCHEMA))
    db.add(photo)
    await db.flush()
    logger.debug("Photo inserted", photo_id=photo.id, business_id=photo.businessid)
    return photo.id


async def update_photo_by_id(
    db: AsyncSession,
    photo_id: int,
    payload: Mapping[str, Any],
) -> bool:
    """Overwrite the schema fields of a photo. Returns True when the row exists."""
    fields = extract_valid_fields(payload, PHOTO_SCHEMA)
    if not fields:
        return await get_photo_by_id(db, photo_id) is not None

    stmt = update(Photo).where(Photo.id == photo_id).values(**fields)
    result = await db.execute(stmt)
    await db.flush()
    return result.rowcount > 0


async def delete_photo_by_id(db: AsyncSession, photo_id: int) -> bool:
    """Hard-delete a photo. Returns True if a row was deleted."""
    result = await db.execute(delete(Photo).where(Photo.id == photo_id))
    await db.flush()
    return result.rowcount > 0
