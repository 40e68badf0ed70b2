"""
Business repository containing all data-access operations for the businesses table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
- Every write goes through extract_valid_fields(payload, BUSINESS_SCHEMA)
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from business_api.core.config import settings
from business_api.core.logging import get_logger
from business_api.db.models.business import Business
from business_api.validation.schema import build_schema, extract_valid_fields

logger = get_logger(__name__)

BUSINESS_SCHEMA = build_schema(
    ownerid=True,
    name=True,
    address=True,
    city=True,
    state=True,
    zip=True,
    phone=True,
    category=True,
    subcategory=True,
    website=False,
    email=False,
)


async def create_table(db: AsyncSession) -> None:
    """Create the businesses table if it does not exist yet."""
    conn = await db.connection()
    await conn.run_sync(Business.__table__.create, checkfirst=True)


async def count_businesses(db: AsyncSession) -> int:
    """Total number of businesses."""
    result = await db.execute(select(func.count()).select_from(Business))
    return result.scalar_one()


async def get_businesses_page(
    db: AsyncSession,
    page: int,
    *,
    page_size: int | None = None,
) -> dict[str, Any]:
    """
    Fetch one page of businesses ordered by id.

    The requested page is clamped into ``[1, last_page]``; an empty table
    still reports page 1 with zero total pages.
    """
    page_size = page_size or settings.PAGE_SIZE
    count = await count_businesses(db)

    last_page = math.ceil(count / page_size)
    page = min(page, last_page)
    page = max(page, 1)
    offset = (page - 1) * page_size

    stmt = select(Business).order_by(Business.id).offset(offset).limit(page_size)
    result = await db.execute(stmt)

    return {
        "businesses": list(result.scalars().all()),
        "page": page,
        "total_pages": last_page,
        "page_size": page_size,
        "count": count,
    }


async def get_business_by_id(db: AsyncSession, business_id: int) -> Business | None:
    """Fetch a business by primary key."""
    return await db.get(Business, business_id)


async def insert_business(db: AsyncSession, payload: Mapping[str, Any]) -> int:
    """Insert a business built from the schema fields of ``payload``; return its id."""
    business = Business(**extract_valid_fields(payload, BUSINESS_SCHEMA))
    db.add(business)
    await db.flush()
    logger.debug("Business inserted", business_id=business.id)
    return business.id


async def update_business_by_id(
    db: AsyncSession,
    business_id: int,
    payload: Mapping[str, Any],
) -> bool:
    """Overwrite the schema fields of a business. Returns True when the row exists."""
    fields = extract_valid_fields(payload, BUSINESS_SCHEMA)
    if not fields:
        return await get_business_by_id(db, business_id) is not None

    stmt = update(Business).where(Business.id == business_id).values(**fields)
    result = await db.execute(stmt)
    await db.flush()
    return result.rowcount > 0


async def delete_business_by_id(db: AsyncSession, business_id: int) -> bool:
    """Hard-delete a business. Returns True if a row was deleted."""
    result = await db.execute(delete(Business).where(Business.id == business_id))
    await db.flush()
    return result.rowcount > 0
