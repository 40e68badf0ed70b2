"""
Review repository containing all data-access operations for the reviews table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
- Every write goes through extract_valid_fields(payload, REVIEW_SCHEMA)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from business_api.core.constants import MAX_EMBEDDED_ROWS
from business_api.core.logging import get_logger
from business_api.db.models.review import Review
from business_api.validation.schema import build_schema, extract_valid_fields

logger = get_logger(__name__)

REVIEW_SCHEMA = build_schema(
    userid=True,
    businessid=True,
    dollars=True,
    stars=True,
    review=False,
)


async def create_table(db: AsyncSession) -> None:
    """Create the reviews table if it does not exist yet."""
    conn = await db.connection()
    await conn.run_sync(Review.__table__.create, checkfirst=True)


async def get_review_by_id(db: AsyncSession, review_id: int) -> Review | None:
    """Fetch a review by primary key."""
    return await db.get(Review, review_id)


async def list_reviews_for_business(
    db: AsyncSession,
    business_id: int,
    *,
    limit: int = MAX_EMBEDDED_ROWS,
) -> list[Review]:
    """List reviews of one business, oldest first."""
    stmt = (
        select(Review)
        .where(Review.businessid == business_id)
        .order_by(Review.id)
        .limit(limit)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def count_user_reviews_of_business(
    db: AsyncSession,
    *,
    userid: Any,
    businessid: Any,
    exclude_id: int | None = None,
) -> int:
    """Number of reviews ``userid`` has posted for ``businessid``, optionally ignoring one review."""
    stmt = (
        select(func.count())
        .select_from(Review)
        .where(Review.userid == userid, Review.businessid == businessid)
    )
    if exclude_id is not None:
        stmt = stmt.where(Review.id != exclude_id)
    result = await db.execute(stmt)
    return result.scalar_one()


async def insert_review(db: AsyncSession, payload: Mapping[str, Any]) -> int:
    """Insert a review built from the schema fields of ``payload``; return its id."""
    review = Review(**extract_valid_fields(payload, REVIEW_SCHEMA))
    db.add(review)
    await db.flush()
    logger.debug("Review inserted", review_id=review.id, business_id=review.businessid)
    return review.id


async def update_review_by_id(
    db: AsyncSession,
    review_id: int,
    payload: Mapping[str, Any],
) -> bool:
    """Overwrite the schema fields of a review. Returns True when the row exists."""
    fields = extract_valid_fields(payload, REVIEW_SCHEMA)
    if not fields:
        return await get_review_by_id(db, review_id) is not None

    stmt = update(Review).where(Review.id == review_id).values(**fields)
    result = await db.execute(stmt)
    await db.flush()
    return result.rowcount > 0


async def delete_review_by_id(db: AsyncSession, review_id: int) -> bool:
    """Hard-delete a review. Returns True if a row was deleted."""
    result = await db.execute(delete(Review).where(Review.id == review_id))
    await db.flush()
    return result.rowcount > 0
