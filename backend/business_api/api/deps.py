"""Shared dependencies for API routes."""

from __future__ import annotations

import re
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from business_api.db.session import get_db as _get_db

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session."""
    async for session in _get_db():
        yield session


def parse_page(raw: str | None) -> int:
    """
    Lenient page number read from the leading digits of ``raw``
    (``"2abc"`` is page 2).  Missing, unparsable or zero means page 1.
    """
    match = _LEADING_INT.match(raw or "")
    if match is None:
        return 1
    return int(match.group(1)) or 1
