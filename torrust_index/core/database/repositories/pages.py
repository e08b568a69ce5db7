"""
Page repository implementation.

This module provides data access operations for content pages. Route
uniqueness is left to the unique index on ``route``: a duplicate insert
raises ``sqlalchemy.exc.IntegrityError`` from ``create``.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.pages import Page
from .base import AsyncBaseRepository


class PageRepository(AsyncBaseRepository[Page]):
    """Repository for page data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Page)

    async def get_by_route(self, route: str) -> Optional[Page]:
        """Get the page served under ``route``."""
        return await self._first(select(Page).where(Page.route == route))
