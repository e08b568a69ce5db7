"""
Category repository implementation.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.categories import Category
from .base import AsyncBaseRepository


class CategoryRepository(AsyncBaseRepository[Category]):
    """Repository for category data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Category)

    async def get_by_name(self, name: str) -> Optional[Category]:
        return await self._first(select(Category).where(Category.name == name))
