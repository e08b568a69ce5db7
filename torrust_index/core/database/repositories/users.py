"""
User repository implementation.

This module provides data access operations for registered users: lookups
by username or email, insertion and deletion by row id.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.users import User
from .base import AsyncBaseRepository


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get the first user registered under ``username``."""
        return await self._first(select(User).where(User.username == username))

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get the first user registered under ``email``."""
        return await self._first(select(User).where(User.email == email))
