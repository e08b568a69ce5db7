"""
Tracker key repository implementation.

This module provides data access operations for tracker keys: issuing a key
to a user and finding a key that remains valid past a given instant.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.tracker_keys import TrackerKey
from .base import AsyncBaseRepository


class TrackerKeyRepository(AsyncBaseRepository[TrackerKey]):
    """Repository for tracker key data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, TrackerKey)

    async def get_valid_for_user(self, user_id: int, valid_after: int) -> Optional[TrackerKey]:
        """Get a key of ``user_id`` expiring strictly after ``valid_after``.

        When several keys qualify, the one expiring last is returned.

        Args:
            user_id: Owner of the key
            valid_after: Unix seconds the key must outlive

        Returns:
            TrackerKey instance or None
        """
        stmt = (
            select(TrackerKey)
            .where((TrackerKey.user_id == user_id) & (TrackerKey.valid_until > valid_after))
            .order_by(TrackerKey.valid_until.desc())  # type: ignore
        )
        return await self._first(stmt)
