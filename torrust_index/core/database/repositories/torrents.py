"""
Torrent repository implementation.

This module provides data access operations for torrent listings, including
the bulk id/info-hash enumeration and the tracker statistics update keyed by
info hash.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.torrents import TorrentCompact, TorrentListing
from .base import AsyncBaseRepository


class TorrentRepository(AsyncBaseRepository[TorrentListing]):
    """Repository for torrent listing data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, TorrentListing)

    async def list_compact(self) -> List[TorrentCompact]:
        """List the id and info hash of every torrent.

        Returns:
            List of TorrentCompact projections ordered by torrent id
        """
        stmt = select(TorrentListing.torrent_id, TorrentListing.info_hash).order_by(TorrentListing.torrent_id)
        result = await self.session.exec(stmt)
        return [TorrentCompact(torrent_id=torrent_id, info_hash=info_hash) for torrent_id, info_hash in result]

    async def update_tracker_stats(self, info_hash: str, seeders: int, leechers: int) -> int:
        """Overwrite the seeder and leecher counts of every torrent with ``info_hash``.

        Args:
            info_hash: Hex-encoded info hash
            seeders: New seeder count
            leechers: New leecher count

        Returns:
            Number of rows updated, zero for an unknown info hash
        """
        stmt = (
            update(TorrentListing)
            .where(TorrentListing.info_hash == info_hash)
            .values(seeders=seeders, leechers=leechers)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount
