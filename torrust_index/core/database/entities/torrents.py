"""
Torrent entity models.

This module contains the database entity for torrent listings and the
compact projection used to enumerate every torrent for tracker statistics.
The info hash is the secondary lookup key used by tracker updates.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import BigInteger, Field, Text

from ..base import Base


class TorrentListingBase(Base):
    """Base fields for torrent listing entity."""

    # Upload metadata
    uploader: str = Field(max_length=64, description="Username of the uploader")
    info_hash: str = Field(max_length=40, index=True, description="Hex-encoded info hash")
    title: str = Field(max_length=255)
    category_id: int = Field(description="Category the torrent is filed under")
    description: Optional[str] = Field(default=None, sa_type=Text)
    upload_date: int = Field(sa_type=BigInteger, description="Upload time in unix seconds")
    file_size: int = Field(sa_type=BigInteger, description="Total size in bytes")

    # Tracker statistics
    seeders: int = Field(default=0)
    leechers: int = Field(default=0)


class TorrentListing(TorrentListingBase, table=True):
    """Entity for a torrent listing.

    Table: torrust_torrents
    """

    __tablename__ = "torrust_torrents"

    torrent_id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"TorrentListing(torrent_id={self.torrent_id}, info_hash={self.info_hash})"


class TorrentCompact(Base):
    """Projection of a torrent listing onto its id and info hash."""

    torrent_id: int
    info_hash: str
