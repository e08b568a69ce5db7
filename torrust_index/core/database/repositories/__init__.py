"""
Database repository layer using SQLModel.

This package contains one repository class per table. Each repository wraps a
single async session and issues parameterized statements for its table,
returning SQLModel entities. Failures propagate unchanged.

Modules:
- base: AsyncBaseRepository with the shared CRUD operations
- users: User lookups, insertion and deletion
- torrents: Torrent listings and tracker statistics
- tracker_keys: Tracker key issuance and validity lookups
- categories: Category existence checks
- pages: Content pages
"""

from .base import AsyncBaseRepository
from .categories import CategoryRepository
from .pages import PageRepository
from .torrents import TorrentRepository
from .tracker_keys import TrackerKeyRepository
from .users import UserRepository

__all__ = [
    "AsyncBaseRepository",
    "CategoryRepository",
    "PageRepository",
    "TorrentRepository",
    "TrackerKeyRepository",
    "UserRepository",
]
