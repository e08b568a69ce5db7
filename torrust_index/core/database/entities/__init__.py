"""
Database entity models.

This package contains one module per table of the index schema. Importing the
package registers every table on ``Base.metadata``.

Modules:
- users: Registered index users
- torrents: Torrent listings and the compact id/info-hash projection
- tracker_keys: Time-limited tracker credentials
- categories: Torrent categories
- pages: Routable content pages
"""

from .categories import Category
from .pages import Page
from .torrents import TorrentCompact, TorrentListing
from .tracker_keys import TrackerKey
from .users import User

__all__ = [
    "Category",
    "Page",
    "TorrentCompact",
    "TorrentListing",
    "TrackerKey",
    "User",
]
