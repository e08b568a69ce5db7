"""
Shared SQLModel base for the index tables.

Every ``torrust_*`` table model (users, torrents, tracker keys, categories,
pages) and the ``TorrentCompact`` projection derive from ``Base``, so all
tables register on one ``Base.metadata`` that ``create_all`` builds.
"""

from __future__ import annotations

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Common base of the index entities; table models add ``table=True``."""

    model_config = ConfigDict(arbitrary_types_allowed=True)
