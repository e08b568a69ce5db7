"""
Database layer for the Torrust Index.

This package provides the entities, repositories and the ``Database`` façade
over a pooled async engine.

Structure:
- entities/: SQLModel table models, one module per table
- repositories/: Data access layer, one repository per table
- results.py: Typed lookup outcome distinguishing a miss from a failure
- utils.py: Engine, session factory and schema helpers
- facade.py: The ``Database`` façade consumed by request handlers
"""

from .base import Base
from .facade import Database
from .results import LookupResult, LookupStatus
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    normalize_database_url,
)

__all__ = [
    "Base",
    "Database",
    "LookupResult",
    "LookupStatus",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "normalize_database_url",
]
