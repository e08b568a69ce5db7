"""
Database utility functions for engine and session management.

This module provides the core utility functions for creating database engines
and session factories. Built with async SQLAlchemy so every façade call is a
short-lived, independent round trip against the pooled engine.

Functions:
- normalize_database_url: Rewrites sync driver URLs to their async counterparts
- create_engine: Creates async SQLAlchemy engine with URL normalization
- create_sessionmaker: Creates async session factory with safe defaults
- create_all: Creates all tables from ORM metadata (for tests/dev)
- current_timestamp: Current wall-clock time as unix seconds
"""

from __future__ import annotations

import re
import time

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession

from .base import Base

_POSTGRES_SCHEME = re.compile(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://")
_SQLITE_SCHEME = re.compile(r"^sqlite(?:\+[a-z0-9_]+)?://")


def normalize_database_url(db_url: str) -> str:
    """Rewrite a database URL so that an async driver is used.

    ``postgres://``, ``postgresql://`` and ``postgresql+<driver>://`` become
    ``postgresql+asyncpg://``. ``sqlite://<path>`` becomes
    ``sqlite+aiosqlite:///<path>``; a bare relative path written the short way
    (``sqlite://data.db``) is given the third slash SQLAlchemy expects.

    Args:
        db_url: Database connection URL

    Returns:
        URL naming an async driver
    """
    if _POSTGRES_SCHEME.match(db_url):
        return _POSTGRES_SCHEME.sub("postgresql+asyncpg://", db_url, count=1)

    match = _SQLITE_SCHEME.match(db_url)
    if match:
        rest = db_url[match.end():]
        if rest and not rest.startswith("/"):
            rest = "/" + rest
        return "sqlite+aiosqlite://" + rest

    return db_url


def create_engine(db_url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    Args:
        db_url: Database connection URL
        echo: Log every emitted statement

    Returns:
        Configured AsyncEngine instance
    """
    return create_async_engine(normalize_database_url(db_url), echo=echo, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    This is mainly intended for tests and local development.

    Args:
        engine: Async SQLAlchemy engine
    """
    # Register every table on the metadata before creating it
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def current_timestamp() -> int:
    """Get the current wall-clock time as unix seconds."""
    return int(time.time())
