"""Shared fixtures for the Torrust Index database tests.

Every test gets its own SQLite database file under ``tmp_path``, accessed
through ``aiosqlite`` so the async engine, the repositories and the façade
run exactly as they do against a server database.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel.ext.asyncio.session import AsyncSession

from torrust_index.core.database import Database, create_all, create_engine, create_sessionmaker


@pytest.fixture(scope="function")
def database_url(tmp_path) -> str:
    """URL of a fresh SQLite database file."""
    return f"sqlite+aiosqlite:///{tmp_path / 'index.db'}"


@pytest.fixture(scope="function")
async def engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Async engine with the full schema created."""
    engine = create_engine(database_url)
    await create_all(engine)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session bound to the test engine."""
    async with create_sessionmaker(engine)() as session:
        yield session


@pytest.fixture(scope="function")
def database(engine: AsyncEngine) -> Database:
    """Façade over the test engine."""
    return Database(engine, tracker_key_min_validity=604_800)


@pytest.fixture(scope="function")
def sample_user_data() -> dict:
    """Sample user data for testing."""
    return {
        "username": "alice",
        "email": "alice@example.com",
        "password": "$argon2id$v=19$m=4096,t=3,p=1$c2FsdA$aGFzaA",
        "administrator": False,
    }


@pytest.fixture(scope="function")
def sample_torrent_data() -> dict:
    """Sample torrent data for testing, in façade argument order."""
    return {
        "username": "alice",
        "info_hash": "443c7602b4fde83d1154d6d9da48808418b181b6",
        "title": "Ubuntu 24.04 Desktop",
        "category_id": 1,
        "description": "Official desktop image",
        "file_size": 6_114_656_256,
        "seeders": 12,
        "leechers": 3,
    }
