"""Unit tests for the shared repository base.

Tests the generic CRUD operations with a mocked session and against SQLite.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from torrust_index.core.database.entities import Category
from torrust_index.core.database.repositories import CategoryRepository


class TestAsyncBaseRepositoryMocked:
    """Tests for base operations with a mocked session."""

    @pytest.fixture
    def mock_session(self):
        """Mock async database session."""
        session = AsyncMock()
        session.add = MagicMock()
        session.commit = AsyncMock()
        session.refresh = AsyncMock()
        return session

    @pytest.fixture
    def repository(self, mock_session):
        """Create repository instance with mocked session."""
        return CategoryRepository(mock_session)

    async def test_create_adds_commits_and_refreshes(self, repository, mock_session):
        """Test create persists the entity and reloads generated fields."""
        category = Category(name="movies")

        result = await repository.create(category)

        mock_session.add.assert_called_once_with(category)
        mock_session.commit.assert_called_once()
        mock_session.refresh.assert_called_once_with(category)
        assert result is category

    async def test_create_propagates_commit_failure(self, repository, mock_session):
        """Test repositories never swallow driver errors."""
        mock_session.commit.side_effect = RuntimeError("disk full")

        with pytest.raises(RuntimeError, match="disk full"):
            await repository.create(Category(name="movies"))

    async def test_delete_reports_rowcount(self, repository, mock_session):
        """Test delete returns whether a row was removed."""
        mock_session.execute.return_value = MagicMock(rowcount=0)

        assert await repository.delete(42) is False
        mock_session.commit.assert_called_once()


class TestAsyncBaseRepository:
    """Tests for base operations against SQLite."""

    async def test_get_by_id_and_delete(self, session):
        """Test a row can be fetched and then deleted by primary key."""
        repo = CategoryRepository(session)
        created = await repo.create(Category(name="music"))

        fetched = await repo.get_by_id(created.category_id)
        assert fetched is not None
        assert fetched.name == "music"

        assert await repo.delete(created.category_id) is True
        assert await repo.delete(created.category_id) is False

    async def test_get_by_id_missing(self, session):
        """Test a missing primary key yields None."""
        assert await CategoryRepository(session).get_by_id(999) is None

    async def test_list_orders_by_primary_key(self, session):
        """Test list returns every row in insertion order."""
        repo = CategoryRepository(session)
        for name in ("movies", "apps", "games"):
            await repo.create(Category(name=name))

        assert [c.name for c in await repo.list()] == ["movies", "apps", "games"]
