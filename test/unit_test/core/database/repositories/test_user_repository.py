"""Unit tests for the user repository."""

from __future__ import annotations

from torrust_index.core.database.entities import User
from torrust_index.core.database.repositories import UserRepository


async def _add(repo: UserRepository, username: str, email: str) -> User:
    return await repo.create(User(username=username, email=email, password="hash"))


class TestUserRepository:
    """Tests for user lookups."""

    async def test_get_by_username(self, session):
        """Test lookup by username returns the stored row."""
        repo = UserRepository(session)
        created = await _add(repo, "alice", "alice@example.com")

        found = await repo.get_by_username("alice")

        assert found is not None
        assert found.user_id == created.user_id
        assert found.email == "alice@example.com"

    async def test_get_by_email(self, session):
        """Test lookup by email returns the stored row."""
        repo = UserRepository(session)
        await _add(repo, "alice", "alice@example.com")

        found = await repo.get_by_email("alice@example.com")

        assert found is not None
        assert found.username == "alice"

    async def test_lookups_are_exact(self, session):
        """Test lookups do not match prefixes."""
        repo = UserRepository(session)
        await _add(repo, "alice", "alice@example.com")

        assert await repo.get_by_username("ali") is None
        assert await repo.get_by_email("alice@example") is None

    async def test_delete_by_row_id(self, session):
        """Test deleting by id removes the user."""
        repo = UserRepository(session)
        created = await _add(repo, "alice", "alice@example.com")

        assert await repo.delete(created.user_id) is True
        assert await repo.get_by_username("alice") is None
