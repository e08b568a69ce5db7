"""Unit tests for the category and page repositories."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from torrust_index.core.database.entities import Category, Page
from torrust_index.core.database.repositories import CategoryRepository, PageRepository


class TestCategoryRepository:
    """Tests for category lookups."""

    async def test_get_by_name(self, session):
        repo = CategoryRepository(session)
        await repo.create(Category(name="movies"))

        assert (await repo.get_by_name("movies")).name == "movies"
        assert await repo.get_by_name("Movies") is None


class TestPageRepository:
    """Tests for page lookups and route uniqueness."""

    async def test_get_by_route(self, session):
        repo = PageRepository(session)
        await repo.create(Page(route="/about", title="About", description="Who we are", creation_date=1))

        page = await repo.get_by_route("/about")

        assert page is not None
        assert page.title == "About"
        assert page.description == "Who we are"
        assert await repo.get_by_route("/faq") is None

    async def test_duplicate_route_raises_integrity_error(self, session):
        """Test the unique index rejects a second page on one route."""
        repo = PageRepository(session)
        await repo.create(Page(route="/about", title="About", creation_date=1))

        with pytest.raises(IntegrityError):
            await repo.create(Page(route="/about", title="Other", creation_date=2))
