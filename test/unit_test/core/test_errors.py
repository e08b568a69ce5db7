"""Unit tests for the error taxonomy."""

import pytest

from torrust_index.core.errors import (
    DatabaseConnectionError,
    DatabaseError,
    InternalServerError,
    PageAlreadyExistsError,
    ServiceError,
    TorrentNotFoundError,
)


class TestServiceErrors:
    """Test domain-visible errors."""

    @pytest.mark.parametrize(
        "error,status_code",
        [
            (TorrentNotFoundError(7), 404),
            (PageAlreadyExistsError("/about"), 409),
            (InternalServerError(), 500),
        ],
    )
    def test_status_codes(self, error, status_code):
        """Test each service error carries its HTTP status code."""
        assert isinstance(error, ServiceError)
        assert error.status_code == status_code

    def test_messages_name_the_subject(self):
        """Test messages mention the torrent id and the route."""
        assert "7" in str(TorrentNotFoundError(7))
        assert "already exists" in str(PageAlreadyExistsError("/about"))
        assert "/about" in str(PageAlreadyExistsError("/about"))

    def test_status_code_override(self):
        """Test the base error accepts an explicit status code."""
        assert ServiceError("teapot", status_code=418).status_code == 418
        assert ServiceError("plain").status_code == 500


class TestDatabaseErrors:
    """Test database-level errors."""

    def test_connection_error_is_database_error(self):
        """Test DatabaseConnectionError keeps url and reason."""
        error = DatabaseConnectionError("sqlite+aiosqlite:///x.db", "unable to open database file")

        assert isinstance(error, DatabaseError)
        assert error.database_url == "sqlite+aiosqlite:///x.db"
        assert error.reason == "unable to open database file"
        assert "unable to open database file" in str(error)
