"""Unit tests for LookupResult."""

from __future__ import annotations

from torrust_index.core.database.results import LookupResult, LookupStatus


class TestLookupResult:
    """Tests for the three lookup outcomes."""

    def test_found(self):
        result = LookupResult.found("alice")

        assert result.status is LookupStatus.FOUND
        assert result.is_found and not result.is_missing and not result.is_failed
        assert result.unwrap_or_none() == "alice"

    def test_missing(self):
        result = LookupResult.missing()

        assert result.is_missing
        assert result.error is None
        assert result.unwrap_or_none() is None

    def test_failed_keeps_error(self):
        error = RuntimeError("connection reset")

        result = LookupResult.failed(error)

        assert result.is_failed
        assert result.error is error
        assert result.unwrap_or_none() is None

    def test_of_maps_none_to_missing(self):
        assert LookupResult.of(None).is_missing
        assert LookupResult.of(0).is_found
        assert LookupResult.of([]).is_found
        assert LookupResult.of([]).unwrap_or_none() == []
