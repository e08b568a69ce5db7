"""Error types for the Torrust Index data-access layer.

Purpose:
- ``ServiceError`` and its subclasses are the domain-visible failures handed to
  request handlers. Each carries the HTTP status code the handler should answer
  with.
- ``DatabaseError`` covers the generic failures of bulk reads and tracker
  updates, and ``DatabaseConnectionError`` the failure to establish the pool.

Usage:
- Catch ``ServiceError`` and answer with ``status_code``.
- Inspect ``__cause__`` on any of these errors for the underlying driver error.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base error for failures surfaced to request handlers.

    Args:
        message: Human-readable error description.
        status_code: HTTP status code associated with the failure.
    """

    status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class TorrentNotFoundError(ServiceError):
    """Raised when no torrent exists for the requested id."""

    status_code = 404

    def __init__(self, torrent_id: int) -> None:
        super().__init__(f"Torrent not found: {torrent_id}")
        self.torrent_id = torrent_id


class PageAlreadyExistsError(ServiceError):
    """Raised when a page is inserted under a route that is already taken."""

    status_code = 409

    def __init__(self, route: str) -> None:
        super().__init__(f"Page already exists for route '{route}'")
        self.route = route


class InternalServerError(ServiceError):
    """Raised when a write or lookup fails for reasons the caller cannot fix."""

    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)


class DatabaseError(Exception):
    """Generic database failure for bulk reads and tracker statistic updates."""


class DatabaseConnectionError(DatabaseError):
    """Raised when the connection pool cannot be established."""

    def __init__(self, database_url: str, reason: str) -> None:
        super().__init__(f"Unable to connect to database '{database_url}': {reason}")
        self.database_url = database_url
        self.reason = reason
