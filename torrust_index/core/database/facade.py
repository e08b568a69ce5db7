"""
Database façade for the Torrust Index.

``Database`` wraps a pooled async engine and exposes one method per use case.
Each method opens its own short-lived session, issues a single statement
through the matching repository and maps the outcome:

- silent-failure reads (users, tracker key, category, pages) return ``None``
  on a miss *and* on a driver error, logging the error. Their ``find_*``
  twins return a ``LookupResult`` that keeps the two apart.
- ``get_torrent_by_id``, ``issue_tracker_key`` and ``insert_page`` raise
  ``ServiceError`` subclasses.
- driver errors include connection errors SQLAlchemy leaves unwrapped
  (``OSError``, timeouts); see ``DRIVER_ERRORS``.
- ``get_all_torrent_ids`` and ``update_tracker_info`` raise ``DatabaseError``.
- ``delete_user``, ``insert_user_and_get_id``, ``insert_category`` and
  ``insert_torrent_and_get_id`` let driver errors propagate.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, List, Optional, TypeVar

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel.ext.asyncio.session import AsyncSession

from torrust_index.core.config import settings
from torrust_index.core.errors import (
    DatabaseConnectionError,
    DatabaseError,
    InternalServerError,
    PageAlreadyExistsError,
    TorrentNotFoundError,
)
from torrust_index.core.logging_config import get_logger

from .entities import Category, Page, TorrentCompact, TorrentListing, TrackerKey, User
from .repositories import (
    CategoryRepository,
    PageRepository,
    TorrentRepository,
    TrackerKeyRepository,
    UserRepository,
)
from .results import LookupResult
from .utils import create_all, create_engine, create_sessionmaker, current_timestamp

logger = get_logger(__name__)

T = TypeVar("T")

# asyncpg raises refused or dropped connections as bare OSError and timeouts
# as asyncio.TimeoutError; SQLAlchemy does not wrap either.
DRIVER_ERRORS = (SQLAlchemyError, OSError, asyncio.TimeoutError)


class Database:
    """Data-access façade over a pooled async engine."""

    def __init__(self, engine: AsyncEngine, *, tracker_key_min_validity: Optional[int] = None) -> None:
        """Wrap an existing engine. No connectivity check is made; see ``connect``.

        Args:
            engine: Async SQLAlchemy engine owning the connection pool
            tracker_key_min_validity: Seconds a tracker key must outlive to count as valid
        """
        self.engine = engine
        self.session_maker = create_sessionmaker(engine)
        self.tracker_key_min_validity = (
            settings.tracker_key_min_validity if tracker_key_min_validity is None else tracker_key_min_validity
        )

    @classmethod
    async def connect(
        cls,
        database_url: Optional[str] = None,
        *,
        echo: Optional[bool] = None,
        tracker_key_min_validity: Optional[int] = None,
    ) -> Database:
        """Build the pool and check it with one round trip.

        Args:
            database_url: Connection URL, defaults to the configured one
            echo: Echo emitted SQL, defaults to the configured flag
            tracker_key_min_validity: Seconds a tracker key must outlive to count as valid

        Returns:
            A ready Database

        Raises:
            DatabaseConnectionError: If the pool cannot be established. The engine is
                disposed first; retrying is left to the caller.
        """
        url = database_url or settings.database_url
        try:
            engine = create_engine(url, echo=settings.database_echo if echo is None else echo)
        except (SQLAlchemyError, ValueError, ImportError) as e:
            logger.error(f"Invalid database URL: {e}")
            raise DatabaseConnectionError("<invalid url>", str(e)) from e

        safe_url = engine.url.render_as_string(hide_password=True)
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except DRIVER_ERRORS as e:
            await engine.dispose()
            logger.error(f"Failed to connect to database {safe_url}: {e}")
            raise DatabaseConnectionError(safe_url, str(e)) from e

        logger.info(f"Database connection pool initialized for {safe_url}")
        return cls(engine, tracker_key_min_validity=tracker_key_min_validity)

    async def close(self) -> None:
        """Dispose of every pooled connection."""
        await self.engine.dispose()
        logger.info("Database connection pool closed.")

    async def create_schema(self) -> None:
        """Create every table of the index schema (tests and local development)."""
        await create_all(self.engine)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a short-lived session from the pool."""
        async with self.session_maker() as session:
            yield session

    async def _lookup(
        self, description: str, query: Callable[[AsyncSession], Awaitable[Optional[T]]]
    ) -> LookupResult[T]:
        try:
            async with self.session() as session:
                value = await query(session)
        except DRIVER_ERRORS as e:
            logger.warning(f"Lookup of {description} failed: {e}")
            return LookupResult.failed(e)
        return LookupResult.of(value)

    # ── Users ─────────────────────────────────────────────

    async def find_user_by_username(self, username: str) -> LookupResult[User]:
        return await self._lookup(
            f"user by username {username!r}", lambda s: UserRepository(s).get_by_username(username)
        )

    async def find_user_by_email(self, email: str) -> LookupResult[User]:
        return await self._lookup(f"user by email {email!r}", lambda s: UserRepository(s).get_by_email(email))

    async def get_user_with_username(self, username: str) -> Optional[User]:
        """Get the user registered under ``username``; ``None`` on a miss or a failed query."""
        return (await self.find_user_by_username(username)).unwrap_or_none()

    async def get_user_with_email(self, email: str) -> Optional[User]:
        """Get the user registered under ``email``; ``None`` on a miss or a failed query."""
        return (await self.find_user_by_email(email)).unwrap_or_none()

    async def insert_user_and_get_id(
        self, username: str, email: str, password: str, *, administrator: bool = False
    ) -> int:
        """Insert a user and return the assigned user id.

        Args:
            username: Login name
            email: Contact address
            password: Password hash
            administrator: Grant administrator rights

        Returns:
            The new user id
        """
        user = User(username=username, email=email, password=password, administrator=administrator)
        async with self.session() as session:
            user = await UserRepository(session).create(user)
        return user.user_id

    async def delete_user(self, user_id: int) -> None:
        """Delete the user with ``user_id``. Deleting an unknown id is not an error."""
        async with self.session() as session:
            deleted = await UserRepository(session).delete(user_id)
        logger.debug(f"Deleted user {user_id}: {deleted}")

    # ── Torrents ──────────────────────────────────────────

    async def insert_torrent_and_get_id(
        self,
        username: str,
        info_hash: str,
        title: str,
        category_id: int,
        description: Optional[str],
        file_size: int,
        seeders: int,
        leechers: int,
    ) -> int:
        """Insert a torrent listing stamped with the current time.

        Returns:
            The new torrent id
        """
        torrent = TorrentListing(
            uploader=username,
            info_hash=info_hash,
            title=title,
            category_id=category_id,
            description=description,
            upload_date=current_timestamp(),
            file_size=file_size,
            seeders=seeders,
            leechers=leechers,
        )
        async with self.session() as session:
            torrent = await TorrentRepository(session).create(torrent)
        logger.info(f"Added torrent #{torrent.torrent_id} ({info_hash}) for {username}")
        return torrent.torrent_id

    async def get_torrent_by_id(self, torrent_id: int) -> TorrentListing:
        """Get a torrent listing by id.

        Raises:
            TorrentNotFoundError: If no torrent has ``torrent_id``
            InternalServerError: If the query fails
        """
        try:
            async with self.session() as session:
                torrent = await TorrentRepository(session).get_by_id(torrent_id)
        except DRIVER_ERRORS as e:
            logger.warning(f"Failed to fetch torrent {torrent_id}: {e}")
            raise InternalServerError() from e

        if torrent is None:
            raise TorrentNotFoundError(torrent_id)
        return torrent

    async def get_all_torrent_ids(self) -> List[TorrentCompact]:
        """List the id and info hash of every torrent.

        Raises:
            DatabaseError: If the query fails
        """
        try:
            async with self.session() as session:
                return await TorrentRepository(session).list_compact()
        except DRIVER_ERRORS as e:
            logger.error(f"Failed to list torrent ids: {e}")
            raise DatabaseError("Failed to list torrent ids") from e

    async def update_tracker_info(self, info_hash: str, seeders: int, leechers: int) -> None:
        """Overwrite seeder and leecher counts for ``info_hash``.

        An unknown info hash updates nothing and is still a success.

        Raises:
            DatabaseError: If the update fails
        """
        try:
            async with self.session() as session:
                updated = await TorrentRepository(session).update_tracker_stats(info_hash, seeders, leechers)
        except DRIVER_ERRORS as e:
            logger.error(f"Failed to update tracker info for {info_hash}: {e}")
            raise DatabaseError(f"Failed to update tracker info for {info_hash}") from e

        if not updated:
            logger.debug(f"Tracker update for unknown info hash {info_hash}")

    # ── Tracker keys ──────────────────────────────────────

    async def find_valid_tracker_key(self, user_id: int) -> LookupResult[TrackerKey]:
        valid_after = current_timestamp() + self.tracker_key_min_validity
        return await self._lookup(
            f"tracker key for user {user_id}",
            lambda s: TrackerKeyRepository(s).get_valid_for_user(user_id, valid_after),
        )

    async def get_valid_tracker_key(self, user_id: int) -> Optional[TrackerKey]:
        """Get a key of ``user_id`` that stays valid for at least the minimum validity window."""
        return (await self.find_valid_tracker_key(user_id)).unwrap_or_none()

    async def issue_tracker_key(self, tracker_key: TrackerKey, user_id: int) -> None:
        """Store ``tracker_key`` for ``user_id``. Existing keys of the user are left untouched.

        Raises:
            InternalServerError: If the insert fails
        """
        row = TrackerKey(user_id=user_id, key=tracker_key.key, valid_until=tracker_key.valid_until)
        try:
            async with self.session() as session:
                await TrackerKeyRepository(session).create(row)
        except DRIVER_ERRORS as e:
            logger.error(f"Failed to issue tracker key for user {user_id}: {e}")
            raise InternalServerError() from e

    # ── Categories ────────────────────────────────────────

    async def find_category(self, category: str) -> LookupResult[Category]:
        return await self._lookup(f"category {category!r}", lambda s: CategoryRepository(s).get_by_name(category))

    async def verify_category(self, category: str) -> Optional[str]:
        """Return the stored name of ``category`` if it exists."""
        found = (await self.find_category(category)).unwrap_or_none()
        return found.name if found else None

    async def insert_category(self, name: str) -> int:
        """Insert a category and return its id."""
        async with self.session() as session:
            category = await CategoryRepository(session).create(Category(name=name))
        return category.category_id

    # ── Pages ─────────────────────────────────────────────

    async def find_pages(self) -> LookupResult[List[Page]]:
        return await self._lookup("pages", lambda s: PageRepository(s).list())

    async def get_pages(self) -> Optional[List[Page]]:
        """List every page; ``None`` if the query fails, ``[]`` if there are none."""
        return (await self.find_pages()).unwrap_or_none()

    async def find_page_by_route(self, route: str) -> LookupResult[Page]:
        return await self._lookup(f"page by route {route!r}", lambda s: PageRepository(s).get_by_route(route))

    async def get_page_by_route(self, route: str) -> Optional[Page]:
        return (await self.find_page_by_route(route)).unwrap_or_none()

    async def insert_page(self, route: str, title: str, description: Optional[str] = None) -> None:
        """Insert a page under ``route`` in a single statement.

        A constraint violation is reported as a duplicate only when a page is
        found under ``route`` afterwards; any other violation is internal.

        Raises:
            PageAlreadyExistsError: If a page already uses ``route``
            InternalServerError: If the insert fails for another reason
        """
        page = Page(route=route, title=title, description=description, creation_date=current_timestamp())
        try:
            async with self.session() as session:
                await PageRepository(session).create(page)
        except IntegrityError as e:
            if (await self.find_page_by_route(route)).is_found:
                logger.info(f"Rejected duplicate page route {route!r}")
                raise PageAlreadyExistsError(route) from e
            logger.error(f"Constraint violation inserting page {route!r}: {e}")
            raise InternalServerError() from e
        except DRIVER_ERRORS as e:
            logger.error(f"Failed to insert page {route!r}: {e}")
            raise InternalServerError() from e
