"""Database connection, session management and storage availability.

Provides the async engine and session factory for PostgreSQL, and the
``StorageClient`` through which repositories run their statements.
"""

import asyncio
import time
from enum import Enum
from typing import Any, Optional

import logfire
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.sql import Executable

from quest.config import Settings
from quest.domain.error import StorageUnavailableError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


class StorageState(str, Enum):
    """Lifecycle state of the storage client."""

    INIT = "init"
    HEALTHY = "healthy"
    UNAVAILABLE = "unavailable"


def is_connection_error(exc: BaseException) -> bool:
    """Whether an exception means the database could not be reached.

    Constraint violations and other statement errors are not connection
    errors and must reach the caller unchanged.
    """
    if isinstance(exc, (OperationalError, InterfaceError)):
        return True
    if isinstance(exc, DBAPIError):
        return bool(exc.connection_invalidated)
    return isinstance(exc, (OSError, TimeoutError))


class StorageClient:
    """Gatekeeper for every statement sent to the database.

    Created once at startup by the DI container. ``connect()`` pings the
    database with retries; afterwards the client tracks whether storage is
    reachable and translates connection failures into
    ``StorageUnavailableError`` so the interface layer can answer 503.
    """

    def __init__(self, engine: AsyncEngine, settings: Settings) -> None:
        self.engine = engine
        self.settings = settings
        self.state = StorageState.INIT
        self._unavailable_since: Optional[float] = None

    @property
    def is_healthy(self) -> bool:
        return self.state == StorageState.HEALTHY

    async def connect(self) -> bool:
        """Ping the database with ``SELECT 1``.

        Retries up to ``database.connect_attempts`` times, doubling the delay
        between attempts. The application starts even when every attempt
        fails; the client is then left unavailable.

        Returns:
            True if the database answered
        """
        db = self.settings.database
        delay = db.retry_backoff_seconds
        attempts = max(1, db.connect_attempts)

        with logfire.span("storage.connect", attempts=attempts):
            for attempt in range(1, attempts + 1):
                try:
                    async with self.engine.connect() as conn:
                        await conn.execute(text("SELECT 1"))
                except Exception as e:
                    if not is_connection_error(e):
                        raise
                    logfire.warn(
                        "Storage connection attempt failed",
                        attempt=attempt,
                        error=str(e),
                    )
                    if attempt < attempts:
                        await asyncio.sleep(delay)
                        delay *= 2
                else:
                    self.mark_healthy()
                    logfire.info("Storage connected", attempt=attempt)
                    return True

            self.mark_unavailable()
            logfire.error("Storage unavailable after retries", attempts=attempts)
            return False

    async def ensure_available(self) -> None:
        """Fail fast while storage is known to be down.

        Once the reconnect cooldown has elapsed, one ``connect()`` pass is
        made before giving up.

        Raises:
            StorageUnavailableError: If storage is unreachable
        """
        if self.state != StorageState.UNAVAILABLE:
            return

        since = self._unavailable_since or 0.0
        cooldown = self.settings.database.reconnect_cooldown_seconds
        if time.monotonic() - since < cooldown:
            raise StorageUnavailableError()

        if not await self.connect():
            raise StorageUnavailableError()

    async def execute(self, session: AsyncSession, stmt: Executable) -> Any:
        """Execute a statement in the request session.

        Args:
            session: SQLAlchemy async session of the current request
            stmt: Statement to run

        Returns:
            The SQLAlchemy result

        Raises:
            StorageUnavailableError: If the connection failed
        """
        await self.ensure_available()
        try:
            result = await session.execute(stmt)
        except Exception as e:
            if not is_connection_error(e):
                raise
            self.mark_unavailable()
            logfire.error("Storage statement failed", error=str(e))
            raise StorageUnavailableError() from e

        self.mark_healthy()
        return result

    def mark_healthy(self) -> None:
        self.state = StorageState.HEALTHY
        self._unavailable_since = None

    def mark_unavailable(self) -> None:
        self.state = StorageState.UNAVAILABLE
        self._unavailable_since = time.monotonic()
