"""Shared plumbing for PostgreSQL repositories."""

from typing import Any, Callable, Dict, Optional, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from quest.persistence.database import StorageClient

T = TypeVar("T")


class PostgresRepository:
    """Base class for PostgreSQL repositories.

    All statements go through the storage client so connection failures
    surface as ``StorageUnavailableError``.
    """

    def __init__(self, session: AsyncSession, storage: StorageClient) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            storage: Storage client guarding the connection
        """
        self.session = session
        self.storage = storage

    async def _execute(self, stmt: Executable) -> Any:
        return await self.storage.execute(self.session, stmt)

    async def _write(self, stmt: Executable) -> Any:
        """Execute a mutating statement and flush the session."""
        result = await self._execute(stmt)
        await self.session.flush()
        return result

    async def _fetch_one(
        self, stmt: Executable, mapper: Callable[[Dict[str, Any]], T]
    ) -> Optional[T]:
        result = await self._execute(stmt)
        row = result.mappings().first()
        return mapper(dict(row)) if row else None

    async def _fetch_all(
        self, stmt: Executable, mapper: Callable[[Dict[str, Any]], T]
    ) -> list[T]:
        result = await self._execute(stmt)
        return [mapper(dict(row)) for row in result.mappings().all()]
