"""Shared plumbing for in-memory repositories."""

from typing import Optional

from quest.persistence.database import StorageClient

from .storage import InMemoryStorageClient


class InMemoryRepository:
    """Base class for in-memory repositories.

    Every public call asks the storage client first, so a client flipped
    with ``mark_unavailable()`` makes reads and writes raise
    ``StorageUnavailableError`` just as the PostgreSQL repositories do.
    """

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        self.storage = storage or InMemoryStorageClient()

    async def _ensure_available(self) -> None:
        await self.storage.ensure_available()
