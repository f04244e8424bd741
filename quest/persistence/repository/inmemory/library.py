"""In-memory library repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from quest.domain.model import LibraryEntry
from quest.domain.repository import LibraryRepository
from quest.domain.value import GameId, LibraryEntryId, LibraryStatus, UserId
from quest.persistence.database import StorageClient

from .base import InMemoryRepository


class InMemoryLibraryRepository(InMemoryRepository, LibraryRepository):
    """In-memory implementation of LibraryRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._entries: dict[LibraryEntryId, LibraryEntry] = {}

    async def find_by_id(self, entry_id: LibraryEntryId) -> Optional[LibraryEntry]:
        await self._ensure_available()
        return self._entries.get(entry_id)

    async def find_by_user_and_game(
        self, user_id: UserId, game_id: GameId
    ) -> Optional[LibraryEntry]:
        await self._ensure_available()
        for entry in self._entries.values():
            if entry.user_id == user_id and entry.game_id == game_id:
                return entry
        return None

    async def find_by_user(
        self, user_id: UserId, status: Optional[LibraryStatus] = None
    ) -> list[LibraryEntry]:
        await self._ensure_available()
        entries = [
            e
            for e in self._entries.values()
            if e.user_id == user_id and (status is None or e.status == status)
        ]
        return sorted(entries, key=lambda e: e.updated_at, reverse=True)

    async def save(self, entry: LibraryEntry) -> LibraryEntry:
        """Save an entry.

        Raises:
            IntegrityError: If another entry exists for the same (user, game)
        """
        await self._ensure_available()
        existing = await self.find_by_user_and_game(entry.user_id, entry.game_id)
        if existing and existing.id != entry.id:
            raise IntegrityError("Duplicate library entry", None, Exception())
        self._entries[entry.id] = entry
        return entry

    async def delete(self, entry_id: LibraryEntryId) -> None:
        await self._ensure_available()
        self._entries.pop(entry_id, None)
