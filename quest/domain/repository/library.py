"""Library repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quest.domain.model import LibraryEntry
from quest.domain.value import GameId, LibraryEntryId, LibraryStatus, UserId


class LibraryRepository(ABC):
    """Repository for LibraryEntry entity."""

    @abstractmethod
    async def find_by_id(self, entry_id: LibraryEntryId) -> Optional[LibraryEntry]:
        pass

    @abstractmethod
    async def find_by_user_and_game(
        self, user_id: UserId, game_id: GameId
    ) -> Optional[LibraryEntry]:
        """Find a user's entry for a game.

        Args:
            user_id: The user's ID
            game_id: The game's ID

        Returns:
            The entry if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, status: Optional[LibraryStatus] = None
    ) -> list[LibraryEntry]:
        """List a user's entries, most recently updated first.

        Args:
            user_id: The user's ID
            status: Only return entries with this status

        Returns:
            Matching entries
        """
        pass

    @abstractmethod
    async def save(self, entry: LibraryEntry) -> LibraryEntry:
        """Save an entry (create or update).

        Raises:
            IntegrityError: If creating a second entry for the same (user, game)
        """
        pass

    @abstractmethod
    async def delete(self, entry_id: LibraryEntryId) -> None:
        pass
