"""Game and catalogue repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from quest.domain.model import Game, Platform, Tag
from quest.domain.value import GameId, PlatformId, TagId, TagName


class GameRepository(ABC):
    """Repository for Game aggregate.

    Aggregate columns are only written through the dedicated update and
    increment methods, never through ``save`` on an existing row.
    """

    @abstractmethod
    async def find_by_id(self, game_id: GameId) -> Optional[Game]:
        """Find a game by ID.

        Args:
            game_id: The game's unique identifier

        Returns:
            The game if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, game_id: GameId) -> Optional[Game]:
        """Find a game and lock its row until the transaction ends.

        Used to serialize aggregate recomputation for one game.
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 50, offset: int = 0) -> list[Game]:
        """List games, newest first."""
        pass

    @abstractmethod
    async def search(self, query: str, limit: int = 20) -> list[Game]:
        """Case-insensitive substring search on title."""
        pass

    @abstractmethod
    async def save(self, game: Game) -> Game:
        """Create a game."""
        pass

    @abstractmethod
    async def update_rating_stats(
        self,
        game_id: GameId,
        average_rating: int,
        total_ratings: int,
        total_reviews: int,
    ) -> None:
        """Overwrite the review-derived aggregates."""
        pass

    @abstractmethod
    async def increment_achievements(self, game_id: GameId) -> None:
        """Atomically increment total_achievements by 1."""
        pass

    @abstractmethod
    async def add_platform(self, game_id: GameId, platform_id: PlatformId) -> None:
        pass

    @abstractmethod
    async def add_tag(self, game_id: GameId, tag_id: TagId) -> None:
        pass

    @abstractmethod
    async def find_platforms(self, game_id: GameId) -> list[Platform]:
        pass

    @abstractmethod
    async def find_tags(self, game_id: GameId) -> list[Tag]:
        pass


class PlatformRepository(ABC):
    """Repository for platforms."""

    @abstractmethod
    async def find_all(self) -> list[Platform]:
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Platform]:
        pass

    @abstractmethod
    async def save(self, platform: Platform) -> Platform:
        """Create a platform.

        Raises:
            IntegrityError: If the name is taken
        """
        pass


class TagRepository(ABC):
    """Repository for tags."""

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        pass

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Create a tag.

        Raises:
            IntegrityError: If the name is taken
        """
        pass
