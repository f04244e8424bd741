"""Guide and map marker repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from quest.domain.model import Guide, MapMarker
from quest.domain.value import GameId, GuideId, MapMarkerId, UserId


class GuideRepository(ABC):
    """Repository for Guide entity."""

    @abstractmethod
    async def find_by_id(self, guide_id: GuideId) -> Optional[Guide]:
        pass

    @abstractmethod
    async def find_latest_by_user_and_game(
        self, user_id: UserId, game_id: GameId
    ) -> Optional[Guide]:
        """Find the latest guide an author wrote for a game."""
        pass

    @abstractmethod
    async def find_latest_by_game(self, game_id: GameId) -> list[Guide]:
        """List the latest version of each guide for a game, most upvoted first."""
        pass

    @abstractmethod
    async def save(self, guide: Guide) -> Guide:
        """Save a guide (create or update)."""
        pass

    @abstractmethod
    async def increment_views(self, guide_id: GuideId) -> None:
        """Atomically increment views by 1."""
        pass


class MapMarkerRepository(ABC):
    """Repository for MapMarker entity."""

    @abstractmethod
    async def find_by_id(self, marker_id: MapMarkerId) -> Optional[MapMarker]:
        pass

    @abstractmethod
    async def find_by_guide(self, guide_id: GuideId) -> list[MapMarker]:
        pass

    @abstractmethod
    async def save(self, marker: MapMarker) -> MapMarker:
        pass

    @abstractmethod
    async def delete(self, marker_id: MapMarkerId) -> None:
        pass
