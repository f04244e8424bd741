"""In-memory guide and map marker repositories for testing."""

from typing import Optional

from quest.domain.model import Guide, MapMarker
from quest.domain.repository import GuideRepository, MapMarkerRepository
from quest.domain.value import GameId, GuideId, MapMarkerId, UserId
from quest.persistence.database import StorageClient

from .base import InMemoryRepository


class InMemoryGuideRepository(InMemoryRepository, GuideRepository):
    """In-memory implementation of GuideRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._guides: dict[GuideId, Guide] = {}

    async def find_by_id(self, guide_id: GuideId) -> Optional[Guide]:
        await self._ensure_available()
        return self._guides.get(guide_id)

    async def find_latest_by_user_and_game(
        self, user_id: UserId, game_id: GameId
    ) -> Optional[Guide]:
        await self._ensure_available()
        for guide in self._guides.values():
            if guide.user_id == user_id and guide.game_id == game_id and guide.is_latest:
                return guide
        return None

    async def find_latest_by_game(self, game_id: GameId) -> list[Guide]:
        await self._ensure_available()
        guides = [
            g for g in self._guides.values() if g.game_id == game_id and g.is_latest
        ]
        return sorted(guides, key=lambda g: g.upvotes, reverse=True)

    async def save(self, guide: Guide) -> Guide:
        await self._ensure_available()
        self._guides[guide.id] = guide
        return guide

    async def increment_views(self, guide_id: GuideId) -> None:
        await self._ensure_available()
        guide = self._guides.get(guide_id)
        if guide:
            self._guides[guide_id] = guide.model_copy(update={"views": guide.views + 1})


class InMemoryMapMarkerRepository(InMemoryRepository, MapMarkerRepository):
    """In-memory implementation of MapMarkerRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._markers: dict[MapMarkerId, MapMarker] = {}

    async def find_by_id(self, marker_id: MapMarkerId) -> Optional[MapMarker]:
        await self._ensure_available()
        return self._markers.get(marker_id)

    async def find_by_guide(self, guide_id: GuideId) -> list[MapMarker]:
        await self._ensure_available()
        markers = [m for m in self._markers.values() if m.guide_id == guide_id]
        return sorted(markers, key=lambda m: m.created_at)

    async def save(self, marker: MapMarker) -> MapMarker:
        await self._ensure_available()
        self._markers[marker.id] = marker
        return marker

    async def delete(self, marker_id: MapMarkerId) -> None:
        await self._ensure_available()
        self._markers.pop(marker_id, None)
