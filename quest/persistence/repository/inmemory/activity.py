"""In-memory activity repository for testing."""

from typing import Optional

from quest.domain.model import Activity
from quest.domain.repository import ActivityRepository
from quest.domain.value import UserId
from quest.persistence.database import StorageClient

from .base import InMemoryRepository


class InMemoryActivityRepository(InMemoryRepository, ActivityRepository):
    """In-memory implementation of ActivityRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._activities: list[Activity] = []

    async def save(self, activity: Activity) -> Activity:
        await self._ensure_available()
        self._activities.append(activity)
        return activity

    async def find_by_users(self, user_ids: list[UserId], limit: int = 50) -> list[Activity]:
        await self._ensure_available()
        wanted = set(user_ids)
        # Insertion order breaks ties between equal timestamps
        indexed = [
            (i, a) for i, a in enumerate(self._activities) if a.user_id in wanted
        ]
        indexed.sort(key=lambda pair: (pair[1].created_at, pair[0]), reverse=True)
        return [a for _, a in indexed[:limit]]
