"""Activity repository interface."""

from abc import ABC, abstractmethod

from quest.domain.model import Activity
from quest.domain.value import UserId


class ActivityRepository(ABC):
    """Append-only repository for the activity log."""

    @abstractmethod
    async def save(self, activity: Activity) -> Activity:
        pass

    @abstractmethod
    async def find_by_users(self, user_ids: list[UserId], limit: int = 50) -> list[Activity]:
        """List activities of any of the given users, newest first.

        Args:
            user_ids: Users whose activities to include
            limit: Maximum number of activities

        Returns:
            Activities, empty when ``user_ids`` is empty
        """
        pass
