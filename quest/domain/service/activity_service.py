"""Activity log domain service."""

import json
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

import logfire

from quest.domain.model import Activity
from quest.domain.repository import ActivityRepository, FollowerRepository
from quest.domain.value import ActivityId, ActivityType, UserId

from .base import Service


class ActivityService(Service):
    """Appends to and reads from the activity log."""

    def __init__(
        self,
        activity_repository: ActivityRepository,
        follower_repository: FollowerRepository,
    ) -> None:
        self.activity_repository = activity_repository
        self.follower_repository = follower_repository

    async def log(
        self,
        user_id: UserId,
        activity_type: ActivityType,
        entity_id: Optional[UUID] = None,
        metadata: Optional[dict[str, Any]] = None,
    ) -> Activity:
        """Append an activity.

        Args:
            user_id: The acting user
            activity_type: What happened
            entity_id: The row the activity refers to
            metadata: Extra details, stored as JSON text

        Returns:
            The stored activity
        """
        activity = Activity(
            id=ActivityId(uuid4()),
            user_id=user_id,
            activity_type=activity_type,
            entity_id=entity_id,
            metadata=json.dumps(metadata, default=str) if metadata else None,
            created_at=datetime.now(),
        )
        saved = await self.activity_repository.save(activity)
        logfire.info(
            "Activity logged",
            user_id=str(user_id),
            activity_type=activity_type.value,
            entity_id=str(entity_id) if entity_id else None,
        )
        return saved

    async def get_user_activities(self, user_id: UserId, limit: int = 50) -> list[Activity]:
        """A single user's activities, newest first."""
        return await self.activity_repository.find_by_users([user_id], limit)

    async def get_feed(self, user_id: UserId, limit: int = 50) -> list[Activity]:
        """Activities of the users ``user_id`` follows plus their own, newest first."""
        with logfire.span("activity_service.get_feed", user_id=str(user_id)):
            following = await self.follower_repository.find_following_ids(user_id)
            return await self.activity_repository.find_by_users(
                [user_id, *following], limit
            )
