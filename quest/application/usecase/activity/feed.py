"""Activity feed use cases."""

import json
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from quest.application.usecase.base import degrade_to_empty
from quest.config import FeedSettings
from quest.domain.model import Activity
from quest.domain.service import ActivityService
from quest.domain.value import ActivityType, UserId


class ActivityItem(BaseModel):
    """Activity item with its metadata decoded."""

    id: str
    user_id: str
    activity_type: ActivityType
    entity_id: str | None
    metadata: dict[str, Any] | None
    created_at: datetime

    @classmethod
    def from_activity(cls, activity: Activity) -> "ActivityItem":
        return cls(
            id=str(activity.id),
            user_id=str(activity.user_id),
            activity_type=activity.activity_type,
            entity_id=str(activity.entity_id) if activity.entity_id else None,
            metadata=json.loads(activity.metadata) if activity.metadata else None,
            created_at=activity.created_at,
        )


class ActivityFeedRequest(BaseModel):
    """Activity request; ``limit`` falls back to the configured page size."""

    user_id: UUID
    limit: int | None = Field(default=None, ge=1)


class ActivityFeedResponse(BaseModel):
    """Activities, newest first."""

    activities: list[ActivityItem]


class _ActivityUseCase:
    def __init__(
        self, activity_service: ActivityService, feed_settings: FeedSettings
    ) -> None:
        self.activity_service = activity_service
        self.feed_settings = feed_settings

    def _limit(self, requested: int | None) -> int:
        if requested is None:
            return self.feed_settings.default_limit
        return min(requested, self.feed_settings.max_limit)


class GetFeedUseCase(_ActivityUseCase):
    """Use case for the home feed: the caller's activities and those of followed users."""

    async def execute(self, request: ActivityFeedRequest) -> ActivityFeedResponse:
        activities = await degrade_to_empty(
            "get_feed",
            self.activity_service.get_feed(
                UserId(request.user_id), self._limit(request.limit)
            ),
        )
        return ActivityFeedResponse(
            activities=[ActivityItem.from_activity(a) for a in activities]
        )


class GetUserActivityUseCase(_ActivityUseCase):
    """Use case for a single user's public activity timeline."""

    async def execute(self, request: ActivityFeedRequest) -> ActivityFeedResponse:
        activities = await degrade_to_empty(
            "get_user_activity",
            self.activity_service.get_user_activities(
                UserId(request.user_id), self._limit(request.limit)
            ),
        )
        return ActivityFeedResponse(
            activities=[ActivityItem.from_activity(a) for a in activities]
        )
