"""Activity use cases."""

from .feed import (
    ActivityFeedRequest,
    ActivityFeedResponse,
    ActivityItem,
    GetFeedUseCase,
    GetUserActivityUseCase,
)

__all__ = [
    "ActivityFeedRequest",
    "ActivityFeedResponse",
    "ActivityItem",
    "GetFeedUseCase",
    "GetUserActivityUseCase",
]
