"""Unit tests for the activity feed use cases."""

from uuid import uuid4

import pytest

from quest.application.usecase.activity import (
    ActivityFeedRequest,
    GetFeedUseCase,
    GetUserActivityUseCase,
)
from quest.config import FeedSettings
from quest.domain.error import StorageUnavailableError
from quest.domain.service import ActivityService
from quest.domain.value import ActivityType, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class _RecordingActivityService:
    def __init__(self) -> None:
        self.limits: list[int] = []

    async def get_feed(self, user_id, limit=50):
        self.limits.append(limit)
        return []


class _DownActivityService:
    async def get_feed(self, user_id, limit=50):
        raise StorageUnavailableError()


class TestFeedLimit:
    """Page size falls back to the default and is capped at the maximum."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("requested", "expected"),
        [(None, 50), (10, 10), (100, 100), (500, 100)],
    )
    async def test_limit_is_clamped(self, requested, expected):
        service = _RecordingActivityService()
        use_case = GetFeedUseCase(activity_service=service, feed_settings=FeedSettings())

        await use_case.execute(ActivityFeedRequest(user_id=uuid4(), limit=requested))

        assert service.limits == [expected]

    @pytest.mark.asyncio
    async def test_feed_degrades_to_empty(self):
        use_case = GetFeedUseCase(
            activity_service=_DownActivityService(), feed_settings=FeedSettings()
        )

        response = await use_case.execute(ActivityFeedRequest(user_id=uuid4()))

        assert response.activities == []


class TestUserActivity:
    @pytest.mark.asyncio
    async def test_metadata_is_decoded(self, unit_env):
        # Arrange
        activity_service = await unit_env.get(ActivityService)
        use_case = await unit_env.get(GetUserActivityUseCase)
        user_id = UserId(uuid4())
        await activity_service.log(
            user_id, ActivityType.REVIEW, uuid4(), metadata={"rating": 9}
        )

        # Act
        response = await use_case.execute(ActivityFeedRequest(user_id=user_id))

        # Assert
        assert len(response.activities) == 1
        assert response.activities[0].metadata == {"rating": 9}
        assert response.activities[0].activity_type == ActivityType.REVIEW
