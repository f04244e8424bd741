"""Unit tests for ActivityService."""

import json
from uuid import uuid4

import pytest

from quest.domain.repository import UserRepository
from quest.domain.service import ActivityService, UserService
from quest.domain.value import ActivityType
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLog:
    @pytest.mark.asyncio
    async def test_metadata_is_stored_as_json_text(self, unit_env):
        activity_service = await unit_env.get(ActivityService)
        game_id = uuid4()

        activity = await activity_service.log(
            make_user().id, ActivityType.REVIEW, uuid4(), metadata={"game_id": game_id}
        )

        assert json.loads(activity.metadata) == {"game_id": str(game_id)}


class TestGetFeed:
    """Tests for get_feed method."""

    @pytest.mark.asyncio
    async def test_feed_holds_own_and_followed_activity(self, unit_env):
        # Arrange
        activity_service = await unit_env.get(ActivityService)
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))
        carol = await user_repo.save(make_user("carol"))
        await user_service.follow(alice.id, bob.id)

        await activity_service.log(alice.id, ActivityType.GAME_ADDED, uuid4())
        await activity_service.log(bob.id, ActivityType.GUIDE, uuid4())
        await activity_service.log(carol.id, ActivityType.REVIEW, uuid4())

        # Act
        feed = await activity_service.get_feed(alice.id)

        # Assert - newest first, carol is not followed
        assert [a.user_id for a in feed] == [bob.id, alice.id]

    @pytest.mark.asyncio
    async def test_feed_respects_limit(self, unit_env):
        activity_service = await unit_env.get(ActivityService)
        user = make_user()
        for _ in range(5):
            await activity_service.log(user.id, ActivityType.ACHIEVEMENT, uuid4())

        assert len(await activity_service.get_feed(user.id, limit=3)) == 3
