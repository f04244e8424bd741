"""Unit tests for GuideService."""

from uuid import uuid4

import pytest

from quest.domain.error import AlreadyExistsError, NotAuthorizedError, NotFoundError
from quest.domain.repository import GameRepository
from quest.domain.service import GuideService
from quest.domain.value import Actor, MapMarkerId, UserId
from tests.conftest import make_game
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_guide(unit_env, author: UserId):
    guide_service = await unit_env.get(GuideService)
    game = await (await unit_env.get(GameRepository)).save(make_game())
    guide = await guide_service.create_guide(author, game.id, "All Grubs")
    return guide_service, guide


class TestCreateGuide:
    @pytest.mark.asyncio
    async def test_one_latest_guide_per_author_and_game(self, unit_env):
        # Arrange
        author = UserId(uuid4())
        guide_service, guide = await _seed_guide(unit_env, author)

        # Act & Assert
        with pytest.raises(AlreadyExistsError, match="You already have a guide"):
            await guide_service.create_guide(author, guide.game_id, "All Grubs v2")

        assert len(await guide_service.get_game_guides(guide.game_id)) == 1

    @pytest.mark.asyncio
    async def test_other_author_may_guide_same_game(self, unit_env):
        guide_service, guide = await _seed_guide(unit_env, UserId(uuid4()))

        await guide_service.create_guide(UserId(uuid4()), guide.game_id, "Speedrun")

        assert len(await guide_service.get_game_guides(guide.game_id)) == 2


class TestUpdateGuide:
    @pytest.mark.asyncio
    async def test_update_bumps_version_in_place(self, unit_env):
        # Arrange
        author = UserId(uuid4())
        guide_service, guide = await _seed_guide(unit_env, author)

        # Act
        updated = await guide_service.update_guide(
            Actor(user_id=author), guide.id, description="Every grub, in order"
        )

        # Assert
        assert updated.id == guide.id
        assert updated.version == 2
        assert updated.title == "All Grubs"
        assert updated.is_latest is True

    @pytest.mark.asyncio
    async def test_view_counts_once_per_read(self, unit_env):
        guide_service, guide = await _seed_guide(unit_env, UserId(uuid4()))

        await guide_service.view_guide(guide.id)
        viewed, markers = await guide_service.view_guide(guide.id)

        assert viewed.views == 2
        assert markers == []


class TestMapMarkers:
    @pytest.mark.asyncio
    async def test_owner_adds_and_removes_marker(self, unit_env):
        # Arrange
        author = UserId(uuid4())
        guide_service, guide = await _seed_guide(unit_env, author)
        actor = Actor(user_id=author)

        # Act
        marker = await guide_service.add_marker(actor, guide.id, "Grub #1", 120, 340)
        _, markers = await guide_service.view_guide(guide.id)
        await guide_service.delete_marker(actor, marker.id)
        _, after_delete = await guide_service.view_guide(guide.id)

        # Assert
        assert markers == [marker]
        assert after_delete == []

    @pytest.mark.asyncio
    async def test_non_owner_cannot_add_marker(self, unit_env):
        guide_service, guide = await _seed_guide(unit_env, UserId(uuid4()))

        with pytest.raises(NotAuthorizedError):
            await guide_service.add_marker(
                Actor(user_id=UserId(uuid4())), guide.id, "Vandal", 0, 0
            )

    @pytest.mark.asyncio
    async def test_delete_missing_marker_raises_not_found(self, unit_env):
        guide_service = await unit_env.get(GuideService)

        with pytest.raises(NotFoundError, match="Marker not found"):
            await guide_service.delete_marker(
                Actor(user_id=UserId(uuid4())), MapMarkerId(uuid4())
            )
