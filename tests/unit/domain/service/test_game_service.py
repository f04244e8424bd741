"""Unit tests for GameService."""

from uuid import uuid4

import pytest

from quest.domain.error import AlreadyExistsError, NotFoundError
from quest.domain.service import GameService
from quest.domain.value import GameId, TagCategory
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateGame:
    @pytest.mark.asyncio
    async def test_new_game_starts_with_zero_aggregates(self, unit_env):
        game_service = await unit_env.get(GameService)

        game = await game_service.create_game("Celeste", developer="Maddy Makes Games")

        assert game.average_rating == 0
        assert game.total_reviews == 0
        assert game.total_achievements == 0

    @pytest.mark.asyncio
    async def test_game_details_include_platforms_and_tags(self, unit_env):
        # Arrange
        game_service = await unit_env.get(GameService)
        pc = await game_service.create_platform("PC")
        switch = await game_service.create_platform("Nintendo Switch")
        tag = await game_service.create_tag("Metroidvania", TagCategory.GENRE)

        # Act
        game = await game_service.create_game(
            "Hollow Knight", platform_ids=[pc.id, switch.id], tag_ids=[tag.id]
        )
        _, platforms, tags = await game_service.get_game_details(game.id)

        # Assert
        assert {p.name.root for p in platforms} == {"PC", "Nintendo Switch"}
        assert [t.name.root for t in tags] == ["Metroidvania"]

    @pytest.mark.asyncio
    async def test_missing_game_raises_not_found(self, unit_env):
        game_service = await unit_env.get(GameService)

        with pytest.raises(NotFoundError, match="Game not found"):
            await game_service.get_game(GameId(uuid4()))


class TestCatalogue:
    @pytest.mark.asyncio
    async def test_duplicate_platform_name_is_a_conflict(self, unit_env):
        game_service = await unit_env.get(GameService)
        await game_service.create_platform("PC")

        with pytest.raises(AlreadyExistsError):
            await game_service.create_platform("PC")

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, unit_env):
        game_service = await unit_env.get(GameService)
        await game_service.create_game("Hollow Knight")
        await game_service.create_game("Hades")

        results = await game_service.search_games("hollow")

        assert [g.title for g in results] == ["Hollow Knight"]
