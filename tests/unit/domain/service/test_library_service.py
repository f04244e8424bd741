"""Unit tests for LibraryService."""

from uuid import uuid4

import pytest

from quest.domain.error import AlreadyExistsError, NotAuthorizedError, NotFoundError
from quest.domain.repository import ActivityRepository, GameRepository, LibraryRepository
from quest.domain.service import LibraryService
from quest.domain.value import ActivityType, Actor, GameId, LibraryStatus, UserId
from tests.conftest import make_game
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAddToLibrary:
    """Tests for add_to_library method."""

    @pytest.mark.asyncio
    async def test_double_add_is_rejected_with_one_row(self, unit_env):
        """Adding the same game twice should fail and keep a single entry."""
        # Arrange
        library_service = await unit_env.get(LibraryService)
        library_repo = await unit_env.get(LibraryRepository)
        game = await (await unit_env.get(GameRepository)).save(make_game())
        user_id = UserId(uuid4())
        await library_service.add_to_library(user_id, game.id)

        # Act & Assert
        with pytest.raises(AlreadyExistsError, match="Game already in library"):
            await library_service.add_to_library(user_id, game.id, LibraryStatus.PLAYING)

        entries = await library_repo.find_by_user(user_id)
        assert len(entries) == 1
        assert entries[0].status == LibraryStatus.BACKLOG

    @pytest.mark.asyncio
    async def test_missing_game_raises_not_found(self, unit_env):
        library_service = await unit_env.get(LibraryService)

        with pytest.raises(NotFoundError, match="Game not found"):
            await library_service.add_to_library(UserId(uuid4()), GameId(uuid4()))

    @pytest.mark.asyncio
    async def test_adding_completed_game_logs_both_activities(self, unit_env):
        # Arrange
        library_service = await unit_env.get(LibraryService)
        activity_repo = await unit_env.get(ActivityRepository)
        game = await (await unit_env.get(GameRepository)).save(make_game())
        user_id = UserId(uuid4())

        # Act
        await library_service.add_to_library(user_id, game.id, LibraryStatus.COMPLETED)

        # Assert
        kinds = {a.activity_type for a in await activity_repo.find_by_users([user_id])}
        assert kinds == {ActivityType.GAME_ADDED, ActivityType.GAME_COMPLETED}


class TestUpdateEntry:
    """Tests for update_entry and remove_entry."""

    @pytest.mark.asyncio
    async def test_any_status_transition_is_allowed(self, unit_env):
        # Arrange
        library_service = await unit_env.get(LibraryService)
        game = await (await unit_env.get(GameRepository)).save(make_game())
        user_id = UserId(uuid4())
        entry = await library_service.add_to_library(
            user_id, game.id, LibraryStatus.WISHLIST
        )
        actor = Actor(user_id=user_id)

        # Act
        dropped = await library_service.update_entry(
            actor, entry.id, status=LibraryStatus.DROPPED
        )
        back = await library_service.update_entry(
            actor, entry.id, status=LibraryStatus.WISHLIST, is_favorite=True
        )

        # Assert
        assert dropped.status == LibraryStatus.DROPPED
        assert back.status == LibraryStatus.WISHLIST
        assert back.is_favorite is True

    @pytest.mark.asyncio
    async def test_completing_logs_game_completed(self, unit_env):
        # Arrange
        library_service = await unit_env.get(LibraryService)
        activity_repo = await unit_env.get(ActivityRepository)
        game = await (await unit_env.get(GameRepository)).save(make_game())
        user_id = UserId(uuid4())
        entry = await library_service.add_to_library(user_id, game.id)

        # Act
        await library_service.update_entry(
            Actor(user_id=user_id), entry.id, status=LibraryStatus.COMPLETED
        )

        # Assert
        activities = await activity_repo.find_by_users([user_id])
        assert activities[0].activity_type == ActivityType.GAME_COMPLETED
        assert activities[0].entity_id == game.id

    @pytest.mark.asyncio
    async def test_non_owner_cannot_remove(self, unit_env):
        library_service = await unit_env.get(LibraryService)
        game = await (await unit_env.get(GameRepository)).save(make_game())
        entry = await library_service.add_to_library(UserId(uuid4()), game.id)

        with pytest.raises(NotAuthorizedError):
            await library_service.remove_entry(Actor(user_id=UserId(uuid4())), entry.id)

    @pytest.mark.asyncio
    async def test_get_library_filters_by_status(self, unit_env):
        # Arrange
        library_service = await unit_env.get(LibraryService)
        game_repo = await unit_env.get(GameRepository)
        user_id = UserId(uuid4())
        playing = await game_repo.save(make_game("Celeste"))
        backlog = await game_repo.save(make_game("Hades"))
        await library_service.add_to_library(user_id, playing.id, LibraryStatus.PLAYING)
        await library_service.add_to_library(user_id, backlog.id)

        # Act
        entries = await library_service.get_library(user_id, LibraryStatus.PLAYING)

        # Assert
        assert [e.game_id for e in entries] == [playing.id]
