"""Unit tests for AchievementService.

Covers the unlock counter and the difficulty rating that are kept in step
with their fact rows.
"""

from uuid import uuid4

import pytest

from quest.domain.error import DuplicateUnlockError, DuplicateVoteError, NotFoundError
from quest.domain.repository import AchievementRepository, GameRepository
from quest.domain.service import AchievementService
from quest.domain.value import AchievementId, GameId, UserId
from tests.conftest import make_game
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_achievement(unit_env):
    game_repo = await unit_env.get(GameRepository)
    achievement_service = await unit_env.get(AchievementService)
    game = await game_repo.save(make_game())
    achievement = await achievement_service.create_achievement(
        game.id, "Steel Soul", points=50, is_missable=True
    )
    return achievement_service, achievement


class TestCreateAchievement:
    @pytest.mark.asyncio
    async def test_create_bumps_game_total(self, unit_env):
        # Arrange
        game_repo = await unit_env.get(GameRepository)
        achievement_service = await unit_env.get(AchievementService)
        game = await game_repo.save(make_game())

        # Act
        await achievement_service.create_achievement(game.id, "Grubfather")
        await achievement_service.create_achievement(game.id, "Dream No More")

        # Assert
        assert (await game_repo.find_by_id(game.id)).total_achievements == 2
        assert len(await achievement_service.get_game_achievements(game.id)) == 2

    @pytest.mark.asyncio
    async def test_create_for_missing_game_raises_not_found(self, unit_env):
        achievement_service = await unit_env.get(AchievementService)

        with pytest.raises(NotFoundError, match="Game not found"):
            await achievement_service.create_achievement(GameId(uuid4()), "Orphan")


class TestUnlock:
    """Tests for unlock method."""

    @pytest.mark.asyncio
    async def test_unlock_increments_total_unlocks(self, unit_env):
        # Arrange
        achievement_service, achievement = await _seed_achievement(unit_env)
        achievement_repo = await unit_env.get(AchievementRepository)

        # Act
        await achievement_service.unlock(UserId(uuid4()), achievement.id)
        await achievement_service.unlock(UserId(uuid4()), achievement.id)

        # Assert
        stored = await achievement_repo.find_by_id(achievement.id)
        assert stored.total_unlocks == 2

    @pytest.mark.asyncio
    async def test_double_unlock_is_rejected_and_counts_once(self, unit_env):
        """A second unlock by the same user must not move the counter."""
        # Arrange
        achievement_service, achievement = await _seed_achievement(unit_env)
        achievement_repo = await unit_env.get(AchievementRepository)
        user_id = UserId(uuid4())
        await achievement_service.unlock(user_id, achievement.id)

        # Act & Assert
        with pytest.raises(DuplicateUnlockError, match="Achievement already unlocked"):
            await achievement_service.unlock(user_id, achievement.id)

        stored = await achievement_repo.find_by_id(achievement.id)
        assert stored.total_unlocks == 1
        assert len(await achievement_service.get_unlocked(user_id)) == 1

    @pytest.mark.asyncio
    async def test_unlock_missing_achievement_raises_not_found(self, unit_env):
        achievement_service = await unit_env.get(AchievementService)

        with pytest.raises(NotFoundError, match="Achievement not found"):
            await achievement_service.unlock(UserId(uuid4()), AchievementId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_unlocked_filters_by_game(self, unit_env):
        # Arrange
        achievement_service, achievement = await _seed_achievement(unit_env)
        user_id = UserId(uuid4())
        await achievement_service.unlock(user_id, achievement.id)

        # Act
        same_game = await achievement_service.get_unlocked(user_id, achievement.game_id)
        other_game = await achievement_service.get_unlocked(user_id, GameId(uuid4()))

        # Assert
        assert [u.achievement_id for u in same_game] == [achievement.id]
        assert other_game == []


class TestDifficultyVotes:
    """Tests for record_difficulty_vote and remove_difficulty_vote."""

    @pytest.mark.asyncio
    async def test_rating_is_rounded_mean_of_votes(self, unit_env):
        """Votes 4 and 8 should give rating 6 with 2 votes."""
        # Arrange
        achievement_service, achievement = await _seed_achievement(unit_env)
        achievement_repo = await unit_env.get(AchievementRepository)

        # Act
        await achievement_service.record_difficulty_vote(UserId(uuid4()), achievement.id, 4)
        await achievement_service.record_difficulty_vote(UserId(uuid4()), achievement.id, 8)

        # Assert
        stored = await achievement_repo.find_by_id(achievement.id)
        assert stored.difficulty_rating == 6
        assert stored.total_difficulty_votes == 2

    @pytest.mark.asyncio
    async def test_half_rounds_up(self, unit_env):
        achievement_service, achievement = await _seed_achievement(unit_env)
        achievement_repo = await unit_env.get(AchievementRepository)

        await achievement_service.record_difficulty_vote(UserId(uuid4()), achievement.id, 6)
        await achievement_service.record_difficulty_vote(UserId(uuid4()), achievement.id, 7)

        stored = await achievement_repo.find_by_id(achievement.id)
        assert stored.difficulty_rating == 7

    @pytest.mark.asyncio
    async def test_duplicate_vote_is_rejected(self, unit_env):
        # Arrange
        achievement_service, achievement = await _seed_achievement(unit_env)
        achievement_repo = await unit_env.get(AchievementRepository)
        user_id = UserId(uuid4())
        await achievement_service.record_difficulty_vote(user_id, achievement.id, 3)

        # Act & Assert
        with pytest.raises(DuplicateVoteError):
            await achievement_service.record_difficulty_vote(user_id, achievement.id, 9)

        stored = await achievement_repo.find_by_id(achievement.id)
        assert stored.difficulty_rating == 3
        assert stored.total_difficulty_votes == 1

    @pytest.mark.asyncio
    async def test_remove_vote_recomputes_and_allows_revote(self, unit_env):
        # Arrange
        achievement_service, achievement = await _seed_achievement(unit_env)
        achievement_repo = await unit_env.get(AchievementRepository)
        user_id = UserId(uuid4())
        await achievement_service.record_difficulty_vote(user_id, achievement.id, 2)

        # Act
        removed = await achievement_service.remove_difficulty_vote(user_id, achievement.id)
        after_remove = await achievement_repo.find_by_id(achievement.id)
        await achievement_service.record_difficulty_vote(user_id, achievement.id, 9)

        # Assert
        assert removed is True
        assert after_remove.difficulty_rating == 0
        assert after_remove.total_difficulty_votes == 0
        assert (await achievement_repo.find_by_id(achievement.id)).difficulty_rating == 9

    @pytest.mark.asyncio
    async def test_vote_on_missing_achievement_raises_not_found(self, unit_env):
        achievement_service = await unit_env.get(AchievementService)

        with pytest.raises(NotFoundError):
            await achievement_service.record_difficulty_vote(
                UserId(uuid4()), AchievementId(uuid4()), 5
            )


class TestImages:
    @pytest.mark.asyncio
    async def test_added_image_is_listed(self, unit_env):
        achievement_service, achievement = await _seed_achievement(unit_env)

        image = await achievement_service.add_image(
            UserId(uuid4()), achievement.id, "https://img.example/steel-soul.png"
        )

        assert await achievement_service.get_images(achievement.id) == [image]
