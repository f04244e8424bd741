"""Integration tests for the PostgreSQL achievement and review repositories.

Require PostgreSQL with the schema migrated (``scripts/run_migrations.py``);
they are skipped when the database cannot be reached. Each step runs in its
own request container, so each step is its own transaction.
"""

from uuid import uuid4

import pytest
import pytest_asyncio

from quest.domain.error import DuplicateUnlockError
from quest.domain.repository import AchievementRepository, GameRepository, UserRepository
from quest.domain.service import AchievementService, ReviewService
from quest.persistence.database import StorageClient
from tests.conftest import make_game, make_user
from tests.di import build_test_container


@pytest_asyncio.fixture
async def integration_container():
    container = build_test_container(unmock={"persistence"})
    storage = await container.get(StorageClient)
    if not storage.is_healthy:
        await container.close()
        pytest.skip("PostgreSQL is not reachable")
    yield container
    await container.close()


async def _seed(container):
    """Commit a user and a game; returns (user, game)."""
    user, game = make_user(f"it-{uuid4().hex[:8]}"), make_game("Integration Quest")
    async with container() as request:
        await (await request.get(UserRepository)).save(user)
        await (await request.get(GameRepository)).save(game)
    return user, game


class TestUnlockCounterIntegration:
    @pytest.mark.asyncio
    async def test_duplicate_unlock_rolls_back_and_counts_once(self, integration_container):
        # Arrange
        user, game = await _seed(integration_container)
        async with integration_container() as request:
            service = await request.get(AchievementService)
            achievement = await service.create_achievement(game.id, "Persisted")

        # Act
        async with integration_container() as request:
            await (await request.get(AchievementService)).unlock(user.id, achievement.id)

        with pytest.raises(DuplicateUnlockError):
            async with integration_container() as request:
                await (await request.get(AchievementService)).unlock(
                    user.id, achievement.id
                )

        # Assert
        async with integration_container() as request:
            stored = await (await request.get(AchievementRepository)).find_by_id(
                achievement.id
            )
            game_row = await (await request.get(GameRepository)).find_by_id(game.id)
        assert stored.total_unlocks == 1
        assert game_row.total_achievements == 1


class TestRatingAggregateIntegration:
    @pytest.mark.asyncio
    async def test_average_is_rebuilt_from_rows(self, integration_container):
        # Arrange
        first_user, game = await _seed(integration_container)
        second_user, _ = await _seed(integration_container)

        # Act
        for user, rating in ((first_user, 4), (second_user, 9)):
            async with integration_container() as request:
                await (await request.get(ReviewService)).create_review(
                    user.id, game.id, rating, "Integration review"
                )

        # Assert
        async with integration_container() as request:
            stored = await (await request.get(GameRepository)).find_by_id(game.id)
        assert stored.average_rating == 7
        assert stored.total_reviews == 2
