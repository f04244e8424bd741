"""Unit tests for ReviewService and the game rating aggregates."""

from uuid import uuid4

import pytest

from quest.domain.error import AlreadyExistsError, NotAuthorizedError, NotFoundError
from quest.domain.repository import ActivityRepository, GameRepository
from quest.domain.service import ReviewService
from quest.domain.value import ActivityType, Actor, GameId, UserId, UserRole
from tests.conftest import make_game
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_game(unit_env):
    game_repo = await unit_env.get(GameRepository)
    return game_repo, await game_repo.save(make_game())


class TestCreateReview:
    """Tests for create_review method."""

    @pytest.mark.asyncio
    async def test_aggregates_follow_reviews(self, unit_env):
        """Ratings 7 and 8 should give average 8 (7.5 rounds half up)."""
        # Arrange
        review_service = await unit_env.get(ReviewService)
        game_repo, game = await _seed_game(unit_env)

        # Act
        await review_service.create_review(UserId(uuid4()), game.id, 7, "Good")
        await review_service.create_review(UserId(uuid4()), game.id, 8, "Great")

        # Assert
        stored = await game_repo.find_by_id(game.id)
        assert stored.average_rating == 8
        assert stored.total_reviews == 2
        assert stored.total_ratings == 2

    @pytest.mark.asyncio
    async def test_second_review_by_same_user_is_a_conflict(self, unit_env):
        # Arrange
        review_service = await unit_env.get(ReviewService)
        game_repo, game = await _seed_game(unit_env)
        user_id = UserId(uuid4())
        await review_service.create_review(user_id, game.id, 9, "Loved it")

        # Act & Assert
        with pytest.raises(AlreadyExistsError, match="You already reviewed this game"):
            await review_service.create_review(user_id, game.id, 1, "Changed my mind")

        stored = await game_repo.find_by_id(game.id)
        assert stored.total_reviews == 1
        assert stored.average_rating == 9

    @pytest.mark.asyncio
    async def test_review_for_missing_game_raises_not_found(self, unit_env):
        review_service = await unit_env.get(ReviewService)

        with pytest.raises(NotFoundError, match="Game not found"):
            await review_service.create_review(
                UserId(uuid4()), GameId(uuid4()), 5, "Where is it?"
            )

    @pytest.mark.asyncio
    async def test_review_is_logged_as_activity(self, unit_env):
        review_service = await unit_env.get(ReviewService)
        activity_repo = await unit_env.get(ActivityRepository)
        _, game = await _seed_game(unit_env)
        user_id = UserId(uuid4())

        review = await review_service.create_review(user_id, game.id, 6, "Fine")

        activities = await activity_repo.find_by_users([user_id])
        assert len(activities) == 1
        assert activities[0].activity_type == ActivityType.REVIEW
        assert activities[0].entity_id == review.id


class TestUpdateAndDeleteReview:
    """Edits and deletes keep the aggregates in step."""

    @pytest.mark.asyncio
    async def test_rating_change_recomputes_average(self, unit_env):
        # Arrange
        review_service = await unit_env.get(ReviewService)
        game_repo, game = await _seed_game(unit_env)
        author = UserId(uuid4())
        review = await review_service.create_review(author, game.id, 4, "Meh")

        # Act
        updated = await review_service.update_review(
            Actor(user_id=author), review.id, rating=10
        )

        # Assert
        assert updated.rating == 10
        assert updated.content == "Meh"
        assert (await game_repo.find_by_id(game.id)).average_rating == 10

    @pytest.mark.asyncio
    async def test_delete_resets_aggregates(self, unit_env):
        # Arrange
        review_service = await unit_env.get(ReviewService)
        game_repo, game = await _seed_game(unit_env)
        author = UserId(uuid4())
        review = await review_service.create_review(author, game.id, 6, "Ok")

        # Act
        await review_service.delete_review(Actor(user_id=author), review.id)

        # Assert
        stored = await game_repo.find_by_id(game.id)
        assert stored.average_rating == 0
        assert stored.total_reviews == 0
        assert await review_service.get_game_reviews(game.id) == []

    @pytest.mark.asyncio
    async def test_non_owner_cannot_edit(self, unit_env):
        review_service = await unit_env.get(ReviewService)
        _, game = await _seed_game(unit_env)
        review = await review_service.create_review(UserId(uuid4()), game.id, 6, "Ok")

        with pytest.raises(NotAuthorizedError):
            await review_service.update_review(
                Actor(user_id=UserId(uuid4())), review.id, rating=1
            )

    @pytest.mark.asyncio
    async def test_admin_can_delete_any_review(self, unit_env):
        review_service = await unit_env.get(ReviewService)
        _, game = await _seed_game(unit_env)
        review = await review_service.create_review(UserId(uuid4()), game.id, 6, "Ok")

        await review_service.delete_review(
            Actor(user_id=UserId(uuid4()), role=UserRole.ADMIN), review.id
        )

        with pytest.raises(NotFoundError):
            await review_service.get_review(review.id)
