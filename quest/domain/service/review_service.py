"""Review domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from quest.domain.error import AlreadyExistsError, NotFoundError
from quest.domain.model import Review
from quest.domain.repository import GameRepository, ReviewRepository
from quest.domain.value import ActivityType, Actor, GameId, ReviewId, UserId

from .activity_service import ActivityService
from .aggregate_service import AggregateService
from .base import Service, ensure_can_modify

ALREADY_REVIEWED = "You already reviewed this game"


class ReviewService(Service):
    """Domain service for reviews and the game rating aggregates they feed."""

    def __init__(
        self,
        review_repository: ReviewRepository,
        game_repository: GameRepository,
        aggregate_service: AggregateService,
        activity_service: ActivityService,
    ) -> None:
        """Initialize review service.

        Args:
            review_repository: Review repository
            game_repository: Game repository
            aggregate_service: Aggregate recomputation service
            activity_service: Activity log service
        """
        self.review_repository = review_repository
        self.game_repository = game_repository
        self.aggregate_service = aggregate_service
        self.activity_service = activity_service

    async def create_review(
        self,
        user_id: UserId,
        game_id: GameId,
        rating: int,
        content: str,
        title: Optional[str] = None,
    ) -> Review:
        """Create a review and refresh the game's rating aggregates.

        Args:
            user_id: The reviewer
            game_id: The reviewed game
            rating: Rating from 1 to 10
            content: Review body
            title: Optional headline

        Returns:
            The created review

        Raises:
            NotFoundError: If the game does not exist
            AlreadyExistsError: If the user already reviewed the game
        """
        with logfire.span(
            "review_service.create_review", user_id=str(user_id), game_id=str(game_id)
        ):
            await self._lock_game(game_id)

            if await self.review_repository.find_by_user_and_game(user_id, game_id):
                raise AlreadyExistsError(ALREADY_REVIEWED)

            now = datetime.now()
            review = Review(
                id=ReviewId(uuid4()),
                user_id=user_id,
                game_id=game_id,
                rating=rating,
                title=title,
                content=content,
                created_at=now,
                updated_at=now,
            )
            try:
                saved = await self.review_repository.save(review)
            except IntegrityError:
                logfire.warn("Duplicate review insert", user_id=str(user_id))
                raise AlreadyExistsError(ALREADY_REVIEWED)

            await self.aggregate_service.recompute_game_rating(game_id)
            await self.activity_service.log(
                user_id,
                ActivityType.REVIEW,
                saved.id,
                metadata={"game_id": game_id, "rating": rating},
            )
            return saved

    async def update_review(
        self,
        actor: Actor,
        review_id: ReviewId,
        rating: Optional[int] = None,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Review:
        """Edit a review; the game's aggregates follow a rating change.

        Raises:
            NotFoundError: If the review does not exist
            NotAuthorizedError: If the actor does not own the review
        """
        with logfire.span("review_service.update_review", review_id=str(review_id)):
            review = await self.get_review(review_id)
            ensure_can_modify(actor, review.user_id, "review", review_id)
            await self._lock_game(review.game_id)

            updates = {
                key: value
                for key, value in {
                    "rating": rating,
                    "title": title,
                    "content": content,
                }.items()
                if value is not None
            }
            updated = Review.model_validate(
                {**review.model_dump(), **updates, "updated_at": datetime.now()}
            )
            saved = await self.review_repository.save(updated)

            if updated.rating != review.rating:
                await self.aggregate_service.recompute_game_rating(review.game_id)
            return saved

    async def delete_review(self, actor: Actor, review_id: ReviewId) -> None:
        """Delete a review and refresh the game's aggregates.

        Raises:
            NotFoundError: If the review does not exist
            NotAuthorizedError: If the actor does not own the review
        """
        with logfire.span("review_service.delete_review", review_id=str(review_id)):
            review = await self.get_review(review_id)
            ensure_can_modify(actor, review.user_id, "review", review_id)
            await self._lock_game(review.game_id)
            await self.review_repository.delete(review_id)
            await self.aggregate_service.recompute_game_rating(review.game_id)

    async def get_review(self, review_id: ReviewId) -> Review:
        review = await self.review_repository.find_by_id(review_id)
        if not review:
            raise NotFoundError("Review", str(review_id))
        return review

    async def get_game_reviews(
        self, game_id: GameId, limit: int = 20, offset: int = 0
    ) -> list[Review]:
        return await self.review_repository.find_by_game(game_id, limit, offset)

    async def _lock_game(self, game_id: GameId) -> None:
        if not await self.game_repository.find_by_id_for_update(game_id):
            raise NotFoundError("Game", str(game_id))
