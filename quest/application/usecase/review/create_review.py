"""Create review use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from quest.application.usecase.base import BaseUseCase
from quest.domain.service import ReviewService
from quest.domain.value import GameId, UserId


class CreateReviewRequest(BaseModel):
    """Create review request."""

    user_id: UUID  # From authenticated user
    game_id: UUID
    rating: int = Field(ge=1, le=10)
    title: str | None = Field(default=None, max_length=255)
    content: str = Field(min_length=1)


class CreateReviewResponse(BaseModel):
    """Id of the created review."""

    id: str


class CreateReviewUseCase(BaseUseCase):
    """Use case for reviewing a game."""

    def __init__(self, review_service: ReviewService) -> None:
        """Initialize create review use case.

        Args:
            review_service: Review domain service
        """
        self.review_service = review_service

    async def execute(self, request: CreateReviewRequest) -> CreateReviewResponse:
        """Execute create review flow.

        The review is stored, the game's rating aggregates are recomputed and
        a review activity is appended.

        Args:
            request: Create review request

        Returns:
            The new review id

        Raises:
            NotFoundError: If the game does not exist
            AlreadyExistsError: If the user already reviewed the game
        """
        with logfire.span(
            "create_review.execute",
            user_id=str(request.user_id),
            game_id=str(request.game_id),
            rating=request.rating,
        ):
            review = await self.review_service.create_review(
                user_id=UserId(request.user_id),
                game_id=GameId(request.game_id),
                rating=request.rating,
                content=request.content,
                title=request.title,
            )
            return CreateReviewResponse(id=str(review.id))
