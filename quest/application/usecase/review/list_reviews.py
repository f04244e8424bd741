"""List game reviews use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from quest.application.usecase.base import degrade_to_empty
from quest.application.usecase.review.items import ReviewItem
from quest.domain.service import ReviewService
from quest.domain.value import GameId


class ListReviewsRequest(BaseModel):
    """List reviews request."""

    game_id: UUID
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListReviewsResponse(BaseModel):
    """List reviews response."""

    reviews: list[ReviewItem]


class ListReviewsUseCase:
    """Use case for listing a game's reviews, newest first."""

    def __init__(self, review_service: ReviewService) -> None:
        self.review_service = review_service

    async def execute(self, request: ListReviewsRequest) -> ListReviewsResponse:
        reviews = await degrade_to_empty(
            "list_reviews",
            self.review_service.get_game_reviews(
                GameId(request.game_id), request.limit, request.offset
            ),
        )
        return ListReviewsResponse(reviews=[ReviewItem.from_review(r) for r in reviews])
