"""Update and delete review use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from quest.domain.service import ReviewService
from quest.domain.value import Actor, ReviewId


class UpdateReviewRequest(BaseModel):
    """Update review request."""

    actor: Actor
    review_id: UUID
    rating: int | None = Field(default=None, ge=1, le=10)
    title: str | None = Field(default=None, max_length=255)
    content: str | None = Field(default=None, min_length=1)


class UpdateReviewResponse(BaseModel):
    """Update review response."""

    success: bool


class DeleteReviewRequest(BaseModel):
    """Delete review request."""

    actor: Actor
    review_id: UUID


class DeleteReviewResponse(BaseModel):
    """Delete review response."""

    success: bool


class UpdateReviewUseCase:
    """Use case for editing a review."""

    def __init__(self, review_service: ReviewService) -> None:
        self.review_service = review_service

    async def execute(self, request: UpdateReviewRequest) -> UpdateReviewResponse:
        """Raises NotFoundError or NotAuthorizedError."""
        await self.review_service.update_review(
            request.actor,
            ReviewId(request.review_id),
            rating=request.rating,
            title=request.title,
            content=request.content,
        )
        return UpdateReviewResponse(success=True)


class DeleteReviewUseCase:
    """Use case for deleting a review."""

    def __init__(self, review_service: ReviewService) -> None:
        self.review_service = review_service

    async def execute(self, request: DeleteReviewRequest) -> DeleteReviewResponse:
        await self.review_service.delete_review(request.actor, ReviewId(request.review_id))
        return DeleteReviewResponse(success=True)
