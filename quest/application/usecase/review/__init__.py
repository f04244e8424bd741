"""Review use cases."""

from .create_review import CreateReviewRequest, CreateReviewResponse, CreateReviewUseCase
from .items import ReviewItem
from .list_reviews import ListReviewsRequest, ListReviewsResponse, ListReviewsUseCase
from .update_review import (
    DeleteReviewRequest,
    DeleteReviewResponse,
    DeleteReviewUseCase,
    UpdateReviewRequest,
    UpdateReviewResponse,
    UpdateReviewUseCase,
)

__all__ = [
    "CreateReviewRequest",
    "CreateReviewResponse",
    "CreateReviewUseCase",
    "DeleteReviewRequest",
    "DeleteReviewResponse",
    "DeleteReviewUseCase",
    "ListReviewsRequest",
    "ListReviewsResponse",
    "ListReviewsUseCase",
    "ReviewItem",
    "UpdateReviewRequest",
    "UpdateReviewResponse",
    "UpdateReviewUseCase",
]
