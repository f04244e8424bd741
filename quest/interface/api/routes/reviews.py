"""Review routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from quest.application.usecase.review import (
    CreateReviewRequest,
    CreateReviewResponse,
    CreateReviewUseCase,
    DeleteReviewRequest,
    DeleteReviewResponse,
    DeleteReviewUseCase,
    ListReviewsRequest,
    ListReviewsResponse,
    ListReviewsUseCase,
    UpdateReviewRequest,
    UpdateReviewResponse,
    UpdateReviewUseCase,
)
from quest.domain.service import JWTService
from quest.interface.api.security import require_actor

router = APIRouter(tags=["reviews"], route_class=DishkaRoute)


class CreateReviewAPIRequest(BaseModel):
    """API request for reviewing a game."""

    game_id: UUID
    rating: int = Field(ge=1, le=10)
    title: str | None = Field(default=None, max_length=255)
    content: str = Field(min_length=1)


class UpdateReviewAPIRequest(BaseModel):
    """API request for editing a review."""

    rating: int | None = Field(default=None, ge=1, le=10)
    title: str | None = Field(default=None, max_length=255)
    content: str | None = Field(default=None, min_length=1)


@router.get("/games/{game_id}/reviews", response_model=ListReviewsResponse)
async def list_game_reviews(
    game_id: UUID,
    list_reviews_use_case: FromDishka[ListReviewsUseCase],
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListReviewsResponse:
    """List a game's reviews, newest first."""
    return await list_reviews_use_case.execute(
        ListReviewsRequest(game_id=game_id, limit=limit, offset=offset)
    )


@router.post(
    "/reviews", response_model=CreateReviewResponse, status_code=status.HTTP_201_CREATED
)
async def create_review(
    request: CreateReviewAPIRequest,
    create_review_use_case: FromDishka[CreateReviewUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateReviewResponse:
    """Review a game.

    The game's ``average_rating`` and ``total_reviews`` are recomputed in
    the same transaction. One review per user and game (409 otherwise).

    Example:
        POST /reviews
        {"game_id": "...", "rating": 9, "content": "Flawless platforming."}

        Response: {"id": "..."}
    """
    actor = require_actor(jwt_service, auth_token)
    return await create_review_use_case.execute(
        CreateReviewRequest(user_id=actor.user_id, **request.model_dump())
    )


@router.patch("/reviews/{review_id}", response_model=UpdateReviewResponse)
async def update_review(
    review_id: UUID,
    request: UpdateReviewAPIRequest,
    update_review_use_case: FromDishka[UpdateReviewUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateReviewResponse:
    actor = require_actor(jwt_service, auth_token)
    return await update_review_use_case.execute(
        UpdateReviewRequest(actor=actor, review_id=review_id, **request.model_dump())
    )


@router.delete("/reviews/{review_id}", response_model=DeleteReviewResponse)
async def delete_review(
    review_id: UUID,
    delete_review_use_case: FromDishka[DeleteReviewUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteReviewResponse:
    actor = require_actor(jwt_service, auth_token)
    return await delete_review_use_case.execute(
        DeleteReviewRequest(actor=actor, review_id=review_id)
    )
