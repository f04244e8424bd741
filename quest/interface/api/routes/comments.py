"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from quest.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from quest.domain.service import JWTService
from quest.domain.value import CommentableType
from quest.interface.api.security import require_actor

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting on an achievement, guide or review."""

    entity_type: CommentableType
    entity_id: UUID
    content: str = Field(min_length=1, max_length=10000)


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str = Field(min_length=1, max_length=10000)


@router.get("", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    entity_type: CommentableType,
    entity_id: UUID,
    limit: int = Query(default=50, ge=1, le=100),
) -> ListCommentsResponse:
    """List comments on an entity, newest first.

    Example:
        GET /comments?entity_type=guide&entity_id=...
    """
    return await list_comments_use_case.execute(
        ListCommentsRequest(entity_type=entity_type, entity_id=entity_id, limit=limit)
    )


@router.post(
    "", response_model=CreateCommentResponse, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    actor = require_actor(jwt_service, auth_token)
    return await create_comment_use_case.execute(
        CreateCommentRequest(user_id=actor.user_id, **request.model_dump())
    )


@router.patch("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    actor = require_actor(jwt_service, auth_token)
    return await update_comment_use_case.execute(
        UpdateCommentRequest(actor=actor, comment_id=comment_id, content=request.content)
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    actor = require_actor(jwt_service, auth_token)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(actor=actor, comment_id=comment_id)
    )
