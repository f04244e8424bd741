"""User profile and follow routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from quest.application.usecase.activity import (
    ActivityFeedRequest,
    ActivityFeedResponse,
    GetUserActivityUseCase,
)
from quest.application.usecase.user import (
    FollowRequest,
    FollowResponse,
    FollowUserUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    IsFollowingResponse,
    IsFollowingUseCase,
    ListFollowersUseCase,
    ListFollowingUseCase,
    ListFollowsRequest,
    ListFollowsResponse,
    UnfollowUserUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
    UserItem,
)
from quest.domain.service import JWTService
from quest.interface.api.security import require_actor

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the caller's profile."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = Field(default=None, max_length=2048)


@router.patch("/me", response_model=UpdateUserProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateUserProfileResponse:
    """Update the authenticated user's profile.

    Example:
        PATCH /users/me
        Cookie: auth_token=...

        {"bio": "Completionist. 100% or nothing."}
    """
    actor = require_actor(jwt_service, auth_token)
    return await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(user_id=actor.user_id, **request.model_dump())
    )


@router.get("/{user_id}", response_model=UserItem)
async def get_user_profile(
    user_id: UUID,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> UserItem:
    """Get a user's public profile."""
    return await get_user_profile_use_case.execute(GetUserProfileRequest(user_id=user_id))


@router.get("/{user_id}/followers", response_model=ListFollowsResponse)
async def list_followers(
    user_id: UUID,
    list_followers_use_case: FromDishka[ListFollowersUseCase],
) -> ListFollowsResponse:
    return await list_followers_use_case.execute(ListFollowsRequest(user_id=user_id))


@router.get("/{user_id}/following", response_model=ListFollowsResponse)
async def list_following(
    user_id: UUID,
    list_following_use_case: FromDishka[ListFollowingUseCase],
) -> ListFollowsResponse:
    return await list_following_use_case.execute(ListFollowsRequest(user_id=user_id))


@router.post("/{user_id}/follow", response_model=FollowResponse)
async def follow_user(
    user_id: UUID,
    follow_user_use_case: FromDishka[FollowUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> FollowResponse:
    """Follow a user. Following yourself is rejected with 400, twice with 409."""
    actor = require_actor(jwt_service, auth_token)
    return await follow_user_use_case.execute(
        FollowRequest(follower_id=actor.user_id, following_id=user_id)
    )


@router.delete("/{user_id}/follow", response_model=FollowResponse)
async def unfollow_user(
    user_id: UUID,
    unfollow_user_use_case: FromDishka[UnfollowUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> FollowResponse:
    actor = require_actor(jwt_service, auth_token)
    return await unfollow_user_use_case.execute(
        FollowRequest(follower_id=actor.user_id, following_id=user_id)
    )


@router.get("/{user_id}/is-following", response_model=IsFollowingResponse)
async def is_following(
    user_id: UUID,
    is_following_use_case: FromDishka[IsFollowingUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> IsFollowingResponse:
    """Whether the caller follows ``user_id``."""
    actor = require_actor(jwt_service, auth_token)
    return await is_following_use_case.execute(
        FollowRequest(follower_id=actor.user_id, following_id=user_id)
    )


@router.get("/{user_id}/activities", response_model=ActivityFeedResponse)
async def list_user_activities(
    user_id: UUID,
    get_user_activity_use_case: FromDishka[GetUserActivityUseCase],
    limit: int | None = None,
) -> ActivityFeedResponse:
    """A user's own activity timeline, newest first."""
    return await get_user_activity_use_case.execute(
        ActivityFeedRequest(user_id=user_id, limit=limit)
    )
