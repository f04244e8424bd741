"""Follow, unfollow and is-following use cases."""

from uuid import UUID

from pydantic import BaseModel

from quest.domain.service import UserService
from quest.domain.value import UserId


class FollowRequest(BaseModel):
    """Follow/unfollow request."""

    follower_id: UUID  # From authenticated user
    following_id: UUID


class FollowResponse(BaseModel):
    """Follow/unfollow response."""

    success: bool


class IsFollowingResponse(BaseModel):
    """Is-following response."""

    is_following: bool


class FollowUserUseCase:
    """Use case for following a user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: FollowRequest) -> FollowResponse:
        """Raises SelfFollowError, NotFoundError or AlreadyExistsError."""
        await self.user_service.follow(
            UserId(request.follower_id), UserId(request.following_id)
        )
        return FollowResponse(success=True)


class UnfollowUserUseCase:
    """Use case for unfollowing a user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: FollowRequest) -> FollowResponse:
        await self.user_service.unfollow(
            UserId(request.follower_id), UserId(request.following_id)
        )
        return FollowResponse(success=True)


class IsFollowingUseCase:
    """Use case for checking a follow relationship."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: FollowRequest) -> IsFollowingResponse:
        following = await self.user_service.is_following(
            UserId(request.follower_id), UserId(request.following_id)
        )
        return IsFollowingResponse(is_following=following)
