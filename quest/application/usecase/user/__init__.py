"""User use cases."""

from .follow_user import (
    FollowRequest,
    FollowResponse,
    FollowUserUseCase,
    IsFollowingResponse,
    IsFollowingUseCase,
    UnfollowUserUseCase,
)
from .get_user_profile import GetUserProfileRequest, GetUserProfileUseCase
from .items import UserItem
from .list_follows import (
    ListFollowersUseCase,
    ListFollowingUseCase,
    ListFollowsRequest,
    ListFollowsResponse,
)
from .update_user_profile import (
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)

__all__ = [
    "FollowRequest",
    "FollowResponse",
    "FollowUserUseCase",
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "IsFollowingResponse",
    "IsFollowingUseCase",
    "ListFollowersUseCase",
    "ListFollowingUseCase",
    "ListFollowsRequest",
    "ListFollowsResponse",
    "UnfollowUserUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileResponse",
    "UpdateUserProfileUseCase",
    "UserItem",
]
