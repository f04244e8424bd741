"""List followers and following use cases."""

from uuid import UUID

from pydantic import BaseModel

from quest.application.usecase.base import degrade_to_empty
from quest.application.usecase.user.items import UserItem
from quest.domain.service import UserService
from quest.domain.value import UserId


class ListFollowsRequest(BaseModel):
    """List follows request."""

    user_id: UUID


class ListFollowsResponse(BaseModel):
    """List of users."""

    users: list[UserItem]


class ListFollowersUseCase:
    """Use case for listing a user's followers."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListFollowsRequest) -> ListFollowsResponse:
        users = await degrade_to_empty(
            "list_followers",
            self.user_service.get_followers(UserId(request.user_id)),
        )
        return ListFollowsResponse(users=[UserItem.from_user(u) for u in users])


class ListFollowingUseCase:
    """Use case for listing the users someone follows."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListFollowsRequest) -> ListFollowsResponse:
        users = await degrade_to_empty(
            "list_following",
            self.user_service.get_following(UserId(request.user_id)),
        )
        return ListFollowsResponse(users=[UserItem.from_user(u) for u in users])
