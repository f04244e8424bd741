"""Get user profile use case."""

from uuid import UUID

from pydantic import BaseModel

from quest.application.usecase.user.items import UserItem
from quest.domain.service import UserService
from quest.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: UUID


class GetUserProfileUseCase:
    """Use case for viewing a user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> UserItem:
        """Raises NotFoundError if the user does not exist."""
        user = await self.user_service.get_by_id(UserId(request.user_id))
        return UserItem.from_user(user)
