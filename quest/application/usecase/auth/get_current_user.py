"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from quest.domain.error import NotFoundError
from quest.domain.service import UserService
from quest.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: UUID


class GetCurrentUserResponse(BaseModel):
    """The signed-in user, including private fields."""

    id: str
    open_id: str
    name: str | None
    email: str | None
    role: str
    bio: str | None
    avatar_url: str | None


class GetCurrentUserUseCase:
    """Use case for resolving the signed-in user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse | None:
        """Return the user, or None if the token points at a deleted account."""
        try:
            user = await self.user_service.get_by_id(UserId(request.user_id))
        except NotFoundError:
            return None

        return GetCurrentUserResponse(
            id=str(user.id),
            open_id=user.open_id,
            name=user.name,
            email=user.email,
            role=user.role.value,
            bio=user.bio,
            avatar_url=user.avatar_url,
        )
