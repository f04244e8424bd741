"""Update user profile use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from quest.domain.service import UserService
from quest.domain.value import UserId


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    user_id: UUID  # From authenticated user
    name: str | None = Field(default=None, min_length=1, max_length=255)
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = Field(default=None, max_length=2048)


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    success: bool


class UpdateUserProfileUseCase:
    """Use case for editing the signed-in user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserProfileRequest) -> UpdateUserProfileResponse:
        """Execute profile update.

        Args:
            request: Fields to change; omitted fields stay as they are

        Returns:
            Success acknowledgement
        """
        with logfire.span("update_user_profile.execute", user_id=str(request.user_id)):
            await self.user_service.update_profile(
                UserId(request.user_id),
                name=request.name,
                bio=request.bio,
                avatar_url=request.avatar_url,
            )
            return UpdateUserProfileResponse(success=True)
