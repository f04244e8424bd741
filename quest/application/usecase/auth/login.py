"""Direct login use case."""

import logfire
from pydantic import BaseModel, Field

from quest.application.usecase.user.items import UserItem
from quest.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Identity already verified by the upstream login provider."""

    open_id: str = Field(min_length=1, max_length=64)
    name: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=320)
    login_method: str | None = Field(default=None, max_length=64)


class LoginResponse(BaseModel):
    """Login response."""

    user: UserItem
    token: str


class LoginUseCase:
    """Use case for signing a user in and issuing a session token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Upsert the user for the identity and create a token.

        Args:
            request: Login request

        Returns:
            The signed-in user and their JWT
        """
        with logfire.span("login.execute", login_method=request.login_method):
            user = await self.user_service.upsert_from_identity(
                open_id=request.open_id,
                name=request.name,
                email=request.email,
                login_method=request.login_method,
            )
            token = self.jwt_service.create_token(user)
            logfire.info("User logged in", user_id=str(user.id))
            return LoginResponse(user=UserItem.from_user(user), token=token)
