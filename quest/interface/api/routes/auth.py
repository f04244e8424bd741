"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel

from quest.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from quest.application.usecase.user import UserItem
from quest.config import Settings
from quest.domain.service import JWTService
from quest.interface.api.security import clear_auth_cookie, set_auth_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LoginAPIResponse(BaseModel):
    """Login response; the token travels only in the cookie."""

    success: bool
    user: UserItem


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Authentication status.

    ``/auth/me`` answers unauthenticated callers with
    ``authenticated=false`` instead of an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginAPIResponse:
    """Sign in with an identity verified by the upstream login provider.

    The user row is upserted by ``open_id`` and a session cookie is set.
    Only available while ``auth.allow_direct_login`` is enabled.

    Example:
        POST /auth/login
        {"open_id": "u-123", "name": "Alice", "login_method": "github"}

        Sets cookie: auth_token
    """
    if not settings.auth.allow_direct_login:
        logger.warning("Direct login attempted while disabled")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Direct login is disabled",
        )

    result = await login_use_case.execute(request)
    set_auth_cookie(response, result.token, settings)
    logger.info(f"Auth cookie set for user {result.user.id}")
    return LoginAPIResponse(success=True, user=result.user)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing the authentication cookie."""
    clear_auth_cookie(response, settings)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without a cookie. A valid token whose user no longer exists
    is also reported as unauthenticated.
    """
    actor = jwt_service.get_actor_from_token(auth_token)
    if actor is None:
        return AuthStatusResponse(authenticated=False)

    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=actor.user_id)
    )
    if user is None:
        return AuthStatusResponse(authenticated=False)
    return AuthStatusResponse(authenticated=True, user=user)
