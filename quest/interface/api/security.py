"""Cookie authentication helpers for routes."""

from fastapi import HTTPException, Response, status

from quest.config import Settings
from quest.domain.service import JWTService
from quest.domain.value import Actor

AUTH_COOKIE = "auth_token"


def require_actor(jwt_service: JWTService, auth_token: str | None) -> Actor:
    """Resolve the caller from the session cookie.

    Raises:
        HTTPException: 401 if the cookie is missing, invalid or expired
    """
    actor = jwt_service.get_actor_from_token(auth_token)
    if actor is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return actor


def set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session cookie.

    Production serves the frontend from another site, so the cookie is
    ``secure`` with ``samesite=none``; elsewhere it is ``lax`` over plain HTTP.
    """
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "lax",
        domain=settings.auth.cookie_domain,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_auth_cookie(response: Response, settings: Settings) -> None:
    # Same domain and path as when it was set
    response.delete_cookie(key=AUTH_COOKIE, domain=settings.auth.cookie_domain, path="/")
