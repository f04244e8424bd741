"""JWT token domain service."""

import logfire

from quest.config import AuthSettings
from quest.domain.model import User
from quest.domain.value import Actor, UserId, UserRole
from quest.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create JWT token for user.

        Args:
            user: The signed-in user

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user.id)):
            token = create_token(
                str(user.id), user.open_id, user.role.value, self.auth_settings
            )
            logfire.info("JWT token created", user_id=str(user.id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_actor_from_token(self, token: str | None) -> Actor | None:
        """Resolve the caller from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Actor if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Actor(user_id=UserId(payload.user_id), role=UserRole(payload.role))
        except Exception as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
