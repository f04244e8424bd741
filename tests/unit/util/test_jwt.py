"""Unit tests for JWT token utilities."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from quest.config import AuthSettings
from quest.domain.service import JWTService
from quest.domain.value import UserRole
from quest.util.jwt import JWTError, create_token, verify_token
from tests.conftest import make_user

SETTINGS = AuthSettings(jwt_secret="test-secret")


class TestTokens:
    def test_round_trip_keeps_identity(self):
        user_id = str(uuid4())

        token = create_token(user_id, "gh-1", "admin", SETTINGS)
        payload = verify_token(token, SETTINGS)

        assert payload.user_id == user_id
        assert payload.open_id == "gh-1"
        assert payload.role == "admin"

    def test_expired_token_is_rejected(self):
        token = jwt.encode(
            {
                "user_id": str(uuid4()),
                "open_id": "gh-1",
                "role": "user",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_token_signed_with_other_secret_is_rejected(self):
        token = create_token(str(uuid4()), "gh-1", "user", AuthSettings(jwt_secret="other"))

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, SETTINGS)


class TestActorFromToken:
    """get_actor_from_token never raises; bad tokens mean anonymous."""

    def test_valid_token_gives_actor_with_role(self):
        jwt_service = JWTService(SETTINGS)
        user = make_user(role=UserRole.ADMIN)

        actor = jwt_service.get_actor_from_token(jwt_service.create_token(user))

        assert actor.user_id == user.id
        assert actor.is_admin

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_garbage_token_gives_none(self, token):
        assert JWTService(SETTINGS).get_actor_from_token(token) is None
