"""Unit tests for LoginUseCase."""

from dishka import AsyncContainer
import pytest

from quest.application.usecase.auth import LoginRequest, LoginUseCase
from quest.domain.repository import UserRepository
from quest.domain.service import JWTService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_creates_user_and_token(self, unit_env: AsyncContainer):
        """Login should upsert the user and issue a token for them."""
        # Arrange
        login_use_case = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        result = await login_use_case.execute(
            LoginRequest(open_id="gh-7", name="Alice", login_method="github")
        )

        # Assert
        stored = await user_repo.find_by_open_id("gh-7")
        assert stored is not None
        assert result.user.id == str(stored.id)
        payload = jwt_service.verify_token(result.token)
        assert payload.user_id == str(stored.id)
        assert payload.open_id == "gh-7"

    @pytest.mark.asyncio
    async def test_repeat_login_reuses_user(self, unit_env: AsyncContainer):
        login_use_case = await unit_env.get(LoginUseCase)

        first = await login_use_case.execute(LoginRequest(open_id="gh-7"))
        second = await login_use_case.execute(LoginRequest(open_id="gh-7", name="Alice"))

        assert first.user.id == second.user.id
        assert second.user.name == "Alice"
