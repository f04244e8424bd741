"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from quest.config import AuthSettings
from quest.domain.error import AlreadyExistsError, NotFoundError, SelfFollowError
from quest.domain.repository import FollowerRepository, UserRepository
from quest.domain.service import UserService
from quest.domain.value import UserId, UserRole
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpsertFromIdentity:
    """Tests for upsert_from_identity method."""

    @pytest.mark.asyncio
    async def test_first_login_creates_user(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await user_service.upsert_from_identity(
            open_id="gh-42", name="Alice", login_method="github"
        )

        # Assert
        assert await user_repo.find_by_open_id("gh-42") == user
        assert user.role == UserRole.USER

    @pytest.mark.asyncio
    async def test_second_login_keeps_id_and_refreshes_fields(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        first = await user_service.upsert_from_identity(open_id="gh-42", name="Alice")

        # Act
        second = await user_service.upsert_from_identity(
            open_id="gh-42", email="alice@example.com"
        )

        # Assert
        assert second.id == first.id
        assert second.name == "Alice"
        assert second.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_owner_open_id_becomes_admin(self, unit_env):
        """The configured owner is always upserted with the admin role."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        follower_repo = await unit_env.get(FollowerRepository)
        user_service = UserService(
            user_repository=user_repo,
            follower_repository=follower_repo,
            auth_settings=AuthSettings(owner_open_id="owner-1"),
        )

        # Act
        owner = await user_service.upsert_from_identity(open_id="owner-1")
        other = await user_service.upsert_from_identity(open_id="someone-else")

        # Assert
        assert owner.role == UserRole.ADMIN
        assert other.role == UserRole.USER


class TestFollow:
    """Tests for the follow graph."""

    @pytest.mark.asyncio
    async def test_follow_then_get_following(self, unit_env):
        """A followed user should appear in following and the follower in followers."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))

        # Act
        await user_service.follow(alice.id, bob.id)

        # Assert
        assert [u.id for u in await user_service.get_following(alice.id)] == [bob.id]
        assert [u.id for u in await user_service.get_followers(bob.id)] == [alice.id]
        assert await user_service.is_following(alice.id, bob.id) is True
        assert await user_service.is_following(bob.id, alice.id) is False

    @pytest.mark.asyncio
    async def test_self_follow_is_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))

        with pytest.raises(SelfFollowError, match="Cannot follow yourself"):
            await user_service.follow(alice.id, alice.id)

    @pytest.mark.asyncio
    async def test_follow_twice_is_a_conflict(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))
        await user_service.follow(alice.id, bob.id)

        # Act & Assert
        with pytest.raises(AlreadyExistsError):
            await user_service.follow(alice.id, bob.id)
        assert len(await user_service.get_followers(bob.id)) == 1

    @pytest.mark.asyncio
    async def test_follow_unknown_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError, match="User not found"):
            await user_service.follow(UserId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_unfollow(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))
        await user_service.follow(alice.id, bob.id)

        # Act
        removed = await user_service.unfollow(alice.id, bob.id)

        # Assert
        assert removed is True
        assert await user_service.get_following(alice.id) == []
        assert await user_service.unfollow(alice.id, bob.id) is False


class TestUpdateProfile:
    @pytest.mark.asyncio
    async def test_none_leaves_field_unchanged(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("alice"))

        updated = await user_service.update_profile(user.id, bio="Speedrunner")

        assert updated.bio == "Speedrunner"
        assert updated.name == user.name
