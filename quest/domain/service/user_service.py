"""User domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from quest.config import AuthSettings
from quest.domain.error import AlreadyExistsError, NotFoundError, SelfFollowError
from quest.domain.model import Follower, User
from quest.domain.repository import FollowerRepository, UserRepository
from quest.domain.value import FollowerId, UserId, UserRole

from .base import Service


class UserService(Service):
    """Domain service for user accounts and the social graph."""

    def __init__(
        self,
        user_repository: UserRepository,
        follower_repository: FollowerRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            follower_repository: Follower repository
            auth_settings: Authentication settings (owner open id)
        """
        self.user_repository = user_repository
        self.follower_repository = follower_repository
        self.auth_settings = auth_settings

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                raise NotFoundError("User", str(user_id))
            return user

    async def upsert_from_identity(
        self,
        open_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        login_method: Optional[str] = None,
    ) -> User:
        """Create or refresh the user for an upstream identity.

        The configured owner open id always ends up with the admin role.

        Args:
            open_id: Stable identity from the login provider
            name: Display name reported by the provider
            email: Email reported by the provider
            login_method: Provider name

        Returns:
            The stored user
        """
        with logfire.span("user_service.upsert_from_identity", open_id=open_id):
            now = datetime.now()
            is_owner = (
                self.auth_settings.owner_open_id is not None
                and open_id == self.auth_settings.owner_open_id
            )

            existing = await self.user_repository.find_by_open_id(open_id)
            if existing:
                user = existing.model_copy(
                    update={
                        "name": name if name is not None else existing.name,
                        "email": email if email is not None else existing.email,
                        "login_method": login_method or existing.login_method,
                        "role": UserRole.ADMIN if is_owner else existing.role,
                        "last_signed_in": now,
                        "updated_at": now,
                    }
                )
            else:
                user = User(
                    id=UserId(uuid4()),
                    open_id=open_id,
                    name=name,
                    email=email,
                    login_method=login_method,
                    role=UserRole.ADMIN if is_owner else UserRole.USER,
                    created_at=now,
                    updated_at=now,
                    last_signed_in=now,
                )
                logfire.info("Creating new user", user_id=str(user.id), owner=is_owner)

            return await self.user_repository.save(user)

    async def update_profile(
        self,
        user_id: UserId,
        name: Optional[str] = None,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> User:
        """Update a user's own profile fields (None leaves a field unchanged)."""
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            updates = {
                key: value
                for key, value in {
                    "name": name,
                    "bio": bio,
                    "avatar_url": avatar_url,
                }.items()
                if value is not None
            }
            updated = user.model_copy(update={**updates, "updated_at": datetime.now()})
            return await self.user_repository.save(updated)

    async def follow(self, follower_id: UserId, following_id: UserId) -> Follower:
        """Follow another user.

        Args:
            follower_id: The user who follows
            following_id: The user being followed

        Returns:
            The created relationship

        Raises:
            SelfFollowError: If both ids are the same
            NotFoundError: If the target user does not exist
            AlreadyExistsError: If already following
        """
        with logfire.span(
            "user_service.follow",
            follower_id=str(follower_id),
            following_id=str(following_id),
        ):
            if follower_id == following_id:
                raise SelfFollowError()

            await self.get_by_id(following_id)

            follower = Follower(
                id=FollowerId(uuid4()),
                follower_id=follower_id,
                following_id=following_id,
                created_at=datetime.now(),
            )
            try:
                return await self.follower_repository.save(follower)
            except IntegrityError:
                logfire.warn("Duplicate follow attempt", follower_id=str(follower_id))
                raise AlreadyExistsError("Already following this user")

    async def unfollow(self, follower_id: UserId, following_id: UserId) -> bool:
        """Stop following a user.

        Returns:
            True if a relationship was removed
        """
        with logfire.span("user_service.unfollow", follower_id=str(follower_id)):
            return await self.follower_repository.delete(follower_id, following_id)

    async def is_following(self, follower_id: UserId, following_id: UserId) -> bool:
        return await self.follower_repository.exists(follower_id, following_id)

    async def get_following_ids(self, user_id: UserId) -> list[UserId]:
        return await self.follower_repository.find_following_ids(user_id)

    async def get_following(self, user_id: UserId) -> list[User]:
        """Users that ``user_id`` follows, most recently followed first."""
        ids = await self.follower_repository.find_following_ids(user_id)
        return await self._users_in_order(ids)

    async def get_followers(self, user_id: UserId) -> list[User]:
        """Users following ``user_id``, most recent first."""
        ids = await self.follower_repository.find_follower_ids(user_id)
        return await self._users_in_order(ids)

    async def _users_in_order(self, user_ids: list[UserId]) -> list[User]:
        users = {u.id: u for u in await self.user_repository.find_by_ids(user_ids)}
        return [users[uid] for uid in user_ids if uid in users]
