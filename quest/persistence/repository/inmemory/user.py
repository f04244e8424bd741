"""In-memory user and follower repositories for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from quest.domain.model import Follower, User
from quest.domain.repository import FollowerRepository, UserRepository
from quest.domain.value import UserId
from quest.persistence.database import StorageClient

from .base import InMemoryRepository


class InMemoryUserRepository(InMemoryRepository, UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        await self._ensure_available()
        return self._users.get(user_id)

    async def find_by_open_id(self, open_id: str) -> Optional[User]:
        await self._ensure_available()
        for user in self._users.values():
            if user.open_id == open_id:
                return user
        return None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        await self._ensure_available()
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If another user already has the open id
        """
        await self._ensure_available()
        other = await self.find_by_open_id(user.open_id)
        if other and other.id != user.id:
            raise IntegrityError("Duplicate open_id", None, Exception())
        self._users[user.id] = user
        return user


class InMemoryFollowerRepository(InMemoryRepository, FollowerRepository):
    """In-memory implementation of FollowerRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._follows: list[Follower] = []

    async def save(self, follower: Follower) -> Follower:
        await self._ensure_available()
        if await self.exists(follower.follower_id, follower.following_id):
            raise IntegrityError("Duplicate follow", None, Exception())
        self._follows.append(follower)
        return follower

    async def delete(self, follower_id: UserId, following_id: UserId) -> bool:
        await self._ensure_available()
        before = len(self._follows)
        self._follows = [
            f
            for f in self._follows
            if not (f.follower_id == follower_id and f.following_id == following_id)
        ]
        return len(self._follows) < before

    async def exists(self, follower_id: UserId, following_id: UserId) -> bool:
        await self._ensure_available()
        return any(
            f.follower_id == follower_id and f.following_id == following_id
            for f in self._follows
        )

    async def find_following_ids(self, user_id: UserId) -> list[UserId]:
        await self._ensure_available()
        follows = sorted(self._follows, key=lambda f: f.created_at, reverse=True)
        return [f.following_id for f in follows if f.follower_id == user_id]

    async def find_follower_ids(self, user_id: UserId) -> list[UserId]:
        await self._ensure_available()
        follows = sorted(self._follows, key=lambda f: f.created_at, reverse=True)
        return [f.follower_id for f in follows if f.following_id == user_id]
