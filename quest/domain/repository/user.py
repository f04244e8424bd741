"""User and follower repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from quest.domain.model import Follower, User
from quest.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_open_id(self, open_id: str) -> Optional[User]:
        """Find a user by the identity provider's open id."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users in one query (missing ids are skipped)."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass


class FollowerRepository(ABC):
    """Repository for follow relationships."""

    @abstractmethod
    async def save(self, follower: Follower) -> Follower:
        """Create a follow relationship.

        Raises:
            IntegrityError: If the pair already exists
        """
        pass

    @abstractmethod
    async def delete(self, follower_id: UserId, following_id: UserId) -> bool:
        """Delete a follow relationship.

        Returns:
            True if a row was deleted
        """
        pass

    @abstractmethod
    async def exists(self, follower_id: UserId, following_id: UserId) -> bool:
        pass

    @abstractmethod
    async def find_following_ids(self, user_id: UserId) -> list[UserId]:
        """IDs of the users that ``user_id`` follows."""
        pass

    @abstractmethod
    async def find_follower_ids(self, user_id: UserId) -> list[UserId]:
        """IDs of the users that follow ``user_id``."""
        pass
