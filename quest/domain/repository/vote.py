"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from quest.domain.model import Vote
from quest.domain.value import UserId, VotableType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_entity(
        self,
        user_id: UserId,
        entity_type: VotableType,
        entity_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            entity_type: Type of the voted item
            entity_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_entity(self, entity_type: VotableType, entity_id: UUID) -> list[Vote]:
        """Find all votes on a specific item."""
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Raises:
            IntegrityError: If a vote already exists for this user and item
        """
        pass

    @abstractmethod
    async def delete_by_user_and_entity(
        self,
        user_id: UserId,
        entity_type: VotableType,
        entity_id: UUID,
    ) -> bool:
        """Delete a vote by user and item.

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
