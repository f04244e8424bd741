"""In-memory vote repository for testing."""

from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from quest.domain.model import Vote
from quest.domain.repository import VoteRepository
from quest.domain.value import UserId, VotableType
from quest.persistence.database import StorageClient

from .base import InMemoryRepository


class InMemoryVoteRepository(InMemoryRepository, VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._votes: list[Vote] = []

    async def find_by_user_and_entity(
        self,
        user_id: UserId,
        entity_type: VotableType,
        entity_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by user and item."""
        await self._ensure_available()
        for vote in self._votes:
            if (
                vote.user_id == user_id
                and vote.entity_type == entity_type
                and vote.entity_id == entity_id
            ):
                return vote
        return None

    async def find_by_entity(self, entity_type: VotableType, entity_id: UUID) -> list[Vote]:
        """Find all votes for an item."""
        await self._ensure_available()
        return [
            v
            for v in self._votes
            if v.entity_type == entity_type and v.entity_id == entity_id
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        await self._ensure_available()
        existing = await self.find_by_user_and_entity(
            vote.user_id, vote.entity_type, vote.entity_id
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def delete_by_user_and_entity(
        self,
        user_id: UserId,
        entity_type: VotableType,
        entity_id: UUID,
    ) -> bool:
        """Delete a vote by user and item."""
        await self._ensure_available()
        for i, vote in enumerate(self._votes):
            if (
                vote.user_id == user_id
                and vote.entity_type == entity_type
                and vote.entity_id == entity_id
            ):
                self._votes.pop(i)
                return True
        return False
