"""PostgreSQL implementation of Vote repository."""

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, delete, insert, select

from quest.domain.model import Vote
from quest.domain.repository import VoteRepository
from quest.domain.value import UserId, VotableType
from quest.persistence.mappers import model_to_dict, row_to_vote
from quest.persistence.repository.base import PostgresRepository
from quest.persistence.tables import votes_table


class PostgresVoteRepository(PostgresRepository, VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    async def find_by_user_and_entity(
        self,
        user_id: UserId,
        entity_type: VotableType,
        entity_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.entity_type == entity_type.value,
                votes_table.c.entity_id == entity_id,
            )
        )
        return await self._fetch_one(stmt, row_to_vote)

    async def find_by_entity(self, entity_type: VotableType, entity_id: UUID) -> list[Vote]:
        """Find all votes on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.entity_type == entity_type.value,
                votes_table.c.entity_id == entity_id,
            )
        )
        return await self._fetch_all(stmt, row_to_vote)

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create)."""
        stmt = insert(votes_table).values(**model_to_dict(vote))
        await self._write(stmt)
        return vote

    async def delete_by_user_and_entity(
        self,
        user_id: UserId,
        entity_type: VotableType,
        entity_id: UUID,
    ) -> bool:
        """Delete a vote by user and item."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.entity_type == entity_type.value,
                votes_table.c.entity_id == entity_id,
            )
        )
        result = await self._write(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]
