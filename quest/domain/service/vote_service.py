"""Vote domain service."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from quest.domain.error import DuplicateVoteError
from quest.domain.model import Vote
from quest.domain.repository import VoteRepository
from quest.domain.value import UserId, VotableType, VoteId, VoteType

from .base import Service

CONCURRENT_VOTE = "Vote changed concurrently, try again"


class VoteService(Service):
    """Domain service for vote operations.

    Votes are stored per (user, item). They do not feed any counter on the
    voted item.
    """

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def toggle_vote(
        self,
        user_id: UserId,
        entity_type: VotableType,
        entity_id: UUID,
        vote_type: VoteType,
    ) -> Vote:
        """Cast or replace a user's vote on an item.

        Any previous vote is deleted and a fresh row is inserted, even when
        the vote type is unchanged.

        Args:
            user_id: The voter
            entity_type: Type of the voted item
            entity_id: ID of the item
            vote_type: up, down or helpful

        Returns:
            The newly stored vote

        Raises:
            DuplicateVoteError: If a concurrent toggle stored a vote first
        """
        with logfire.span(
            "vote_service.toggle_vote",
            user_id=str(user_id),
            entity_type=entity_type.value,
            entity_id=str(entity_id),
            vote_type=vote_type.value,
        ):
            replaced = await self.vote_repository.delete_by_user_and_entity(
                user_id, entity_type, entity_id
            )

            vote = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                entity_type=entity_type,
                entity_id=entity_id,
                vote_type=vote_type,
                created_at=datetime.now(),
            )
            try:
                saved = await self.vote_repository.save(vote)
            except IntegrityError:
                # A concurrent toggle inserted between our delete and insert
                logfire.warn("Concurrent vote insert", user_id=str(user_id))
                raise DuplicateVoteError(CONCURRENT_VOTE)
            logfire.info("Vote stored", vote_id=str(saved.id), replaced=replaced)
            return saved

    async def remove_vote(
        self, user_id: UserId, entity_type: VotableType, entity_id: UUID
    ) -> bool:
        """Remove a user's vote on an item.

        Returns:
            True if a vote was removed, False if no vote existed
        """
        with logfire.span(
            "vote_service.remove_vote",
            user_id=str(user_id),
            entity_type=entity_type.value,
            entity_id=str(entity_id),
        ):
            return await self.vote_repository.delete_by_user_and_entity(
                user_id, entity_type, entity_id
            )

    async def get_user_vote(
        self, user_id: UserId, entity_type: VotableType, entity_id: UUID
    ) -> Optional[Vote]:
        return await self.vote_repository.find_by_user_and_entity(
            user_id, entity_type, entity_id
        )
