"""Vote use cases."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from quest.domain.model import Vote
from quest.domain.service import VoteService
from quest.domain.value import UserId, VotableType, VoteType


class VoteItem(BaseModel):
    """Vote item."""

    id: str
    entity_type: VotableType
    entity_id: str
    vote_type: VoteType
    created_at: datetime

    @classmethod
    def from_vote(cls, vote: Vote) -> "VoteItem":
        return cls(
            id=str(vote.id),
            entity_type=vote.entity_type,
            entity_id=str(vote.entity_id),
            vote_type=vote.vote_type,
            created_at=vote.created_at,
        )


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    user_id: UUID  # From authenticated user
    entity_type: VotableType
    entity_id: UUID
    vote_type: VoteType


class CastVoteResponse(BaseModel):
    """Id of the stored vote."""

    id: str


class VoteTargetRequest(BaseModel):
    """Identifies the caller's vote on one item."""

    user_id: UUID  # From authenticated user
    entity_type: VotableType
    entity_id: UUID


class RemoveVoteResponse(BaseModel):
    """Remove vote response."""

    success: bool
    removed: bool


class GetMyVoteResponse(BaseModel):
    """The caller's vote on an item, if any."""

    vote: VoteItem | None


class CastVoteUseCase:
    """Use case for voting on an item.

    A repeated vote replaces the previous one.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        with logfire.span(
            "cast_vote.execute",
            entity_type=request.entity_type.value,
            vote_type=request.vote_type.value,
        ):
            vote = await self.vote_service.toggle_vote(
                user_id=UserId(request.user_id),
                entity_type=request.entity_type,
                entity_id=request.entity_id,
                vote_type=request.vote_type,
            )
            return CastVoteResponse(id=str(vote.id))


class RemoveVoteUseCase:
    """Use case for removing the caller's vote."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: VoteTargetRequest) -> RemoveVoteResponse:
        removed = await self.vote_service.remove_vote(
            UserId(request.user_id), request.entity_type, request.entity_id
        )
        return RemoveVoteResponse(success=True, removed=removed)


class GetMyVoteUseCase:
    """Use case for reading the caller's vote on an item."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: VoteTargetRequest) -> GetMyVoteResponse:
        vote = await self.vote_service.get_user_vote(
            UserId(request.user_id), request.entity_type, request.entity_id
        )
        return GetMyVoteResponse(vote=VoteItem.from_vote(vote) if vote else None)
