"""Vote entity."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from quest.domain.model.common import DomainModel
from quest.domain.value import UserId, VotableType, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by database unique constraint)
    - Voting again replaces the previous vote with a fresh row
    - Polymorphic reference to the votable item
    """

    id: VoteId
    user_id: UserId
    entity_type: VotableType
    entity_id: UUID
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
