"""Comment entity.

Comments attach to achievements, guides or reviews through a
polymorphic (entity_type, entity_id) reference.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from quest.domain.model.common import DomainModel
from quest.domain.value import CommentableType, CommentId, UserId


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    user_id: UserId
    entity_type: CommentableType
    entity_id: UUID
    content: str = Field(min_length=1, max_length=10000)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
