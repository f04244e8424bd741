"""Activity log entry.

Append-only record of user actions, read back as per-user timelines and
as the feed of followed users.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from quest.domain.model.common import DomainModel
from quest.domain.value import ActivityId, ActivityType, UserId


class Activity(DomainModel):
    """Activity entity."""

    id: ActivityId
    user_id: UserId
    activity_type: ActivityType
    entity_id: Optional[UUID] = None
    metadata: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
