"""Library entry entity.

A library entry records that a user owns, plays or wants a game.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quest.domain.model.common import DomainModel
from quest.domain.value import GameId, LibraryEntryId, LibraryStatus, UserId


class LibraryEntry(DomainModel):
    """Library entry.

    Business rules:
    - One entry per (user, game)
    - Status moves freely between all states; entering COMPLETED is
      recorded in the activity log
    """

    id: LibraryEntryId
    user_id: UserId
    game_id: GameId
    status: LibraryStatus = LibraryStatus.BACKLOG
    is_favorite: bool = False
    hours_played: int = Field(default=0, ge=0)
    personal_rating: Optional[int] = Field(default=None, ge=1, le=10)
    added_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
