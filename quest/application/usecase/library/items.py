"""Response items for library use cases."""

from datetime import datetime

from pydantic import BaseModel

from quest.domain.model import LibraryEntry
from quest.domain.value import LibraryStatus


class LibraryEntryItem(BaseModel):
    """Library entry item."""

    id: str
    user_id: str
    game_id: str
    status: LibraryStatus
    is_favorite: bool
    hours_played: int
    personal_rating: int | None
    added_at: datetime
    updated_at: datetime

    @classmethod
    def from_entry(cls, entry: LibraryEntry) -> "LibraryEntryItem":
        return cls(
            id=str(entry.id),
            user_id=str(entry.user_id),
            game_id=str(entry.game_id),
            status=entry.status,
            is_favorite=entry.is_favorite,
            hours_played=entry.hours_played,
            personal_rating=entry.personal_rating,
            added_at=entry.added_at,
            updated_at=entry.updated_at,
        )
