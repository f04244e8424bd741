"""Domain value objects for GameQuest.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from quest.domain.value.common import RootValueObject, ValueObject
from quest.domain.value.identifiers import UserId


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "user"
    ADMIN = "admin"


class LibraryStatus(str, Enum):
    """Status of a game in a user's library.

    Any status may move to any other; there is no transition table.
    """

    PLAYING = "playing"
    COMPLETED = "completed"
    BACKLOG = "backlog"
    DROPPED = "dropped"
    WISHLIST = "wishlist"


class TagCategory(str, Enum):
    """Category of a game tag."""

    GENRE = "genre"
    THEME = "theme"
    GAMEPLAY = "gameplay"


class CommentableType(str, Enum):
    """Type of entity that can be commented on."""

    ACHIEVEMENT = "achievement"
    GUIDE = "guide"
    REVIEW = "review"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    REVIEW = "review"
    COMMENT = "comment"
    GUIDE = "guide"
    ACHIEVEMENT_IMAGE = "achievement_image"
    ACHIEVEMENT_TIP = "achievement_tip"


class VoteType(str, Enum):
    """Type of vote."""

    UP = "up"
    DOWN = "down"
    HELPFUL = "helpful"


class ActivityType(str, Enum):
    """Kind of entry in the activity log."""

    REVIEW = "review"
    ACHIEVEMENT = "achievement"
    GUIDE = "guide"
    GAME_ADDED = "game_added"
    GAME_COMPLETED = "game_completed"


class TagName(RootValueObject[str]):
    """Tag or platform name.

    Trimmed, 1-100 characters. Examples: 'Metroidvania', 'Nintendo Switch'
    """

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name length after trimming whitespace."""
        v = v.strip()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Name must be 1-100 characters")
        return v


class Actor(ValueObject):
    """The authenticated user performing a request."""

    user_id: UserId
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def can_modify(self, owner_id: UserId) -> bool:
        """Owners may modify their own rows; admins may modify any row."""
        return self.is_admin or self.user_id == owner_id
