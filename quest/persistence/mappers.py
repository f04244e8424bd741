"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from enum import Enum
from typing import Any, Dict

from quest.domain.model import (
    Achievement,
    AchievementImage,
    Activity,
    Comment,
    DifficultyVote,
    Follower,
    Game,
    Guide,
    LibraryEntry,
    MapMarker,
    Platform,
    Review,
    Tag,
    User,
    UserAchievement,
    Vote,
)
from quest.domain.model.common import DomainModel
from quest.domain.value import (
    ActivityType,
    CommentableType,
    LibraryStatus,
    TagCategory,
    TagName,
    UserRole,
    VotableType,
    VoteType,
)


def model_to_dict(model: DomainModel) -> Dict[str, Any]:
    """Convert a domain model to a dict suitable for insert/update.

    Enum members are stored by value; root value objects are already
    dumped to their primitive by pydantic.
    """
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in model.model_dump().items()
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=row["id"],
        open_id=row["open_id"],
        name=row.get("name"),
        email=row.get("email"),
        login_method=row.get("login_method"),
        role=UserRole(row["role"]),
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        last_signed_in=row["last_signed_in"],
    )


def row_to_follower(row: Dict[str, Any]) -> Follower:
    return Follower(**row)


def row_to_game(row: Dict[str, Any]) -> Game:
    """Convert database row to Game domain model."""
    return Game(**row)


def row_to_platform(row: Dict[str, Any]) -> Platform:
    return Platform(id=row["id"], name=TagName(row["name"]), icon=row.get("icon"))


def row_to_tag(row: Dict[str, Any]) -> Tag:
    return Tag(
        id=row["id"],
        name=TagName(row["name"]),
        category=TagCategory(row["category"]),
    )


def row_to_library_entry(row: Dict[str, Any]) -> LibraryEntry:
    """Convert database row to LibraryEntry domain model."""
    return LibraryEntry(**{**row, "status": LibraryStatus(row["status"])})


def row_to_review(row: Dict[str, Any]) -> Review:
    return Review(**row)


def row_to_achievement(row: Dict[str, Any]) -> Achievement:
    return Achievement(**row)


def row_to_user_achievement(row: Dict[str, Any]) -> UserAchievement:
    return UserAchievement(**row)


def row_to_difficulty_vote(row: Dict[str, Any]) -> DifficultyVote:
    return DifficultyVote(**row)


def row_to_achievement_image(row: Dict[str, Any]) -> AchievementImage:
    return AchievementImage(**row)


def row_to_guide(row: Dict[str, Any]) -> Guide:
    return Guide(**row)


def row_to_map_marker(row: Dict[str, Any]) -> MapMarker:
    return MapMarker(**row)


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(**{**row, "entity_type": CommentableType(row["entity_type"])})


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=row["id"],
        user_id=row["user_id"],
        entity_type=VotableType(row["entity_type"]),
        entity_id=row["entity_id"],
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def row_to_activity(row: Dict[str, Any]) -> Activity:
    return Activity(**{**row, "activity_type": ActivityType(row["activity_type"])})
