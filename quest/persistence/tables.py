"""SQLAlchemy table definitions for GameQuest.

Tables are used through SQLAlchemy Core; rows are mapped to the frozen
domain models in ``quest.persistence.mappers``. They match the schema
defined in the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def _timestamp(name: str, nullable: bool = False) -> Column:
    return Column(
        name,
        TIMESTAMP(timezone=True),
        nullable=nullable,
        server_default=None if nullable else "NOW()",
    )


# ============================================================================
# USERS
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("open_id", String(64), nullable=False, unique=True),
    Column("name", Text, nullable=True),
    Column("email", String(320), nullable=True),
    Column("login_method", String(64), nullable=True),
    Column(
        "role",
        Enum("user", "admin", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column("bio", Text, nullable=True),
    Column("avatar_url", Text, nullable=True),
    _timestamp("created_at"),
    _timestamp("updated_at"),
    _timestamp("last_signed_in"),
)

followers_table = Table(
    "followers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "follower_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "following_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    _timestamp("created_at"),
    UniqueConstraint("follower_id", "following_id", name="unique_follow"),
    CheckConstraint("follower_id <> following_id", name="no_self_follow"),
)

Index("idx_followers_following_id", followers_table.c.following_id)

# ============================================================================
# GAMES AND CATALOGUE
# ============================================================================
games_table = Table(
    "games",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("cover_image_url", Text, nullable=True),
    Column("release_date", TIMESTAMP(timezone=True), nullable=True),
    Column("developer", String(255), nullable=True),
    Column("publisher", String(255), nullable=True),
    Column("average_rating", Integer, nullable=False, server_default="0"),
    Column("total_ratings", Integer, nullable=False, server_default="0"),
    Column("total_reviews", Integer, nullable=False, server_default="0"),
    Column("total_achievements", Integer, nullable=False, server_default="0"),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_games_title", games_table.c.title)
Index("idx_games_created_at", games_table.c.created_at.desc())

platforms_table = Table(
    "platforms",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(100), nullable=False, unique=True),
    Column("icon", String(50), nullable=True),
)

tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(100), nullable=False, unique=True),
    Column(
        "category",
        Enum("genre", "theme", "gameplay", name="tag_category", create_type=False),
        nullable=False,
        server_default="genre",
    ),
)

game_platforms_table = Table(
    "game_platforms",
    metadata,
    Column("game_id", UUID, ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
    Column(
        "platform_id",
        UUID,
        ForeignKey("platforms.id", ondelete="CASCADE"),
        nullable=False,
    ),
    UniqueConstraint("game_id", "platform_id", name="unique_game_platform"),
)

game_tags_table = Table(
    "game_tags",
    metadata,
    Column("game_id", UUID, ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
    Column("tag_id", UUID, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False),
    UniqueConstraint("game_id", "tag_id", name="unique_game_tag"),
)

# ============================================================================
# USER LIBRARY
# ============================================================================
user_library_table = Table(
    "user_library",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("game_id", UUID, ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
    Column(
        "status",
        Enum(
            "playing",
            "completed",
            "backlog",
            "dropped",
            "wishlist",
            name="library_status",
            create_type=False,
        ),
        nullable=False,
        server_default="backlog",
    ),
    Column("is_favorite", Boolean, nullable=False, server_default="false"),
    Column("hours_played", Integer, nullable=False, server_default="0"),
    Column("personal_rating", Integer, nullable=True),
    _timestamp("added_at"),
    _timestamp("updated_at"),
    UniqueConstraint("user_id", "game_id", name="unique_user_game"),
    CheckConstraint(
        "personal_rating IS NULL OR (personal_rating BETWEEN 1 AND 10)",
        name="personal_rating_range",
    ),
)

# ============================================================================
# REVIEWS
# ============================================================================
reviews_table = Table(
    "reviews",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("game_id", UUID, ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
    Column("rating", Integer, nullable=False),
    Column("title", String(255), nullable=True),
    Column("content", Text, nullable=False),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    _timestamp("created_at"),
    _timestamp("updated_at"),
    UniqueConstraint("user_id", "game_id", name="unique_user_game_review"),
    CheckConstraint("rating BETWEEN 1 AND 10", name="rating_range"),
)

Index("idx_reviews_game_id", reviews_table.c.game_id)

# ============================================================================
# ACHIEVEMENTS
# ============================================================================
achievements_table = Table(
    "achievements",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("game_id", UUID, ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("icon_url", Text, nullable=True),
    Column("points", Integer, nullable=False, server_default="0"),
    Column("difficulty_rating", Integer, nullable=False, server_default="0"),
    Column("total_difficulty_votes", Integer, nullable=False, server_default="0"),
    Column("estimated_time", Integer, nullable=True),  # minutes
    Column("is_missable", Boolean, nullable=False, server_default="false"),
    Column("is_buggy", Boolean, nullable=False, server_default="false"),
    Column("is_grindy", Boolean, nullable=False, server_default="false"),
    Column("is_easy", Boolean, nullable=False, server_default="false"),
    Column("text_guide", Text, nullable=True),
    Column("total_unlocks", Integer, nullable=False, server_default="0"),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_achievements_game_id", achievements_table.c.game_id)

user_achievements_table = Table(
    "user_achievements",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "achievement_id",
        UUID,
        ForeignKey("achievements.id", ondelete="CASCADE"),
        nullable=False,
    ),
    _timestamp("unlocked_at"),
    UniqueConstraint("user_id", "achievement_id", name="unique_user_achievement"),
)

difficulty_votes_table = Table(
    "difficulty_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "achievement_id",
        UUID,
        ForeignKey("achievements.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("difficulty", Integer, nullable=False),
    _timestamp("created_at"),
    UniqueConstraint("user_id", "achievement_id", name="unique_user_difficulty_vote"),
    CheckConstraint("difficulty BETWEEN 1 AND 10", name="difficulty_range"),
)

achievement_images_table = Table(
    "achievement_images",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "achievement_id",
        UUID,
        ForeignKey("achievements.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("image_url", Text, nullable=False),
    Column("caption", Text, nullable=True),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    _timestamp("created_at"),
)

Index("idx_achievement_images_achievement_id", achievement_images_table.c.achievement_id)

# ============================================================================
# GUIDES
# ============================================================================
guides_table = Table(
    "guides",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("game_id", UUID, ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("map_image_url", Text, nullable=True),
    Column("version", Integer, nullable=False, server_default="1"),
    Column("is_latest", Boolean, nullable=False, server_default="true"),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("views", Integer, nullable=False, server_default="0"),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_guides_game_latest", guides_table.c.game_id, guides_table.c.is_latest)
Index(
    "unique_latest_guide_per_user_game",
    guides_table.c.user_id,
    guides_table.c.game_id,
    unique=True,
    postgresql_where=guides_table.c.is_latest,
)

map_markers_table = Table(
    "map_markers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("guide_id", UUID, ForeignKey("guides.id", ondelete="CASCADE"), nullable=False),
    Column(
        "achievement_id",
        UUID,
        ForeignKey("achievements.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("image_url", Text, nullable=True),
    Column("quick_tip", Text, nullable=True),
    Column("position_x", Integer, nullable=False),
    Column("position_y", Integer, nullable=False),
    _timestamp("created_at"),
)

Index("idx_map_markers_guide_id", map_markers_table.c.guide_id)

# ============================================================================
# COMMENTS (polymorphic)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "entity_type",
        Enum(
            "achievement", "guide", "review", name="commentable_type", create_type=False
        ),
        nullable=False,
    ),
    Column("entity_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_comments_entity", comments_table.c.entity_type, comments_table.c.entity_id)

# ============================================================================
# VOTES (polymorphic)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "entity_type",
        Enum(
            "review",
            "comment",
            "guide",
            "achievement_image",
            "achievement_tip",
            name="votable_type",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("entity_id", UUID, nullable=False),
    Column(
        "vote_type",
        Enum("up", "down", "helpful", name="vote_type", create_type=False),
        nullable=False,
    ),
    _timestamp("created_at"),
    UniqueConstraint("user_id", "entity_type", "entity_id", name="unique_vote"),
)

Index("idx_votes_entity", votes_table.c.entity_type, votes_table.c.entity_id)

# ============================================================================
# ACTIVITIES (append-only)
# ============================================================================
activities_table = Table(
    "activities",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "activity_type",
        Enum(
            "review",
            "achievement",
            "guide",
            "game_added",
            "game_completed",
            name="activity_type",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("entity_id", UUID, nullable=True),
    Column("metadata", Text, nullable=True),
    _timestamp("created_at"),
)

Index(
    "idx_activities_user_created",
    activities_table.c.user_id,
    activities_table.c.created_at.desc(),
)
