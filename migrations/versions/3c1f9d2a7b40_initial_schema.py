"""initial_schema

Create the GameQuest schema:
- Users and followers
- Games with platforms and tags
- User libraries
- Reviews (feed the game's rating aggregates)
- Achievements, unlocks, difficulty votes and images
- Guides with map markers
- Polymorphic comments and votes
- Append-only activity log

Revision ID: 3c1f9d2a7b40
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9d2a7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUM_TYPES: dict[str, tuple[str, ...]] = {
    "user_role": ("user", "admin"),
    "tag_category": ("genre", "theme", "gameplay"),
    "library_status": ("playing", "completed", "backlog", "dropped", "wishlist"),
    "commentable_type": ("achievement", "guide", "review"),
    "votable_type": (
        "review",
        "comment",
        "guide",
        "achievement_image",
        "achievement_tip",
    ),
    "vote_type": ("up", "down", "helpful"),
    "activity_type": (
        "review",
        "achievement",
        "guide",
        "game_added",
        "game_completed",
    ),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUM_TYPES[name], name=name, create_type=False)


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _counter(name: str, default: str = "0") -> sa.Column:
    return sa.Column(name, sa.Integer(), nullable=False, server_default=default)


def _flag(name: str, default: str = "false") -> sa.Column:
    return sa.Column(name, sa.Boolean(), nullable=False, server_default=default)


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    for name, values in ENUM_TYPES.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # USERS and FOLLOWERS
    # ========================================================================
    op.create_table(
        "users",
        _id(),
        sa.Column("open_id", sa.String(64), nullable=False),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("login_method", sa.String(64), nullable=True),
        sa.Column("role", _enum("user_role"), nullable=False, server_default="user"),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        _timestamp("last_signed_in"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("open_id", name="uq_users_open_id"),
    )

    op.create_table(
        "followers",
        _id(),
        sa.Column("follower_id", sa.UUID(), nullable=False),
        sa.Column("following_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["follower_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["following_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("follower_id", "following_id", name="unique_follow"),
        sa.CheckConstraint("follower_id <> following_id", name="no_self_follow"),
    )
    op.create_index("idx_followers_following_id", "followers", ["following_id"])

    # ========================================================================
    # GAMES, PLATFORMS, TAGS
    # ========================================================================
    op.create_table(
        "games",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("cover_image_url", sa.Text(), nullable=True),
        sa.Column("release_date", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("developer", sa.String(255), nullable=True),
        sa.Column("publisher", sa.String(255), nullable=True),
        _counter("average_rating"),
        _counter("total_ratings"),
        _counter("total_reviews"),
        _counter("total_achievements"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_games_title", "games", ["title"])
    op.create_index("idx_games_created_at", "games", [sa.text("created_at DESC")])

    op.create_table(
        "platforms",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("icon", sa.String(50), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_platforms_name"),
    )

    op.create_table(
        "tags",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column(
            "category", _enum("tag_category"), nullable=False, server_default="genre"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_tags_name"),
    )

    op.create_table(
        "game_platforms",
        sa.Column("game_id", sa.UUID(), nullable=False),
        sa.Column("platform_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["platform_id"], ["platforms.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("game_id", "platform_id", name="unique_game_platform"),
    )

    op.create_table(
        "game_tags",
        sa.Column("game_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("game_id", "tag_id", name="unique_game_tag"),
    )

    # ========================================================================
    # USER_LIBRARY
    # ========================================================================
    op.create_table(
        "user_library",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("game_id", sa.UUID(), nullable=False),
        sa.Column(
            "status", _enum("library_status"), nullable=False, server_default="backlog"
        ),
        _flag("is_favorite"),
        _counter("hours_played"),
        sa.Column("personal_rating", sa.Integer(), nullable=True),
        _timestamp("added_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "game_id", name="unique_user_game"),
        sa.CheckConstraint(
            "personal_rating IS NULL OR (personal_rating BETWEEN 1 AND 10)",
            name="personal_rating_range",
        ),
    )

    # ========================================================================
    # REVIEWS
    # ========================================================================
    op.create_table(
        "reviews",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("game_id", sa.UUID(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        _counter("upvotes"),
        _counter("downvotes"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "game_id", name="unique_user_game_review"),
        sa.CheckConstraint("rating BETWEEN 1 AND 10", name="rating_range"),
    )
    op.create_index("idx_reviews_game_id", "reviews", ["game_id"])

    # ========================================================================
    # ACHIEVEMENTS and their fact tables
    # ========================================================================
    op.create_table(
        "achievements",
        _id(),
        sa.Column("game_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon_url", sa.Text(), nullable=True),
        _counter("points"),
        _counter("difficulty_rating"),
        _counter("total_difficulty_votes"),
        sa.Column("estimated_time", sa.Integer(), nullable=True),  # minutes
        _flag("is_missable"),
        _flag("is_buggy"),
        _flag("is_grindy"),
        _flag("is_easy"),
        sa.Column("text_guide", sa.Text(), nullable=True),
        _counter("total_unlocks"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_achievements_game_id", "achievements", ["game_id"])

    op.create_table(
        "user_achievements",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("achievement_id", sa.UUID(), nullable=False),
        _timestamp("unlocked_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["achievement_id"], ["achievements.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "achievement_id", name="unique_user_achievement"),
    )

    op.create_table(
        "difficulty_votes",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("achievement_id", sa.UUID(), nullable=False),
        sa.Column("difficulty", sa.Integer(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["achievement_id"], ["achievements.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "achievement_id", name="unique_user_difficulty_vote"
        ),
        sa.CheckConstraint("difficulty BETWEEN 1 AND 10", name="difficulty_range"),
    )

    op.create_table(
        "achievement_images",
        _id(),
        sa.Column("achievement_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("caption", sa.Text(), nullable=True),
        _counter("upvotes"),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(
            ["achievement_id"], ["achievements.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_achievement_images_achievement_id",
        "achievement_images",
        ["achievement_id"],
    )

    # ========================================================================
    # GUIDES and MAP_MARKERS
    # ========================================================================
    op.create_table(
        "guides",
        _id(),
        sa.Column("game_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("map_image_url", sa.Text(), nullable=True),
        _counter("version", default="1"),
        _flag("is_latest", default="true"),
        _counter("upvotes"),
        _counter("views"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_guides_game_latest", "guides", ["game_id", "is_latest"])
    op.create_index(
        "unique_latest_guide_per_user_game",
        "guides",
        ["user_id", "game_id"],
        unique=True,
        postgresql_where=sa.text("is_latest"),
    )

    op.create_table(
        "map_markers",
        _id(),
        sa.Column("guide_id", sa.UUID(), nullable=False),
        sa.Column("achievement_id", sa.UUID(), nullable=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("quick_tip", sa.Text(), nullable=True),
        sa.Column("position_x", sa.Integer(), nullable=False),
        sa.Column("position_y", sa.Integer(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["guide_id"], ["guides.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["achievement_id"], ["achievements.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_map_markers_guide_id", "map_markers", ["guide_id"])

    # ========================================================================
    # COMMENTS and VOTES (polymorphic entity references)
    # ========================================================================
    op.create_table(
        "comments",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("entity_type", _enum("commentable_type"), nullable=False),
        sa.Column("entity_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        _counter("upvotes"),
        _counter("downvotes"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_entity", "comments", ["entity_type", "entity_id"])

    op.create_table(
        "votes",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("entity_type", _enum("votable_type"), nullable=False),
        sa.Column("entity_id", sa.UUID(), nullable=False),
        sa.Column("vote_type", _enum("vote_type"), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "entity_type", "entity_id", name="unique_vote"),
    )
    op.create_index("idx_votes_entity", "votes", ["entity_type", "entity_id"])

    # ========================================================================
    # ACTIVITIES (append-only)
    # ========================================================================
    op.create_table(
        "activities",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("activity_type", _enum("activity_type"), nullable=False),
        sa.Column("entity_id", sa.UUID(), nullable=True),
        sa.Column("metadata", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_activities_user_created",
        "activities",
        ["user_id", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        "activities",
        "votes",
        "comments",
        "map_markers",
        "guides",
        "achievement_images",
        "difficulty_votes",
        "user_achievements",
        "achievements",
        "reviews",
        "user_library",
        "game_tags",
        "game_platforms",
        "tags",
        "platforms",
        "games",
        "followers",
        "users",
    ):
        op.drop_table(table)

    for name in reversed(ENUM_TYPES):
        op.execute(f"DROP TYPE IF EXISTS {name}")
