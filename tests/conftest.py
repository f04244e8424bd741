"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

from quest.domain.model import Game, User
from quest.domain.value import Actor, GameId, UserId, UserRole


def make_user(open_id: str | None = None, role: UserRole = UserRole.USER) -> User:
    """Helper function to build a user for repository seeding."""
    now = datetime.now()
    return User(
        id=UserId(uuid4()),
        open_id=open_id or f"open-{uuid4().hex[:12]}",
        name="Test Player",
        role=role,
        created_at=now,
        updated_at=now,
        last_signed_in=now,
    )


def make_game(title: str = "Hollow Knight") -> Game:
    """Helper function to build a game with all aggregates at zero."""
    now = datetime.now()
    return Game(id=GameId(uuid4()), title=title, created_at=now, updated_at=now)


def actor_for(user: User) -> Actor:
    return Actor(user_id=user.id, role=user.role)
