"""User aggregate root.

Users sign in through an upstream identity provider, identified by a
stable open id, and build a profile, a library and a social graph.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quest.domain.model.common import DomainModel
from quest.domain.value import FollowerId, UserId, UserRole


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    open_id: str = Field(min_length=1, max_length=64)
    name: Optional[str] = None
    email: Optional[str] = Field(default=None, max_length=320)
    login_method: Optional[str] = Field(default=None, max_length=64)
    role: UserRole = UserRole.USER
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    last_signed_in: datetime = Field(default_factory=datetime.now)


class Follower(DomainModel):
    """Follow relationship.

    Business rules:
    - One row per (follower, following) pair (database unique constraint)
    - A user cannot follow themselves
    """

    id: FollowerId
    follower_id: UserId
    following_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
