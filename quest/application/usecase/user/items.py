"""Response items shared by user use cases."""

from datetime import datetime

from pydantic import BaseModel

from quest.domain.model import User
from quest.domain.value import UserRole


class UserItem(BaseModel):
    """Public view of a user."""

    id: str
    name: str | None
    bio: str | None
    avatar_url: str | None
    role: UserRole
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserItem":
        return cls(
            id=str(user.id),
            name=user.name,
            bio=user.bio,
            avatar_url=user.avatar_url,
            role=user.role,
            created_at=user.created_at,
        )
