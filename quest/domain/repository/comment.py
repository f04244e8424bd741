"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from quest.domain.model import Comment
from quest.domain.value import CommentableType, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        pass

    @abstractmethod
    async def find_by_entity(
        self, entity_type: CommentableType, entity_id: UUID, limit: int = 50
    ) -> list[Comment]:
        """List comments on an entity, most upvoted first.

        Args:
            entity_type: Type of the commented entity
            entity_id: ID of the commented entity
            limit: Maximum number of comments

        Returns:
            Comments on the entity
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        pass
