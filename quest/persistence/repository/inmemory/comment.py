"""In-memory comment repository for testing."""

from typing import Optional
from uuid import UUID

from quest.domain.model import Comment
from quest.domain.repository import CommentRepository
from quest.domain.value import CommentableType, CommentId
from quest.persistence.database import StorageClient

from .base import InMemoryRepository


class InMemoryCommentRepository(InMemoryRepository, CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        await self._ensure_available()
        return self._comments.get(comment_id)

    async def find_by_entity(
        self, entity_type: CommentableType, entity_id: UUID, limit: int = 50
    ) -> list[Comment]:
        """Find comments on an entity, most upvoted first."""
        await self._ensure_available()
        comments = [
            c
            for c in self._comments.values()
            if c.entity_type == entity_type and c.entity_id == entity_id
        ]
        comments.sort(key=lambda c: (-c.upvotes, c.created_at))
        return comments[:limit]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        await self._ensure_available()
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment by ID."""
        await self._ensure_available()
        self._comments.pop(comment_id, None)
