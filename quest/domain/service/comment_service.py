"""Comment domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from quest.domain.error import NotFoundError
from quest.domain.model import Comment
from quest.domain.repository import CommentRepository
from quest.domain.value import Actor, CommentableType, CommentId, UserId

from .base import Service, ensure_can_modify


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        user_id: UserId,
        entity_type: CommentableType,
        entity_id: UUID,
        content: str,
    ) -> Comment:
        """Comment on an achievement, guide or review.

        The target is a polymorphic reference and is not checked for
        existence.

        Args:
            user_id: Author ID
            entity_type: Type of the commented entity
            entity_id: ID of the commented entity
            content: Comment text

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.create_comment",
            user_id=str(user_id),
            entity_type=entity_type.value,
            entity_id=str(entity_id),
        ):
            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                user_id=user_id,
                entity_type=entity_type,
                entity_id=entity_id,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_comments(
        self, entity_type: CommentableType, entity_id: UUID, limit: int = 50
    ) -> list[Comment]:
        return await self.comment_repository.find_by_entity(entity_type, entity_id, limit)

    async def update_comment(
        self, actor: Actor, comment_id: CommentId, content: str
    ) -> Comment:
        """Edit a comment's text.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor does not own the comment
        """
        with logfire.span("comment_service.update_comment", comment_id=str(comment_id)):
            comment = await self.get_comment(comment_id)
            ensure_can_modify(actor, comment.user_id, "comment", comment_id)
            updated = Comment.model_validate(
                {**comment.model_dump(), "content": content, "updated_at": datetime.now()}
            )
            return await self.comment_repository.save(updated)

    async def delete_comment(self, actor: Actor, comment_id: CommentId) -> None:
        """Delete a comment.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor does not own the comment
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            comment = await self.get_comment(comment_id)
            ensure_can_modify(actor, comment.user_id, "comment", comment_id)
            await self.comment_repository.delete(comment_id)
