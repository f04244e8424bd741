"""PostgreSQL implementation of Comment repository."""

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, delete, select

from quest.domain.model import Comment
from quest.domain.repository import CommentRepository
from quest.domain.value import CommentableType, CommentId
from quest.persistence.mappers import model_to_dict, row_to_comment
from quest.persistence.repository.base import PostgresRepository
from quest.persistence.tables import comments_table


class PostgresCommentRepository(PostgresRepository, CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        return await self._fetch_one(stmt, row_to_comment)

    async def find_by_entity(
        self, entity_type: CommentableType, entity_id: UUID, limit: int = 50
    ) -> list[Comment]:
        """Find comments on an entity, most upvoted first."""
        stmt = (
            select(comments_table)
            .where(
                and_(
                    comments_table.c.entity_type == entity_type.value,
                    comments_table.c.entity_id == entity_id,
                )
            )
            .order_by(comments_table.c.upvotes.desc(), comments_table.c.created_at)
            .limit(limit)
        )
        return await self._fetch_all(stmt, row_to_comment)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)

        comment_dict = model_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self._write(stmt)
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        await self._write(stmt)
