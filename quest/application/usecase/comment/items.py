"""Response items for comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from quest.domain.model import Comment
from quest.domain.value import CommentableType


class CommentItem(BaseModel):
    """Comment item."""

    id: str
    user_id: str
    entity_type: CommentableType
    entity_id: str
    content: str
    upvotes: int
    downvotes: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=str(comment.id),
            user_id=str(comment.user_id),
            entity_type=comment.entity_type,
            entity_id=str(comment.entity_id),
            content=comment.content,
            upvotes=comment.upvotes,
            downvotes=comment.downvotes,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
