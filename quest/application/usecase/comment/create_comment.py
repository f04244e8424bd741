"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from quest.domain.service import CommentService
from quest.domain.value import CommentableType, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    user_id: UUID  # From authenticated user
    entity_type: CommentableType
    entity_id: UUID
    content: str = Field(min_length=1, max_length=10000)


class CreateCommentResponse(BaseModel):
    """Id of the created comment."""

    id: str


class CreateCommentUseCase:
    """Use case for commenting on an achievement, guide or review."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        with logfire.span(
            "create_comment.execute",
            entity_type=request.entity_type.value,
            entity_id=str(request.entity_id),
        ):
            comment = await self.comment_service.create_comment(
                user_id=UserId(request.user_id),
                entity_type=request.entity_type,
                entity_id=request.entity_id,
                content=request.content,
            )
            return CreateCommentResponse(id=str(comment.id))
