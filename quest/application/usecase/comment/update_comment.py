"""Update and delete comment use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from quest.domain.service import CommentService
from quest.domain.value import Actor, CommentId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    actor: Actor
    comment_id: UUID
    content: str = Field(min_length=1, max_length=10000)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    success: bool


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    actor: Actor
    comment_id: UUID


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool


class UpdateCommentUseCase:
    """Use case for editing a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        await self.comment_service.update_comment(
            request.actor, CommentId(request.comment_id), request.content
        )
        return UpdateCommentResponse(success=True)


class DeleteCommentUseCase:
    """Use case for deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        await self.comment_service.delete_comment(request.actor, CommentId(request.comment_id))
        return DeleteCommentResponse(success=True)
