"""List comments use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from quest.application.usecase.base import degrade_to_empty
from quest.application.usecase.comment.items import CommentItem
from quest.domain.service import CommentService
from quest.domain.value import CommentableType


class ListCommentsRequest(BaseModel):
    """List comments request."""

    entity_type: CommentableType
    entity_id: UUID
    limit: int = Field(default=50, ge=1, le=100)


class ListCommentsResponse(BaseModel):
    """Comments, most upvoted first."""

    comments: list[CommentItem]


class ListCommentsUseCase:
    """Use case for listing comments on an entity."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        comments = await degrade_to_empty(
            "list_comments",
            self.comment_service.get_comments(
                request.entity_type, request.entity_id, request.limit
            ),
        )
        return ListCommentsResponse(comments=[CommentItem.from_comment(c) for c in comments])
