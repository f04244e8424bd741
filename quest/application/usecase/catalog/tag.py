"""Tag use cases."""

import logfire
from pydantic import BaseModel, Field

from quest.application.usecase.base import degrade_to_empty
from quest.application.usecase.game.items import TagItem
from quest.domain.service import GameService
from quest.domain.value import TagCategory


class CreateTagRequest(BaseModel):
    """Create tag request."""

    name: str = Field(min_length=1, max_length=100)
    category: TagCategory = TagCategory.GENRE


class CreateTagResponse(BaseModel):
    """Id of the created tag."""

    id: str


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase:
    """Use case for listing available tags."""

    def __init__(self, game_service: GameService) -> None:
        """Initialize list tags use case.

        Args:
            game_service: Game domain service
        """
        self.game_service = game_service

    async def execute(self) -> ListTagsResponse:
        """Execute list tags flow.

        Returns:
            All tags, grouped by category
        """
        with logfire.span("list_tags.execute"):
            tags = await degrade_to_empty("list_tags", self.game_service.list_tags())
            logfire.info("Tags listed", count=len(tags))
            return ListTagsResponse(tags=[TagItem.from_tag(t) for t in tags])


class CreateTagUseCase:
    """Use case for adding a tag."""

    def __init__(self, game_service: GameService) -> None:
        self.game_service = game_service

    async def execute(self, request: CreateTagRequest) -> CreateTagResponse:
        """Raises AlreadyExistsError if the name is taken."""
        tag = await self.game_service.create_tag(request.name, request.category)
        return CreateTagResponse(id=str(tag.id))
