"""Add to library use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quest.domain.service import LibraryService
from quest.domain.value import GameId, LibraryStatus, UserId


class AddToLibraryRequest(BaseModel):
    """Add to library request."""

    user_id: UUID  # From authenticated user
    game_id: UUID
    status: LibraryStatus = LibraryStatus.BACKLOG


class AddToLibraryResponse(BaseModel):
    """Id of the created entry."""

    id: str


class AddToLibraryUseCase:
    """Use case for adding a game to the signed-in user's library."""

    def __init__(self, library_service: LibraryService) -> None:
        """Initialize add to library use case.

        Args:
            library_service: Library domain service
        """
        self.library_service = library_service

    async def execute(self, request: AddToLibraryRequest) -> AddToLibraryResponse:
        """Execute add to library flow.

        Args:
            request: Add to library request

        Returns:
            The new entry id

        Raises:
            NotFoundError: If the game does not exist
            AlreadyExistsError: If the game is already in the library
        """
        with logfire.span(
            "add_to_library.execute",
            user_id=str(request.user_id),
            game_id=str(request.game_id),
        ):
            entry = await self.library_service.add_to_library(
                UserId(request.user_id), GameId(request.game_id), request.status
            )
            return AddToLibraryResponse(id=str(entry.id))
