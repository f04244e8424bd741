"""Remove library entry use case."""

from uuid import UUID

from pydantic import BaseModel

from quest.domain.service import LibraryService
from quest.domain.value import Actor, LibraryEntryId


class RemoveLibraryEntryRequest(BaseModel):
    """Remove library entry request."""

    actor: Actor
    entry_id: UUID


class RemoveLibraryEntryResponse(BaseModel):
    """Remove library entry response."""

    success: bool


class RemoveLibraryEntryUseCase:
    """Use case for removing a game from a library."""

    def __init__(self, library_service: LibraryService) -> None:
        self.library_service = library_service

    async def execute(
        self, request: RemoveLibraryEntryRequest
    ) -> RemoveLibraryEntryResponse:
        await self.library_service.remove_entry(
            request.actor, LibraryEntryId(request.entry_id)
        )
        return RemoveLibraryEntryResponse(success=True)
