"""Update library entry use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from quest.domain.service import LibraryService
from quest.domain.value import Actor, LibraryEntryId, LibraryStatus


class UpdateLibraryEntryRequest(BaseModel):
    """Update library entry request."""

    actor: Actor
    entry_id: UUID
    status: LibraryStatus | None = None
    is_favorite: bool | None = None
    hours_played: int | None = Field(default=None, ge=0)
    personal_rating: int | None = Field(default=None, ge=1, le=10)


class UpdateLibraryEntryResponse(BaseModel):
    """Update library entry response."""

    success: bool


class UpdateLibraryEntryUseCase:
    """Use case for changing status, favorite flag, hours or rating."""

    def __init__(self, library_service: LibraryService) -> None:
        self.library_service = library_service

    async def execute(self, request: UpdateLibraryEntryRequest) -> UpdateLibraryEntryResponse:
        """Raises NotFoundError or NotAuthorizedError."""
        await self.library_service.update_entry(
            request.actor,
            LibraryEntryId(request.entry_id),
            status=request.status,
            is_favorite=request.is_favorite,
            hours_played=request.hours_played,
            personal_rating=request.personal_rating,
        )
        return UpdateLibraryEntryResponse(success=True)
