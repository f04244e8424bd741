"""List library use case."""

from uuid import UUID

from pydantic import BaseModel

from quest.application.usecase.base import degrade_to_empty
from quest.application.usecase.library.items import LibraryEntryItem
from quest.domain.service import LibraryService
from quest.domain.value import LibraryStatus, UserId


class ListLibraryRequest(BaseModel):
    """List library request."""

    user_id: UUID
    status: LibraryStatus | None = None


class ListLibraryResponse(BaseModel):
    """List library response."""

    entries: list[LibraryEntryItem]


class ListLibraryUseCase:
    """Use case for listing a user's library."""

    def __init__(self, library_service: LibraryService) -> None:
        self.library_service = library_service

    async def execute(self, request: ListLibraryRequest) -> ListLibraryResponse:
        entries = await degrade_to_empty(
            "list_library",
            self.library_service.get_library(UserId(request.user_id), request.status),
        )
        return ListLibraryResponse(
            entries=[LibraryEntryItem.from_entry(e) for e in entries]
        )
