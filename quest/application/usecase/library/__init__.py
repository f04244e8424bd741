"""Library use cases."""

from .add_to_library import AddToLibraryRequest, AddToLibraryResponse, AddToLibraryUseCase
from .items import LibraryEntryItem
from .list_library import ListLibraryRequest, ListLibraryResponse, ListLibraryUseCase
from .remove_library_entry import (
    RemoveLibraryEntryRequest,
    RemoveLibraryEntryResponse,
    RemoveLibraryEntryUseCase,
)
from .update_library_entry import (
    UpdateLibraryEntryRequest,
    UpdateLibraryEntryResponse,
    UpdateLibraryEntryUseCase,
)

__all__ = [
    "AddToLibraryRequest",
    "AddToLibraryResponse",
    "AddToLibraryUseCase",
    "LibraryEntryItem",
    "ListLibraryRequest",
    "ListLibraryResponse",
    "ListLibraryUseCase",
    "RemoveLibraryEntryRequest",
    "RemoveLibraryEntryResponse",
    "RemoveLibraryEntryUseCase",
    "UpdateLibraryEntryRequest",
    "UpdateLibraryEntryResponse",
    "UpdateLibraryEntryUseCase",
]
