"""Guide use cases."""

from .create_guide import CreateGuideRequest, CreateGuideResponse, CreateGuideUseCase
from .get_guide import (
    GetGuideRequest,
    GetGuideResponse,
    GetGuideUseCase,
    ListGuidesRequest,
    ListGuidesResponse,
    ListGuidesUseCase,
)
from .items import GuideItem, MapMarkerItem
from .map_marker import (
    AddMapMarkerRequest,
    AddMapMarkerResponse,
    AddMapMarkerUseCase,
    DeleteMapMarkerRequest,
    DeleteMapMarkerResponse,
    DeleteMapMarkerUseCase,
)
from .update_guide import UpdateGuideRequest, UpdateGuideResponse, UpdateGuideUseCase

__all__ = [
    "AddMapMarkerRequest",
    "AddMapMarkerResponse",
    "AddMapMarkerUseCase",
    "CreateGuideRequest",
    "CreateGuideResponse",
    "CreateGuideUseCase",
    "DeleteMapMarkerRequest",
    "DeleteMapMarkerResponse",
    "DeleteMapMarkerUseCase",
    "GetGuideRequest",
    "GetGuideResponse",
    "GetGuideUseCase",
    "GuideItem",
    "ListGuidesRequest",
    "ListGuidesResponse",
    "ListGuidesUseCase",
    "MapMarkerItem",
    "UpdateGuideRequest",
    "UpdateGuideResponse",
    "UpdateGuideUseCase",
]
