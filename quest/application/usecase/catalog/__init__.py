"""Catalogue (platform and tag) use cases."""

from .platform import (
    CreatePlatformRequest,
    CreatePlatformResponse,
    CreatePlatformUseCase,
    ListPlatformsResponse,
    ListPlatformsUseCase,
)
from .tag import (
    CreateTagRequest,
    CreateTagResponse,
    CreateTagUseCase,
    ListTagsResponse,
    ListTagsUseCase,
)

__all__ = [
    "CreatePlatformRequest",
    "CreatePlatformResponse",
    "CreatePlatformUseCase",
    "CreateTagRequest",
    "CreateTagResponse",
    "CreateTagUseCase",
    "ListPlatformsResponse",
    "ListPlatformsUseCase",
    "ListTagsResponse",
    "ListTagsUseCase",
]
