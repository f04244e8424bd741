"""Base use case and shared read helpers."""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, TypeVar

import logfire

from quest.domain.error import StorageUnavailableError

T = TypeVar("T")


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


async def degrade_to_empty(operation: str, awaitable: Awaitable[list[T]]) -> list[T]:
    """Await a list read, answering an empty list while storage is down.

    Only list reads degrade. Point lookups and mutations let
    StorageUnavailableError propagate so the caller sees a 503.

    Args:
        operation: Name used in the warning
        awaitable: The pending list read

    Returns:
        The list, or [] if storage is unavailable
    """
    try:
        return await awaitable
    except StorageUnavailableError:
        logfire.warn("Storage unavailable, serving empty list", operation=operation)
        return []
