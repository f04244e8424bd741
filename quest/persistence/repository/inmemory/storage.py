"""In-memory storage client for testing."""

from quest.domain.error import StorageUnavailableError
from quest.persistence.database import StorageClient, StorageState


class InMemoryStorageClient(StorageClient):
    """Storage client with no database behind it.

    Starts healthy. Tests flip it with ``mark_unavailable()`` to exercise
    the unavailable paths.
    """

    def __init__(self) -> None:
        self.engine = None  # type: ignore[assignment]
        self.settings = None  # type: ignore[assignment]
        self.state = StorageState.HEALTHY
        self._unavailable_since = None

    async def connect(self) -> bool:
        self.mark_healthy()
        return True

    async def ensure_available(self) -> None:
        if self.state == StorageState.UNAVAILABLE:
            raise StorageUnavailableError()
