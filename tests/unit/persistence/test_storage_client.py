"""Unit tests for StorageClient availability tracking."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from quest.config import DatabaseSettings, Settings
from quest.domain.error import StorageUnavailableError
from quest.persistence.database import StorageClient, StorageState, is_connection_error


def _refused() -> OperationalError:
    return OperationalError("SELECT 1", None, ConnectionRefusedError("refused"))


class FakeConnection:
    def __init__(self, engine: "FakeEngine") -> None:
        self.engine = engine

    async def __aenter__(self) -> "FakeConnection":
        return self

    async def __aexit__(self, *exc_info) -> None:
        return None

    async def execute(self, stmt):
        self.engine.pings += 1
        if self.engine.failures_left > 0:
            self.engine.failures_left -= 1
            raise _refused()
        return None


class FakeEngine:
    """Engine whose first ``failures`` pings are refused."""

    def __init__(self, failures: int = 0) -> None:
        self.failures_left = failures
        self.pings = 0

    def connect(self) -> FakeConnection:
        return FakeConnection(self)


class FakeSession:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls = 0

    async def execute(self, stmt):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return "result"


def _settings(attempts: int = 3, cooldown: float = 60.0) -> Settings:
    return Settings(
        database=DatabaseSettings(
            connect_attempts=attempts,
            retry_backoff_seconds=0,
            reconnect_cooldown_seconds=cooldown,
        )
    )


class TestConnect:
    """Tests for the startup ping."""

    @pytest.mark.asyncio
    async def test_healthy_after_successful_ping(self):
        storage = StorageClient(FakeEngine(), _settings())

        assert await storage.connect() is True
        assert storage.state == StorageState.HEALTHY

    @pytest.mark.asyncio
    async def test_retries_until_database_answers(self):
        engine = FakeEngine(failures=2)
        storage = StorageClient(engine, _settings(attempts=3))

        assert await storage.connect() is True
        assert engine.pings == 3
        assert storage.is_healthy

    @pytest.mark.asyncio
    async def test_gives_up_after_attempts_without_raising(self):
        engine = FakeEngine(failures=10)
        storage = StorageClient(engine, _settings(attempts=2))

        assert await storage.connect() is False
        assert engine.pings == 2
        assert storage.state == StorageState.UNAVAILABLE


class TestExecute:
    """Tests for statement execution through the client."""

    @pytest.mark.asyncio
    async def test_connection_failure_becomes_storage_unavailable(self):
        # Arrange
        storage = StorageClient(FakeEngine(), _settings())
        await storage.connect()
        session = FakeSession(error=_refused())

        # Act & Assert
        with pytest.raises(StorageUnavailableError):
            await storage.execute(session, "SELECT 1")
        assert storage.state == StorageState.UNAVAILABLE

    @pytest.mark.asyncio
    async def test_fails_fast_during_cooldown(self):
        # Arrange
        storage = StorageClient(FakeEngine(failures=10), _settings(attempts=1))
        await storage.connect()
        session = FakeSession()

        # Act & Assert
        with pytest.raises(StorageUnavailableError):
            await storage.execute(session, "SELECT 1")
        assert session.calls == 0

    @pytest.mark.asyncio
    async def test_reconnects_after_cooldown(self):
        # Arrange
        engine = FakeEngine(failures=1)
        storage = StorageClient(engine, _settings(attempts=1, cooldown=0))
        await storage.connect()
        session = FakeSession()

        # Act
        result = await storage.execute(session, "SELECT 1")

        # Assert
        assert result == "result"
        assert storage.is_healthy

    @pytest.mark.asyncio
    async def test_constraint_violation_passes_through(self):
        """A unique violation is the caller's business, not an outage."""
        storage = StorageClient(FakeEngine(), _settings())
        await storage.connect()
        session = FakeSession(error=IntegrityError("INSERT", None, Exception("dup")))

        with pytest.raises(IntegrityError):
            await storage.execute(session, "INSERT")
        assert storage.is_healthy


class TestIsConnectionError:
    def test_classification(self):
        assert is_connection_error(_refused())
        assert is_connection_error(ConnectionResetError())
        assert not is_connection_error(IntegrityError("INSERT", None, Exception()))
        assert not is_connection_error(ValueError("nope"))
