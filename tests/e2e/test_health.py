"""End-to-end tests for the health endpoint."""

from httpx import ASGITransport, AsyncClient
import pytest

from quest.interface.api.app import create_app
from quest.persistence.database import StorageClient
from tests.di import build_test_container


class TestHealth:
    @pytest.mark.asyncio
    async def test_healthy_storage(self):
        container = build_test_container()
        app = create_app(container)

        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["storage"] == "healthy"
        assert body["version"] == "0.1.0"
        await container.close()

    @pytest.mark.asyncio
    async def test_unavailable_storage_reports_degraded(self):
        """The service keeps answering 200 while storage is down."""
        # Arrange
        container = build_test_container()
        app = create_app(container)
        storage = await container.get(StorageClient)
        storage.mark_unavailable()

        # Act
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            response = await client.get("/health")

        # Assert
        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
        assert response.json()["storage"] == "unavailable"
        await container.close()
