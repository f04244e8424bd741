"""End-to-end behaviour while the backing store is unreachable.

Writes fail with 503; list reads degrade to empty collections.
"""

from httpx import ASGITransport, AsyncClient
import pytest

from quest.interface.api.app import create_app
from quest.persistence.database import StorageClient
from tests.di import build_test_container

UNAVAILABLE = {"detail": "Storage is temporarily unavailable"}


class TestStorageOutage:
    @pytest.mark.asyncio
    async def test_writes_are_503_and_library_reads_empty(self):
        # Arrange
        container = build_test_container()
        app = create_app(container)
        storage = await container.get(StorageClient)

        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://testserver"
        ) as client:
            login = await client.post("/auth/login", json={"open_id": "alice"})
            assert login.status_code == 200
            game = await client.post("/games", json={"title": "Hollow Knight"})
            game_id = game.json()["id"]
            achievement = await client.post(
                "/achievements", json={"game_id": game_id, "title": "Steel Soul"}
            )
            achievement_id = achievement.json()["id"]

            storage.mark_unavailable()

            # Act
            add = await client.post("/library", json={"game_id": game_id})
            unlock = await client.post(f"/achievements/{achievement_id}/unlock")
            difficulty = await client.post(
                f"/achievements/{achievement_id}/difficulty", json={"difficulty": 5}
            )
            library = await client.get("/library")

        # Assert
        for response in (add, unlock, difficulty):
            assert response.status_code == 503
            assert response.json() == UNAVAILABLE
        assert library.status_code == 200
        assert library.json()["entries"] == []
        await container.close()

    @pytest.mark.asyncio
    async def test_recovered_storage_accepts_writes_again(self):
        container = build_test_container()
        app = create_app(container)
        storage = await container.get(StorageClient)

        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://testserver"
        ) as client:
            await client.post("/auth/login", json={"open_id": "alice"})
            storage.mark_unavailable()
            failed = await client.post("/games", json={"title": "Celeste"})
            storage.mark_healthy()
            created = await client.post("/games", json={"title": "Celeste"})

        assert failed.status_code == 503
        assert created.status_code == 201
        await container.close()
