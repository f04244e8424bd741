"""End-to-end tests for games, reviews, achievements and the library.

Each test drives the API with several logged-in clients against one
in-memory store and checks that summary columns match their fact rows.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from quest.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def app() -> FastAPI:
    return create_app(build_test_container())


def login(app: FastAPI, open_id: str) -> TestClient:
    client = TestClient(app)
    assert client.post("/auth/login", json={"open_id": open_id}).status_code == 200
    return client


def create_game(client: TestClient, title: str = "Hollow Knight") -> str:
    response = client.post("/games", json={"title": title})
    assert response.status_code == 201
    return response.json()["id"]


def create_achievement(client: TestClient, game_id: str) -> str:
    response = client.post(
        "/achievements", json={"game_id": game_id, "title": "Steel Soul", "points": 50}
    )
    assert response.status_code == 201
    return response.json()["id"]


class TestReviews:
    def test_reviews_drive_game_rating(self, app):
        # Arrange
        alice = login(app, "alice")
        bob = login(app, "bob")
        game_id = create_game(alice)

        # Act
        first = alice.post("/reviews", json={"game_id": game_id, "rating": 7, "content": "Good"})
        second = bob.post("/reviews", json={"game_id": game_id, "rating": 8, "content": "Great"})

        # Assert
        assert first.status_code == 201
        assert second.status_code == 201
        game = alice.get(f"/games/{game_id}").json()
        assert game["average_rating"] == 8
        assert game["total_reviews"] == 2
        assert len(alice.get(f"/games/{game_id}/reviews").json()["reviews"]) == 2

    def test_second_review_is_409(self, app):
        alice = login(app, "alice")
        game_id = create_game(alice)
        alice.post("/reviews", json={"game_id": game_id, "rating": 7, "content": "Good"})

        response = alice.post(
            "/reviews", json={"game_id": game_id, "rating": 2, "content": "Again"}
        )

        assert response.status_code == 409
        assert alice.get(f"/games/{game_id}").json()["total_reviews"] == 1

    def test_rating_out_of_range_is_422(self, app):
        alice = login(app, "alice")
        game_id = create_game(alice)

        response = alice.post(
            "/reviews", json={"game_id": game_id, "rating": 11, "content": "Too good"}
        )

        assert response.status_code == 422

    def test_other_user_cannot_delete_review(self, app):
        alice = login(app, "alice")
        bob = login(app, "bob")
        game_id = create_game(alice)
        review_id = alice.post(
            "/reviews", json={"game_id": game_id, "rating": 7, "content": "Good"}
        ).json()["id"]

        response = bob.delete(f"/reviews/{review_id}")

        assert response.status_code == 403


class TestAchievements:
    def test_double_unlock_is_409_and_counts_once(self, app):
        # Arrange
        alice = login(app, "alice")
        game_id = create_game(alice)
        achievement_id = create_achievement(alice, game_id)

        # Act
        first = alice.post(f"/achievements/{achievement_id}/unlock")
        second = alice.post(f"/achievements/{achievement_id}/unlock")

        # Assert
        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json() == {"detail": "Achievement already unlocked"}
        achievement = alice.get(f"/achievements/{achievement_id}").json()
        assert achievement["total_unlocks"] == 1
        unlocked = alice.get("/achievements/unlocked").json()["unlocks"]
        assert [u["achievement_id"] for u in unlocked] == [achievement_id]

    def test_difficulty_votes_average(self, app):
        # Arrange
        alice = login(app, "alice")
        bob = login(app, "bob")
        game_id = create_game(alice)
        achievement_id = create_achievement(alice, game_id)

        # Act
        alice.post(f"/achievements/{achievement_id}/difficulty", json={"difficulty": 4})
        bob.post(f"/achievements/{achievement_id}/difficulty", json={"difficulty": 8})
        repeat = bob.post(
            f"/achievements/{achievement_id}/difficulty", json={"difficulty": 1}
        )

        # Assert
        assert repeat.status_code == 409
        achievement = alice.get(f"/achievements/{achievement_id}").json()
        assert achievement["difficulty_rating"] == 6
        assert achievement["total_difficulty_votes"] == 2

    def test_creating_achievement_bumps_game_total(self, app):
        alice = login(app, "alice")
        game_id = create_game(alice)

        create_achievement(alice, game_id)

        assert alice.get(f"/games/{game_id}").json()["total_achievements"] == 1

    def test_unknown_achievement_is_404(self, app):
        alice = login(app, "alice")

        response = alice.post(
            "/achievements/00000000-0000-0000-0000-000000000001/unlock"
        )

        assert response.status_code == 404


class TestLibrary:
    def test_double_add_is_409_with_one_entry(self, app):
        # Arrange
        alice = login(app, "alice")
        game_id = create_game(alice)

        # Act
        first = alice.post("/library", json={"game_id": game_id})
        second = alice.post("/library", json={"game_id": game_id, "status": "playing"})

        # Assert
        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json() == {"detail": "Game already in library"}
        entries = alice.get("/library").json()["entries"]
        assert len(entries) == 1
        assert entries[0]["status"] == "backlog"

    def test_status_filter(self, app):
        alice = login(app, "alice")
        playing = create_game(alice, "Celeste")
        backlog = create_game(alice, "Hades")
        alice.post("/library", json={"game_id": playing, "status": "playing"})
        alice.post("/library", json={"game_id": backlog})

        entries = alice.get("/library", params={"status": "playing"}).json()["entries"]

        assert [e["game_id"] for e in entries] == [playing]


class TestVotes:
    def test_toggle_leaves_latest_vote(self, app):
        # Arrange
        alice = login(app, "alice")
        target = {
            "entity_type": "review",
            "entity_id": "00000000-0000-0000-0000-000000000002",
        }

        # Act
        alice.post("/votes", json={**target, "vote_type": "up"})
        alice.post("/votes", json={**target, "vote_type": "down"})

        # Assert
        mine = alice.get("/votes/me", params=target).json()
        assert mine["vote"]["vote_type"] == "down"

    def test_remove_vote(self, app):
        alice = login(app, "alice")
        target = {
            "entity_type": "comment",
            "entity_id": "00000000-0000-0000-0000-000000000003",
        }
        alice.post("/votes", json={**target, "vote_type": "up"})

        response = alice.delete("/votes", params=target)

        assert response.json() == {"success": True, "removed": True}
        assert alice.get("/votes/me", params=target).json() == {"vote": None}


class TestFeed:
    def test_feed_shows_followed_users_activity(self, app):
        # Arrange
        alice = login(app, "alice")
        bob = login(app, "bob")
        bob_id = bob.get("/auth/me").json()["user"]["id"]
        game_id = create_game(bob)
        alice.post(f"/users/{bob_id}/follow")

        # Act
        bob.post("/reviews", json={"game_id": game_id, "rating": 9, "content": "Superb"})
        feed = alice.get("/feed").json()["activities"]

        # Assert
        assert len(feed) == 1
        assert feed[0]["user_id"] == bob_id
        assert feed[0]["activity_type"] == "review"
        assert feed[0]["metadata"]["rating"] == 9


class TestMutationBodies:
    """Creates answer with just the new id, edits with just a success flag."""

    def test_creates_return_only_the_id(self, app):
        alice = login(app, "alice")
        game_id = create_game(alice)
        achievement_id = create_achievement(alice, game_id)

        guide = alice.post("/guides", json={"game_id": game_id, "title": "Route"})
        guide_id = guide.json()["id"]
        created = [
            guide,
            alice.post(
                f"/guides/{guide_id}/markers",
                json={"title": "Bench", "position_x": 10, "position_y": 20},
            ),
            alice.post(
                "/comments",
                json={"entity_type": "guide", "entity_id": guide_id, "content": "Nice"},
            ),
            alice.post(
                "/votes",
                json={"entity_type": "guide", "entity_id": guide_id, "vote_type": "up"},
            ),
            alice.post("/platforms", json={"name": "PC"}),
            alice.post("/tags", json={"name": "Metroidvania"}),
            alice.post(
                f"/achievements/{achievement_id}/images",
                json={"image_url": "https://img.example/steel-soul.png"},
            ),
            alice.post("/games", json={"title": "Celeste"}),
            alice.post("/achievements", json={"game_id": game_id, "title": "Speedrun"}),
        ]

        for response in created:
            assert response.status_code == 201, response.text
            assert set(response.json()) == {"id"}

    def test_edits_return_success(self, app):
        # Arrange
        alice = login(app, "alice")
        game_id = create_game(alice)
        entry_id = alice.post("/library", json={"game_id": game_id}).json()["id"]
        review_id = alice.post(
            "/reviews", json={"game_id": game_id, "rating": 6, "content": "Fine"}
        ).json()["id"]
        guide_id = alice.post(
            "/guides", json={"game_id": game_id, "title": "Route"}
        ).json()["id"]
        comment_id = alice.post(
            "/comments",
            json={"entity_type": "review", "entity_id": review_id, "content": "Agreed"},
        ).json()["id"]

        # Act
        edits = [
            alice.patch(f"/library/{entry_id}", json={"status": "completed"}),
            alice.patch(f"/reviews/{review_id}", json={"rating": 9}),
            alice.patch(f"/guides/{guide_id}", json={"title": "Full route"}),
            alice.patch(f"/comments/{comment_id}", json={"content": "Agreed, mostly"}),
        ]

        # Assert
        for response in edits:
            assert response.status_code == 200, response.text
            assert response.json() == {"success": True}
        assert alice.get("/library").json()["entries"][0]["status"] == "completed"
        assert alice.get(f"/games/{game_id}").json()["average_rating"] == 9
