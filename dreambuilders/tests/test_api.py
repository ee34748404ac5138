"""
Tests for API layer.

Tests:
- API service methods
- HTTP routes, status codes and error bodies
- Session lifecycle via API
"""

import pytest
from fastapi.testclient import TestClient

from ..api.app import create_app
from ..api.schemas import (
    CreateSessionRequest,
    ErrorCode,
    ErrorResponse,
    MoveRequest,
    MoveType,
    SessionStatus,
)
from ..api.service import APIService


class TestAPIService:
    """Tests for APIService."""

    @pytest.fixture
    def service(self):
        """Create a fresh API service."""
        return APIService()

    @pytest.fixture
    def session_id(self, service):
        request = CreateSessionRequest(hero_ids=["solo_hustler"], random_seed=42)
        return service.create_session(request).session_id

    def test_list_heroes(self, service):
        heroes = service.list_heroes()

        assert len(heroes) == 5
        grind = next(h for h in heroes if h.hero_id == "solo_hustler")
        assert grind.power.name == "Grind"
        assert grind.power.cost == 1

    def test_create_session(self, service):
        response = service.create_session(CreateSessionRequest(hero_ids=["brand_builder"]))

        assert response.status == SessionStatus.CREATED
        assert response.hero_ids == ["brand_builder"]
        player = response.game_state.players[0]
        assert player.is_current_turn
        assert len(player.hand) == 4
        assert player.deck_size == 26

    def test_create_unknown_hero(self, service):
        with pytest.raises(ValueError):
            service.create_session(CreateSessionRequest(hero_ids=["nobody"]))

    def test_get_nonexistent_session(self, service):
        response = service.get_session("nonexistent-id")

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.SESSION_NOT_FOUND

    def test_submit_end_turn(self, service, session_id):
        response = service.submit_move(session_id, MoveRequest(action_type=MoveType.END_TURN))

        assert response.success
        assert response.status == SessionStatus.ACTIVE
        assert response.game_state.turn == 2
        assert response.changes

    def test_rejected_move(self, service, session_id):
        response = service.submit_move(
            session_id, MoveRequest(action_type=MoveType.PLAY_CARD, index=99),
        )

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.INVALID_MOVE
        assert response.details == {"engine_error_code": "INVALID_MOVE"}

    def test_wrong_player(self, service):
        request = CreateSessionRequest(hero_ids=["solo_hustler", "brand_builder"])
        session_id = service.create_session(request).session_id

        response = service.submit_move(
            session_id, MoveRequest(action_type=MoveType.END_TURN, player_id="1"),
        )

        assert response.details == {"engine_error_code": "NOT_YOUR_TURN"}

    def test_end_session(self, service, session_id):
        assert service.end_session(session_id)
        assert isinstance(service.get_session(session_id), ErrorResponse)
        assert not service.end_session(session_id)

    def test_list_sessions(self, service):
        for _ in range(3):
            service.create_session(CreateSessionRequest(hero_ids=["solo_hustler"]))
        assert len(service.list_sessions()) == 3


class TestHTTP:
    """Tests for the FastAPI routes."""

    @pytest.fixture
    def client(self):
        return TestClient(create_app(APIService()))

    @pytest.fixture
    def session_id(self, client):
        response = client.post("/api/v1/sessions", json={"hero_ids": ["solo_hustler"], "random_seed": 1})
        assert response.status_code == 200
        return response.json()["session_id"]

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_heroes(self, client):
        body = client.get("/api/v1/heroes").json()
        assert {h["hero_id"] for h in body["heroes"]} == {
            "solo_hustler", "brand_builder", "automation_architect",
            "community_leader", "serial_founder",
        }

    def test_create_and_get(self, client, session_id):
        body = client.get(f"/api/v1/sessions/{session_id}").json()

        assert body["status"] == "created"
        assert body["random_seed"] == 1

    def test_invalid_hero(self, client):
        response = client.post("/api/v1/sessions", json={"hero_ids": ["nobody"]})

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_HERO"

    @pytest.mark.parametrize("body", [{}, {"hero_ids": []}, {"hero_ids": ["solo_hustler"], "random_seed": "x"}])
    def test_validation_error(self, client, body):
        response = client.post("/api/v1/sessions", json=body)

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_unknown_session(self, client):
        assert client.get("/api/v1/sessions/missing").status_code == 404
        assert client.get("/api/v1/sessions/missing/state").status_code == 404

        response = client.post("/api/v1/sessions/missing/moves", json={"action_type": "end_turn"})
        assert response.status_code == 404
        assert response.json()["error_code"] == "SESSION_NOT_FOUND"

    def test_end_turn_move(self, client, session_id):
        response = client.post(f"/api/v1/sessions/{session_id}/moves", json={"action_type": "end_turn"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"]
        assert body["game_state"]["turn"] == 2

    def test_rejected_move(self, client, session_id):
        response = client.post(
            f"/api/v1/sessions/{session_id}/moves",
            json={"action_type": "play_card", "index": 99},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "INVALID_MOVE"
        assert body["details"]["engine_error_code"] == "INVALID_MOVE"

    def test_unknown_move_type(self, client, session_id):
        response = client.post(f"/api/v1/sessions/{session_id}/moves", json={"action_type": "dance"})
        assert response.status_code == 422

    def test_state(self, client, session_id):
        body = client.get(f"/api/v1/sessions/{session_id}/state").json()

        assert body["current_player"] == "0"
        assert body["players"][0]["capital"] == 1
        assert body["game_log"]

    def test_delete_and_list(self, client, session_id):
        assert client.get("/api/v1/sessions").json()["count"] == 1

        response = client.delete(f"/api/v1/sessions/{session_id}")

        assert response.json() == {"success": True, "session_id": session_id}
        assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404
        assert client.get("/api/v1/sessions").json()["count"] == 0
