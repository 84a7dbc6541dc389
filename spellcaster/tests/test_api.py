"""
Tests for API layer.

Tests:
- Service methods
- Request/response serialization
- Error handling
- HTTP endpoints (when FastAPI is installed)
"""

import pytest
from pydantic import ValidationError

from ..api.schemas import (
    MAX_HIT_POINTS,
    MAX_MANA,
    BossStats,
    ErrorCode,
    ErrorResponse,
    SolveRequest,
    SolveResponse,
    SolveStatus,
    SolveTextRequest,
)
from ..api.service import SolverService
from ..config import SolverSettings


@pytest.fixture
def service():
    """Service with a small default player and a bounded search."""
    return SolverService(
        settings=SolverSettings(player_hp=10, player_mana=250, max_expansions=100_000)
    )


class TestSolverService:
    """Tests for SolverService."""

    def test_solve(self, service):
        response = service.solve(SolveRequest(boss=BossStats(hit_points=13, damage=8)))

        assert isinstance(response, SolveResponse)
        assert response.status == SolveStatus.SOLVED
        assert response.min_mana == 226
        assert response.spells == ["Poison", "Magic Missile"]
        assert response.rounds == []

    def test_solve_with_trace(self, service):
        request = SolveRequest(boss=BossStats(hit_points=13, damage=8), include_trace=True)
        response = service.solve(request)

        assert [r.round for r in response.rounds] == [0, 1, 2]
        assert response.rounds[0].spell is None
        assert response.rounds[1].active_effects == {"poison": 5}
        assert response.rounds[-1].boss_hp == 0
        assert response.rounds[-1].mana_spent == 226

    def test_request_overrides_settings(self, service):
        request = SolveRequest(
            boss=BossStats(hit_points=13, damage=8), player_hp=50, player_mana=500
        )
        assert service.solve(request).min_mana == 212

    def test_unwinnable(self, service):
        request = SolveRequest(boss=BossStats(hit_points=13, damage=8), hard_mode=True)
        response = service.solve(request)

        assert response.status == SolveStatus.UNWINNABLE
        assert response.min_mana is None
        assert response.hard_mode is True

    def test_budget_exhausted(self):
        service = SolverService(
            settings=SolverSettings(player_hp=10, player_mana=250, max_expansions=1)
        )
        response = service.solve(SolveRequest(boss=BossStats(hit_points=14, damage=8)))

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.BUDGET_EXHAUSTED

    def test_solve_text(self, service):
        response = service.solve_text(SolveTextRequest(input_text="Hit Points: 14\nDamage: 8\n"))
        assert response.min_mana == 641

    def test_solve_text_invalid(self, service):
        response = service.solve_text(SolveTextRequest(input_text="Hit Points: 14\n"))

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.INVALID_INPUT
        assert response.details == {"errors": ["Missing 'Damage' line"]}

    def test_unvalidated_request(self, service):
        """Requests built without validation still cannot produce negative stats."""
        request = SolveRequest.model_construct(
            boss=BossStats.model_construct(hit_points=-3, damage=8),
            hard_mode=False,
            player_hp=None,
            player_mana=None,
            include_trace=False,
        )
        response = service.solve(request)

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.VALIDATION_ERROR

    def test_solve_text_rejects_oversized_boss(self, service):
        response = service.solve_text(SolveTextRequest(input_text="Hit Points: 1000000\nDamage: 1\n"))

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.VALIDATION_ERROR

    def test_largest_request_stops_at_budget(self):
        service = SolverService(settings=SolverSettings(max_expansions=2_000))
        request = SolveRequest(
            boss=BossStats(hit_points=MAX_HIT_POINTS, damage=1),
            player_hp=MAX_HIT_POINTS,
            player_mana=MAX_MANA,
        )
        response = service.solve(request)

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.BUDGET_EXHAUSTED
        assert response.details == {"expanded": 2_000}


class TestSchemas:
    """Tests for Pydantic schema validation."""

    def test_negative_stats_rejected(self):
        with pytest.raises(ValidationError):
            BossStats(hit_points=-1, damage=8)

    def test_oversized_stats_rejected(self):
        with pytest.raises(ValidationError):
            BossStats(hit_points=MAX_HIT_POINTS + 1, damage=8)
        with pytest.raises(ValidationError):
            SolveRequest(boss=BossStats(hit_points=13, damage=8), player_mana=MAX_MANA + 1)

    def test_player_hp_matches_settings_bound(self):
        """Both the request and the settings require at least 1 hit point."""
        with pytest.raises(ValidationError):
            SolveRequest(boss=BossStats(hit_points=13, damage=8), player_hp=0)
        with pytest.raises(ValidationError):
            SolverSettings(player_hp=0)

    def test_response_serializes(self, service):
        response = service.solve(SolveRequest(boss=BossStats(hit_points=13, damage=8)))
        data = response.model_dump(mode="json")

        assert data["status"] == "solved"
        assert data["min_mana"] == 226
        assert data["api_version"] == "v1"

    def test_error_codes_are_strings(self):
        error = ErrorResponse(error="bad", error_code=ErrorCode.INVALID_INPUT)
        assert error.model_dump(mode="json")["error_code"] == "INVALID_INPUT"


class TestApp:
    """Tests for the FastAPI application."""

    @pytest.fixture
    def client(self, service):
        pytest.importorskip("fastapi")
        pytest.importorskip("httpx")
        from fastapi.testclient import TestClient

        from ..api.app import create_app

        return TestClient(create_app(service=service))

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_solve_endpoint(self, client):
        response = client.post("/api/v1/solve", json={"boss": {"hit_points": 13, "damage": 8}})

        assert response.status_code == 200
        assert response.json()["min_mana"] == 226

    def test_solve_text_endpoint_rejects_bad_input(self, client):
        response = client.post("/api/v1/solve/text", json={"input_text": "Damage: 8"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_INPUT"

    def test_request_validation(self, client):
        response = client.post("/api/v1/solve", json={"boss": {"hit_points": -1, "damage": 8}})
        assert response.status_code == 422
