"""
Tests for the FastAPI application.

Test categories:
- Health and defaults endpoints
- Happy path (valid request -> 200)
- Bound violations (-> 400)
- Pydantic errors (missing/invalid fields -> 422)
- Internal errors (engine failure -> 500)
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from sales_diagnostic.api import app, get_engine_config
from sales_diagnostic.config import DEFAULT_ENGINE_CONFIG


# =============================================================================
# Test Client
# =============================================================================


@pytest.fixture
def client() -> TestClient:
    """Create test client for the FastAPI app."""
    return TestClient(app)


# =============================================================================
# Test Data
# =============================================================================


def make_valid_request() -> dict:
    """Create a valid diagnostic request payload (the reset values)."""
    return {
        "leads": 100,
        "conversion_rate": 10,
        "average_ticket": 5000,
        "follow_up_attempts": 3,
        "response_time_minutes": 60,
    }


# =============================================================================
# System Endpoints
# =============================================================================


class TestSystemEndpoints:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_defaults(self, client: TestClient) -> None:
        response = client.get("/defaults")

        assert response.status_code == 200
        body = response.json()
        assert body["inputs"]["response_time_minutes"] == 60
        assert body["inputs"]["follow_up_attempts"] == 3
        assert body["bounds"]["response_time_minutes"]["max"] == 180
        assert body["bounds"]["leads"]["min"] == 10


# =============================================================================
# Happy Path Tests (200)
# =============================================================================


class TestHappyPath:
    """Tests for successful diagnostic requests."""

    def test_valid_request_returns_200(self, client: TestClient) -> None:
        response = client.post("/diagnostic", json=make_valid_request())

        assert response.status_code == 200

    def test_response_contains_result(self, client: TestClient) -> None:
        response = client.post("/diagnostic", json=make_valid_request())

        result = response.json()["result"]
        assert result["current_sales"] == pytest.approx(10)
        assert result["follow_up"]["status"] == "WARNING"
        assert result["response"]["status"] == "WARNING"
        assert result["total"]["efficiency_percent"] == pytest.approx(61.14, abs=0.1)

    def test_response_echoes_inputs(self, client: TestClient) -> None:
        response = client.post("/diagnostic", json=make_valid_request())

        assert response.json()["inputs"] == make_valid_request()

    def test_response_contains_charts(self, client: TestClient) -> None:
        response = client.post("/diagnostic", json=make_valid_request())

        charts = response.json()["charts"]
        assert len(charts["revenue_breakdown"]) == 3
        assert len(charts["loss_composition"]) == 2

    def test_response_contains_findings(self, client: TestClient) -> None:
        response = client.post("/diagnostic", json=make_valid_request())

        body = response.json()
        assert body["has_loss"] is True
        assert [f["category"] for f in body["findings"]] == [
            "follow_up",
            "response_time",
            "efficiency",
            "summary",
        ]

    def test_zero_loss_request(self, client: TestClient) -> None:
        request_data = make_valid_request()
        request_data.update(conversion_rate=100, follow_up_attempts=10, response_time_minutes=1)

        response = client.post("/diagnostic", json=request_data)

        assert response.status_code == 200
        body = response.json()
        assert body["has_loss"] is False
        assert body["charts"]["loss_composition"] == []


# =============================================================================
# Validation Error Tests (400)
# =============================================================================


class TestValidationErrors:
    """Tests for bound violations that return 400."""

    def test_leads_below_min_returns_400(self, client: TestClient) -> None:
        request_data = make_valid_request()
        request_data["leads"] = 0

        response = client.post("/diagnostic", json=request_data)

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["code"] == "VALIDATION_FAILED"
        assert "leads" in detail["detail"]

    def test_response_time_above_ceiling_returns_400(self, client: TestClient) -> None:
        request_data = make_valid_request()
        request_data["response_time_minutes"] = 1440

        response = client.post("/diagnostic", json=request_data)

        assert response.status_code == 400
        assert "response_time_minutes" in response.json()["detail"]["detail"]


# =============================================================================
# Pydantic Validation Error Tests (422)
# =============================================================================


class TestPydanticErrors:
    """Tests for Pydantic validation errors that return 422."""

    def test_missing_field_returns_422(self, client: TestClient) -> None:
        request_data = make_valid_request()
        del request_data["leads"]

        response = client.post("/diagnostic", json=request_data)

        assert response.status_code == 422

    def test_fractional_attempts_returns_422(self, client: TestClient) -> None:
        request_data = make_valid_request()
        request_data["follow_up_attempts"] = 2.5

        response = client.post("/diagnostic", json=request_data)

        assert response.status_code == 422


# =============================================================================
# Internal Error Tests (500)
# =============================================================================


class TestInternalErrors:
    def test_engine_failure_returns_500(self, client: TestClient) -> None:
        with patch("sales_diagnostic.api.compute", side_effect=RuntimeError("boom")):
            response = client.post("/diagnostic", json=make_valid_request())

        assert response.status_code == 500
        detail = response.json()["detail"]
        assert detail["code"] == "INTERNAL_ERROR"
        assert "boom" in detail["detail"]


# =============================================================================
# Environment Configuration
# =============================================================================


class TestEngineConfigFromEnvironment:
    def test_default_without_env(self, monkeypatch) -> None:
        monkeypatch.delenv("EFFICIENCY_ALERT_THRESHOLD", raising=False)

        assert get_engine_config() is DEFAULT_ENGINE_CONFIG

    def test_threshold_override(self, monkeypatch) -> None:
        monkeypatch.setenv("EFFICIENCY_ALERT_THRESHOLD", "50")

        assert get_engine_config().efficiency_alert_threshold == 50.0

    def test_override_reaches_findings(self, client: TestClient, monkeypatch) -> None:
        monkeypatch.setenv("EFFICIENCY_ALERT_THRESHOLD", "50")

        response = client.post("/diagnostic", json=make_valid_request())

        efficiency = response.json()["findings"][2]
        assert efficiency["id"] == "efficiency_ok"
        assert efficiency["threshold"] == 50

    def test_out_of_range_threshold_falls_back_to_default(self, monkeypatch) -> None:
        """Thresholds above 100 fail EngineConfig validation and are ignored."""
        monkeypatch.setenv("EFFICIENCY_ALERT_THRESHOLD", "500")

        assert get_engine_config() is DEFAULT_ENGINE_CONFIG

    def test_non_numeric_threshold_falls_back_to_default(self, monkeypatch) -> None:
        monkeypatch.setenv("EFFICIENCY_ALERT_THRESHOLD", "seventy")

        assert get_engine_config() is DEFAULT_ENGINE_CONFIG

    def test_non_numeric_threshold_does_not_break_requests(
        self, client: TestClient, monkeypatch
    ) -> None:
        monkeypatch.setenv("EFFICIENCY_ALERT_THRESHOLD", "seventy")

        response = client.post("/diagnostic", json=make_valid_request())

        assert response.status_code == 200
        efficiency = response.json()["findings"][2]
        assert efficiency["id"] == "efficiency_low"
        assert efficiency["threshold"] == 70
