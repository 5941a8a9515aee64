"""Integration tests for the analysis and health API endpoints.

Requests go through the full middleware stack via an in-process ASGI
transport.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from psychoscore.api.main import app


@pytest_asyncio.fixture
async def client():
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def personality_payload():
    return {
        "testDefinition": {
            "id": "pf-1",
            "name": "Workplace Personality Inventory",
            "kind": "personality",
            "questions": [
                {"id": 1, "questionType": "scale", "category": "Warmth (A)"},
                {"id": 2, "questionType": "scale", "category": "warmth"},
                {"id": 3, "questionType": "scale", "category": "Charisma"},
            ],
        },
        "responseSet": {
            "candidate": {"name": "Jordan Lee", "email": "jordan.lee@example.com"},
            "answers": [
                {"questionId": 1, "answer": "4"},
                {"questionId": 2, "answer": "5"},
                {"questionId": 3, "answer": "3"},
            ],
            "timeSpentSeconds": 900,
        },
    }


class TestHealthEndpoints:
    """Integration tests for health endpoints."""

    @pytest.mark.asyncio
    async def test_health_check(self, client):
        response = await client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == "test"
        assert set(data["supported_test_kinds"]) == {
            "personality", "cognitive", "communication", "technical", "culture",
        }

    @pytest.mark.asyncio
    async def test_liveness_probe(self, client):
        response = await client.get("/api/v1/health/live")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestAnalysisEndpoints:
    """Integration tests for analysis endpoints."""

    @pytest.mark.asyncio
    async def test_analyze_personality(self, client, personality_payload):
        response = await client.post("/api/v1/analysis", json=personality_payload)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True

        report = body["data"]
        assert report["testKind"] == "personality"
        assert report["overallScore"] == 80
        assert report["reliability"] == "Reliable"
        assert report["unrecognizedCategories"] == {"Charisma": 1}

        warmth = report["domainAnalysis"]["primaryFactors"]["Warmth (A)"]
        assert warmth["rawScore"] == 4.5
        assert warmth["score"] == 9
        assert warmth["level"] == "Very High"
        assert warmth["percentile"] == 89

    @pytest.mark.asyncio
    async def test_request_id_is_propagated(self, client, personality_payload):
        response = await client.post(
            "/api/v1/analysis",
            json=personality_payload,
            headers={"X-Request-ID": "req-analysis-0001"},
        )

        assert response.headers["X-Request-ID"] == "req-analysis-0001"
        assert response.json()["meta"]["request_id"] == "req-analysis-0001"
        assert "X-Process-Time" in response.headers

    @pytest.mark.asyncio
    async def test_invalid_request_id_is_replaced(self, client):
        response = await client.get("/api/v1/health", headers={"X-Request-ID": "<bad>"})

        assert response.headers["X-Request-ID"] != "<bad>"

    @pytest.mark.asyncio
    async def test_duplicate_question_ids_are_rejected(self, client, personality_payload):
        personality_payload["testDefinition"]["questions"].append(
            {"id": 1, "questionType": "scale", "category": "warmth"}
        )

        response = await client.post("/api/v1/analysis", json=personality_payload)

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "INVALID_INPUT"
        assert body["error"]["details"]["validation_errors"] == ["Duplicate question ids: 1"]

    @pytest.mark.asyncio
    async def test_malformed_body_is_rejected(self, client):
        response = await client.post("/api/v1/analysis", json={"responseSet": {}})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert any("testDefinition" in message for message in error["details"]["validation_errors"])

    @pytest.mark.asyncio
    async def test_unsupported_kind_still_scores(self, client, personality_payload):
        personality_payload["testDefinition"]["kind"] = "astrology"

        response = await client.post("/api/v1/analysis", json=personality_payload)

        assert response.status_code == 200
        report = response.json()["data"]
        assert report["testKind"] is None
        assert report["domainAnalysis"] is None

    @pytest.mark.asyncio
    async def test_score_attempt(self, client, personality_payload):
        response = await client.post("/api/v1/analysis/attempt-score", json=personality_payload)

        assert response.status_code == 200
        attempt = response.json()["data"]
        assert attempt["total_score"] == 12
        assert attempt["max_possible_score"] == 15
        assert attempt["percentage_score"] == 80
        assert attempt["category_scores"] == {"Warmth (A)": 80, "warmth": 100, "Charisma": 60}

    @pytest.mark.asyncio
    async def test_unknown_route(self, client):
        response = await client.get("/api/v1/nothing-here")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "HTTP_ERROR"
