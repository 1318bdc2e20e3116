"""Unit tests for health, metrics, correlation IDs and error handling."""

from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from src.api.dependencies.signatures import get_intake_service
from src.domain.errors import InternalServiceError


def _signature_body(petition_id) -> dict[str, str]:
    return {"petitionId": str(petition_id), "name": "Jane Doe", "email": "j@example.org"}


class TestHealth:
    def test_healthy(self, client: TestClient, project_version: str) -> None:
        response = client.get("/v1/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": project_version}


class TestMetricsEndpoint:
    def test_exposes_signature_counters(self, client: TestClient, public_petition) -> None:
        client.post(
            "/signatures",
            json=_signature_body(public_petition.id),
        )

        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert 'signatures_submitted_total{' in response.text
        assert 'outcome="accepted"' in response.text
        assert str(public_petition.id) not in response.text


class TestCorrelationId:
    def test_echoes_incoming_id(self, client: TestClient) -> None:
        response = client.get("/v1/health", headers={"X-Correlation-ID": "req-42"})

        assert response.headers["X-Correlation-ID"] == "req-42"

    def test_generates_id(self, client: TestClient) -> None:
        first = client.get("/v1/health").headers["X-Correlation-ID"]
        second = client.get("/v1/health").headers["X-Correlation-ID"]

        assert first and second
        assert first != second

    def test_error_responses_carry_id(self, client: TestClient) -> None:
        response = client.get("/confirm", follow_redirects=False)

        assert response.status_code == 400
        assert response.headers["X-Correlation-ID"]


class TestErrorHandling:
    def test_internal_error_is_generic(self, app, client: TestClient, public_petition) -> None:
        service = AsyncMock()
        service.submit_signature = AsyncMock(side_effect=InternalServiceError("petition_lookup"))
        app.dependency_overrides[get_intake_service] = lambda: service

        response = client.post(
            "/signatures",
            json=_signature_body(public_petition.id),
        )

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Internal server error"
        assert "petition_lookup" not in response.text

    def test_unexpected_exception_is_problem_document(self, app, public_petition) -> None:
        service = AsyncMock()
        service.submit_signature = AsyncMock(side_effect=RuntimeError("connection reset"))
        app.dependency_overrides[get_intake_service] = lambda: service
        client = TestClient(app, raise_server_exceptions=False)

        response = client.post(
            "/signatures",
            json=_signature_body(public_petition.id),
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error"
        assert "connection reset" not in response.text

    def test_malformed_json(self, client: TestClient) -> None:
        response = client.post(
            "/signatures",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["status"] == 400
