from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.testclient import TestClient
from helpdesk.api.dependencies import get_health_service
from helpdesk.models.schemas.health import HealthResponse, StorageHealth


class _HealthyService:
    def get_health(self) -> HealthResponse:
        return HealthResponse(
            status="ok",
            environment="test",
            storage=StorageHealth(backend="file", connected=True, message=None),
            timestamp=datetime.now(UTC),
        )


class _DegradedService:
    def get_health(self) -> HealthResponse:
        return HealthResponse(
            status="degraded",
            environment="test",
            storage=StorageHealth(
                backend="postgres",
                connected=False,
                message="connection timeout",
            ),
            timestamp=datetime.now(UTC),
        )


def test_health_ok(app: FastAPI, client: TestClient) -> None:
    app.dependency_overrides[get_health_service] = _HealthyService
    response = client.get("/api/health")
    app.dependency_overrides.clear()

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["service"] == "helpdesk-backend"
    assert payload["storage"]["connected"] is True


def test_health_degraded(app: FastAPI, client: TestClient) -> None:
    app.dependency_overrides[get_health_service] = _DegradedService
    response = client.get("/api/health")
    app.dependency_overrides.clear()

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "degraded"
    assert payload["storage"]["connected"] is False
    assert payload["storage"]["message"] == "connection timeout"


def test_health_with_memory_storage(client: TestClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["environment"] == "test"
    assert payload["storage"] == {"backend": "memory", "connected": True, "message": None}


def test_base_data_connection(client: TestClient) -> None:
    response = client.get("/api/health/base-data")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Servicio de datos base funcionando correctamente",
    }


def test_root(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Helpdesk backend is running"}
