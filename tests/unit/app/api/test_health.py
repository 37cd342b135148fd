"""Tests for the health and root endpoints."""


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "inventory-api"}


def test_readiness(client):
    response = client.get("/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["environment"] == "test"
    assert data["checks"]["database"] == {"status": "healthy", "type": "sqlite"}


def test_readiness_reports_unhealthy_database(client, monkeypatch):
    database_service = client.app.state.app_dependencies.database_service
    monkeypatch.setattr(database_service, "health_check", lambda: False)

    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"


def test_database_health_includes_pool(client):
    response = client.get("/health/database")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert set(data["pool"]) == {"size", "checked_in", "checked_out", "overflow"}


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "abc"})

    assert response.headers["X-Request-ID"] == "abc"
