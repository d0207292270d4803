"""Application wiring: health, error envelope and request ids."""


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "connected"}


def test_health_reports_broken_database(client, database, monkeypatch):
    def broken_ping():
        raise RuntimeError("connection refused")

    monkeypatch.setattr(database, "ping", broken_ping)

    response = client.get("/health")
    assert response.status_code == 503
    assert response.json()["status"] == "degraded"


def test_request_id_is_echoed(client):
    response = client.get("/", headers={"X-Request-Id": "abc-123"})
    assert response.headers["X-Request-Id"] == "abc-123"


def test_request_id_is_generated(client):
    assert client.get("/").headers["X-Request-Id"]


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/nowhere", headers={"X-Request-Id": "req-1"})
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found", "code": "not_found", "request_id": "req-1"}


def test_validation_error_envelope(client, employee_headers):
    response = client.post("/training/applications", json={"title": "Only a title"},
                           headers=employee_headers)
    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "validation_error"
    assert data["error"]
    assert data["request_id"]


def test_permission_error_envelope(client, employee_headers):
    response = client.get("/users", headers=employee_headers)
    assert response.status_code == 403
    assert response.json()["error"] == "Admin access required"


def test_dashboard_is_privately_cacheable(client, employee_headers):
    response = client.get("/analytics/dashboard", headers=employee_headers)
    assert response.headers["Cache-Control"] == "private, max-age=60"
