from students_api.config import Settings
from students_api.main import create_app
from fastapi.testclient import TestClient


def test_root_lists_endpoints(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert "message" in body
    endpoints = body["endpoints"]
    assert endpoints["GET /students"] == "Get all students"
    assert endpoints["DELETE /students/:id"].endswith("(requires admin token)")
    assert "POST /auth/login" in endpoints


def test_root_in_open_mode_hides_auth(open_client):
    endpoints = open_client.get("/").json()["endpoints"]
    assert "POST /auth/login" not in endpoints
    assert endpoints["DELETE /students/:id"] == "Delete a student"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_unmatched_route(client):
    response = client.get("/courses")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Endpoint not found"}


def test_unmatched_method(client):
    response = client.post("/students/1", json={})
    assert response.status_code == 404
    assert response.json()["message"] == "Endpoint not found"


def test_malformed_json_body(client, admin_override):
    response = client.post(
        "/students", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_metrics_endpoint(client):
    client.get("/students")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "text/plain" in response.headers["content-type"]
    assert "http_requests_total" in response.text


def test_unseeded_app_starts_empty():
    app = create_app(Settings(SEED_DATA=False, LOG_LEVEL="WARNING"))
    client = TestClient(app)
    assert client.get("/students").json() == {"success": True, "count": 0, "data": []}
    response = client.post("/auth/login", json={"username": "teacher", "password": "teacher123"})
    assert response.status_code == 401


def test_cors_headers(client):
    response = client.get("/students", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"
