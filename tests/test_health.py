from fastapi.testclient import TestClient

from scouting_api.main import app

client = TestClient(app)


def test_healthcheck_returns_200():
    response = client.get("/health")
    assert response.status_code == 200


def test_healthcheck_response_body_without_ranker():
    app.state.ranker = None
    try:
        response = client.get("/health")
    finally:
        delattr(app.state, "ranker")
    assert response.json() == {"status": "ok", "ranker_configured": False}


def test_healthcheck_reports_configured_ranker():
    app.state.ranker = object()
    try:
        response = client.get("/health")
    finally:
        delattr(app.state, "ranker")
    assert response.json()["ranker_configured"] is True


def test_healthcheck_response_structure():
    response = client.get("/health")
    data = response.json()
    assert "status" in data
    assert isinstance(data["status"], str)
