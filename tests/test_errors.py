from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)

def test_404_not_found():
    response = client.get("/non-existent-route")
    assert response.status_code == 404
    data = response.json()
    assert "error" in data
    assert "code" in data
    assert data["code"] == "HTTP_ERROR"

def test_405_wrong_method():
    response = client.get("/api/auth/login")
    assert response.status_code == 405
    assert response.json()["code"] == "HTTP_ERROR"

def test_validation_error_structure():
    # Wrong type for phone is a malformed body, not a missing field
    response = client.post("/api/auth/login", json={"phone": ["not", "a", "string"]})
    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert "details" in data
    assert len(data["details"]) > 0

def test_custom_exception():
    from app.core.exceptions import UnauthenticatedError

    @app.get("/test-custom-error")
    def trigger_custom_error():
        raise UnauthenticatedError(message="Session missing")

    response = client.get("/test-custom-error")
    assert response.status_code == 401
    data = response.json()
    assert data["code"] == "UNAUTHENTICATED"
    assert data["error"] == "Session missing"

def test_non_object_body_is_rejected():
    response = client.post("/api/payments/pay", json=["token", "amount"])
    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"

def test_unhandled_exception_returns_500():
    @app.get("/test-unhandled-error")
    def trigger_unhandled_error():
        raise RuntimeError("database on fire")

    lenient_client = TestClient(app, raise_server_exceptions=False)
    response = lenient_client.get("/test-unhandled-error")
    assert response.status_code == 500
    data = response.json()
    assert data["code"] == "INTERNAL_ERROR"
    assert data["error"] == "database on fire"

def test_unhandled_exception_message_hidden_in_production(monkeypatch):
    from app.core.config import settings

    @app.get("/test-unhandled-error-production")
    def trigger_production_error():
        raise RuntimeError("secret internals")

    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    lenient_client = TestClient(app, raise_server_exceptions=False)
    response = lenient_client.get("/test-unhandled-error-production")
    assert response.status_code == 500
    data = response.json()
    assert data["code"] == "INTERNAL_ERROR"
    assert "secret internals" not in data["error"]
