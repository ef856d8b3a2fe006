import pytest
from fastapi.testclient import TestClient

from app.core.config import settings, validate_settings
from app.main import app


def test_default_settings_are_valid():
    assert validate_settings() is True


def test_production_rejects_debug(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    monkeypatch.setattr(settings, "DEBUG", True)
    monkeypatch.setattr(settings, "CORS_ORIGINS", ["https://smartgov.gov.zm"])
    with pytest.raises(ValueError, match="DEBUG"):
        validate_settings()


def test_production_rejects_wildcard_cors(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    monkeypatch.setattr(settings, "DEBUG", False)
    monkeypatch.setattr(settings, "CORS_ORIGINS", ["*"])
    with pytest.raises(ValueError, match="CORS_ORIGINS"):
        validate_settings()


def test_production_with_explicit_origins_is_valid(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    monkeypatch.setattr(settings, "DEBUG", False)
    monkeypatch.setattr(settings, "CORS_ORIGINS", ["https://smartgov.gov.zm"])
    assert validate_settings() is True


def test_invalid_port_rejected(monkeypatch):
    monkeypatch.setattr(settings, "PORT", 0)
    with pytest.raises(ValueError, match="PORT"):
        validate_settings()


def test_app_serves_requests_through_lifespan():
    with TestClient(app) as lifespan_client:
        assert lifespan_client.get("/live").json() == {"status": "alive"}
        response = lifespan_client.post("/api/auth/login", json={"phone": "12345678"})
        assert response.status_code == 200
