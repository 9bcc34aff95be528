"""Tests for FastAPI app entry point."""
from fastapi.testclient import TestClient


def test_health_endpoint_returns_status_ok() -> None:
    from canon_forge.main import app
    with TestClient(app) as client:
        response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "version" in data


def test_health_reports_configured_provider() -> None:
    from canon_forge.main import app
    with TestClient(app) as client:
        data = client.get("/health").json()
    assert data["services"]["image_provider"] == "pollinations"


def test_lifespan_selects_provider_from_settings(monkeypatch) -> None:
    from canon_forge.core.config import get_settings
    from canon_forge.main import app

    monkeypatch.setenv("IMAGE_PROVIDER", "gemini")
    get_settings.cache_clear()
    with TestClient(app):
        provider = app.state.forge_service.dispatcher.provider
    assert provider.name == "gemini"


def test_app_has_correct_title() -> None:
    from canon_forge.main import app
    assert app.title == "Canon Forge"


def test_app_has_cors_middleware() -> None:
    """App should allow requests from frontend origin."""
    from canon_forge.main import app
    from starlette.middleware.cors import CORSMiddleware
    middleware_classes = [m.cls for m in app.user_middleware]
    assert CORSMiddleware in middleware_classes
