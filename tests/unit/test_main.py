"""
Unit tests for backend/main.py
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import patch

from backend.main import create_app, _init_sentry, _configure_cors
from backend.settings import Settings


@pytest.mark.unit
class TestCreateApp:
    """Test the create_app() factory function."""

    def test_create_app_returns_fastapi_instance(self):
        """create_app() should return a FastAPI application instance."""
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)
        assert isinstance(app, FastAPI)

    def test_create_app_uses_default_settings_when_none_provided(self):
        """create_app() should use get_settings() when no settings provided."""
        with patch("backend.main.get_settings") as mock_get_settings:
            mock_get_settings.return_value = Settings(environment="test", _env_file=None)

            app = create_app(settings=None)

            mock_get_settings.assert_called_once()
            assert isinstance(app, FastAPI)

    def test_create_app_configures_app_metadata(self):
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)

        assert app.title == "MyFit Stats API"
        assert app.version == "1.0.0"


@pytest.mark.unit
class TestInitSentry:
    """Test Sentry initialization."""

    def test_init_sentry_skipped_when_no_dsn(self):
        """Sentry should not be initialized when DSN is not set."""
        settings = Settings(sentry_dsn=None, _env_file=None)

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_not_called()

    def test_init_sentry_called_when_dsn_provided(self):
        """Sentry should be initialized when DSN is provided."""
        settings = Settings(
            sentry_dsn="https://test@sentry.io/123",
            environment="test",
            _env_file=None
        )

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_called_once_with(
                dsn="https://test@sentry.io/123",
                environment="test",
                traces_sample_rate=0.1,
            )


@pytest.mark.integration
class TestConfigureCors:
    """Test CORS configuration."""

    def _client(self, origins=""):
        app = FastAPI()
        _configure_cors(app, Settings(cors_allowed_origins=origins, _env_file=None))

        @app.get("/test-cors")
        def cors_test():
            return {"cors": "enabled"}

        return TestClient(app)

    def test_expo_dev_server_allowed(self):
        response = self._client().get("/test-cors", headers={"Origin": "http://localhost:19006"})
        assert response.headers["access-control-allow-origin"] == "http://localhost:19006"

    def test_configured_origin_allowed(self):
        client = self._client("https://myfit.app")
        response = client.get("/test-cors", headers={"Origin": "https://myfit.app"})
        assert response.headers["access-control-allow-origin"] == "https://myfit.app"

    def test_unknown_origin_not_allowed(self):
        response = self._client().get("/test-cors", headers={"Origin": "https://evil.example"})
        assert "access-control-allow-origin" not in response.headers


@pytest.mark.unit
class TestMultipleAppInstances:
    """Test that multiple app instances can be created."""

    def test_create_multiple_independent_apps(self):
        settings1 = Settings(environment="test", _env_file=None)
        settings2 = Settings(environment="production", _env_file=None)

        app1 = create_app(settings=settings1)
        app2 = create_app(settings=settings2)

        assert app1 is not app2
