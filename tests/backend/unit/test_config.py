"""
Unit tests for configuration loading and application construction.
"""
import pytest

from todoauth.config import DEFAULT_CORS_ORIGINS, Settings, load_settings
from todoauth.core.errors import ConfigurationError
from todoauth.main import create_app


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "ENV", "HOST", "PORT", "CORS_ORIGINS", "DATABASE_URL", "GENERATE_SCHEMAS",
        "JWT_SECRET", "JWT_ALGORITHM", "ACCESS_TOKEN_EXPIRE_MINUTES", "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("todoauth.config.load_dotenv", lambda *a, **kw: False)
    return monkeypatch


def test_load_settings_defaults(clean_env):
    settings = load_settings()
    assert settings.env == "dev"
    assert settings.port == 8000
    assert settings.jwt_secret is None
    assert settings.jwt_algorithm == "HS256"
    assert settings.access_token_expire_minutes == 60
    assert settings.generate_schemas is False
    assert settings.CORS_ORIGINS == DEFAULT_CORS_ORIGINS


def test_load_settings_reads_environment(clean_env):
    clean_env.setenv("JWT_SECRET", "from-env")
    clean_env.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "5")
    clean_env.setenv("GENERATE_SCHEMAS", "yes")
    clean_env.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    clean_env.setenv("DATABASE_URL", "sqlite://:memory:")
    settings = load_settings()
    assert settings.jwt_secret == "from-env"
    assert settings.access_token_expire_minutes == 5
    assert settings.generate_schemas is True
    assert settings.CORS_ORIGINS == ["https://a.example", "https://b.example"]
    assert settings.database_url == "sqlite://:memory:"


def test_empty_secret_is_treated_as_missing(clean_env):
    clean_env.setenv("JWT_SECRET", "")
    assert load_settings().jwt_secret is None


def test_create_app_without_secret_fails_fast():
    with pytest.raises(ConfigurationError):
        create_app(Settings(jwt_secret=None))


def test_create_app_wires_handles(settings):
    app = create_app(settings)
    assert app.state.settings is settings
    assert app.state.token_verifier is not None
    assert app.state.auth_service.issuer.default_ttl.total_seconds() == settings.access_token_expire_minutes * 60
    paths = {route.path for route in app.routes}
    assert "/api/v1/auth/register" in paths
    assert "/api/v1/auth/login" in paths
    assert "/api/v1/todos/{todo_id}" in paths
    assert "/healthz" in paths


def test_aerich_config_reads_dotenv(monkeypatch):
    """TORTOISE_ORM is built at import time, after .env has been loaded."""
    import importlib

    import dotenv
    from todoauth.core import db

    monkeypatch.setenv("DATABASE_URL", "sqlite://placeholder.sqlite3")
    monkeypatch.delenv("DATABASE_URL")

    def fake_load_dotenv(*args, **kwargs):
        monkeypatch.setenv("DATABASE_URL", "postgres://app:pw@dbhost:5432/todos")
        return True

    monkeypatch.setattr(dotenv, "load_dotenv", fake_load_dotenv)
    try:
        importlib.reload(db)
        assert db.TORTOISE_ORM["connections"]["default"] == "postgres://app:pw@dbhost:5432/todos"
        assert "aerich.models" in db.TORTOISE_ORM["apps"]["models"]["models"]
    finally:
        monkeypatch.undo()
        importlib.reload(db)
