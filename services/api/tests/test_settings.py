import pytest
from pydantic import ValidationError

from blog_api.settings import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("STORAGE_BACKEND", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.storage_backend == "sql"
    assert settings.database_url.startswith("sqlite")
    assert settings.seed_on_startup is True


def test_cors_origins_comma_separated(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.com, http://localhost:3000")
    assert Settings(_env_file=None).cors_origins == ["https://a.com", "http://localhost:3000"]


def test_cors_origins_json_array(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", '["https://a.com", "https://b.com"]')
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert Settings(_env_file=None).cors_origins == ["https://a.com", "https://b.com"]


def test_seed_alias(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SEED_POSTS", "false")
    monkeypatch.delenv("SEED_ON_STARTUP", raising=False)
    assert Settings(_env_file=None).seed_on_startup is False


def test_unknown_backend_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("STORAGE_BACKEND", "localstorage")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
