# test/test_settings.py
from pathlib import Path

from zenith_blog.settings import DEFAULT_CORS_ORIGINS, load_settings

ENV_KEYS = (
    "DB_URL",
    "ZENITH_HOST",
    "ZENITH_PORT",
    "ZENITH_CORS_ORIGINS",
    "ZENITH_API_BASE_URL",
    "ZENITH_PREFS_PATH",
)


def test_defaults(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)

    settings = load_settings()
    assert settings.db_url == "sqlite+aiosqlite:///./zenith.db"
    assert settings.port == 3000
    assert settings.api_base_url == "http://127.0.0.1:3000"
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.prefs_path.name == "prefs.json"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("DB_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("ZENITH_PORT", "8081")
    monkeypatch.setenv("ZENITH_CORS_ORIGINS", "http://a.test, ,http://b.test")
    monkeypatch.setenv("ZENITH_API_BASE_URL", "http://api.test/")
    monkeypatch.setenv("ZENITH_PREFS_PATH", str(tmp_path / "p.json"))

    settings = load_settings()
    assert settings.db_url == "sqlite+aiosqlite:///:memory:"
    assert settings.port == 8081
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.api_base_url == "http://api.test"
    assert settings.prefs_path == Path(tmp_path / "p.json")
