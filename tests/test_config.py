from veni_vici import config
from veni_vici.config import DEFAULT_BASE_URL, Settings


def _clear(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in ("CAT_API_KEY", "CAT_API_BASE_URL", "CAT_API_TIMEOUT", "LOG_LEVEL", "HOST", "PORT", "FLASK_DEBUG"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment(monkeypatch):
    _clear(monkeypatch)
    settings = Settings.from_env()
    assert settings.api_key is None
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout is None
    assert settings.port == 8000
    assert settings.debug is False


def test_reads_environment(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("CAT_API_KEY", "live_abc")
    monkeypatch.setenv("CAT_API_BASE_URL", "https://cats.test/")
    monkeypatch.setenv("CAT_API_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("FLASK_DEBUG", "true")
    settings = Settings.from_env()
    assert settings.api_key == "live_abc"
    assert settings.base_url == "https://cats.test"
    assert settings.timeout == 2.5
    assert settings.log_level == "DEBUG"
    assert settings.port == 9000
    assert settings.debug is True


def test_invalid_numbers_fall_back(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("CAT_API_TIMEOUT", "soon")
    monkeypatch.setenv("PORT", "eighty")
    settings = Settings.from_env()
    assert settings.timeout is None
    assert settings.port == 8000


def test_empty_api_key_means_unauthenticated(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("CAT_API_KEY", "")
    assert Settings.from_env().api_key is None
