import logging

from todoapp.logging_utils import CorrelationFilter, reset_request_id, set_request_id
from todoapp.settings import DEFAULT_JOKE_API_URL, load_settings


def test_load_settings_defaults(monkeypatch) -> None:
    for name in ("JOKE_API_URL", "JOKE_API_TIMEOUT_SECONDS", "TODO_SEED_DEFAULTS", "LOG_LEVEL", "PORT"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.joke_api_url == DEFAULT_JOKE_API_URL
    assert settings.joke_api_timeout_seconds == 10.0
    assert settings.seed_default_todos is True
    assert settings.log_level == "INFO"
    assert settings.port == 8080


def test_load_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("JOKE_API_URL", "http://jokes.local/random")
    monkeypatch.setenv("JOKE_API_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("TODO_SEED_DEFAULTS", "off")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.joke_api_url == "http://jokes.local/random"
    assert settings.joke_api_timeout_seconds == 2.5
    assert settings.seed_default_todos is False
    assert settings.log_level == "DEBUG"


def test_correlation_filter_sets_request_id() -> None:
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)
    CorrelationFilter().filter(record)
    assert record.request_id == "-"

    token = set_request_id("req-1")
    try:
        CorrelationFilter().filter(record)
    finally:
        reset_request_id(token)
    assert record.request_id == "req-1"
