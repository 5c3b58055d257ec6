from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_JOKE_API_URL = "https://official-joke-api.appspot.com/random_joke"


def _truthy_env(value: str | None, default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class AppSettings:
    environment: str
    port: int
    log_level: str
    joke_api_url: str
    joke_api_timeout_seconds: float
    seed_default_todos: bool


def load_settings() -> AppSettings:
    environment = os.getenv("ENVIRONMENT", "").lower()
    port = int(os.getenv("PORT", "8080"))
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    joke_api_url = os.getenv("JOKE_API_URL", DEFAULT_JOKE_API_URL).strip()
    joke_api_timeout_seconds = float(os.getenv("JOKE_API_TIMEOUT_SECONDS", "10"))
    seed_default_todos = _truthy_env(os.getenv("TODO_SEED_DEFAULTS"), True)

    return AppSettings(
        environment=environment,
        port=port,
        log_level=log_level,
        joke_api_url=joke_api_url,
        joke_api_timeout_seconds=joke_api_timeout_seconds,
        seed_default_todos=seed_default_todos,
    )


@lru_cache
def get_settings() -> AppSettings:
    return load_settings()
