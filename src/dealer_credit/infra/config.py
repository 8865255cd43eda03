from __future__ import annotations

import os

DEFAULT_LOG_LEVEL = "INFO"


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def api_key() -> str | None:
    """Shared API key for /v1 routes. Unset means authentication is disabled."""
    return os.getenv("API_KEY") or None


def log_level() -> str:
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
