"""
Environment-driven settings.

Every value is read on demand so tests can adjust the environment before the
app is built.
"""

from __future__ import annotations

import os

STORE_POSTGRES = "postgres"
STORE_MEMORY = "memory"
STORE_BACKENDS = (STORE_POSTGRES, STORE_MEMORY)

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def store_backend() -> str:
    backend = _env_str("CUSTOMER_STORE", STORE_POSTGRES).lower()
    if backend not in STORE_BACKENDS:
        raise RuntimeError(
            f"Unknown CUSTOMER_STORE {backend!r}; expected one of {', '.join(STORE_BACKENDS)}."
        )
    return backend


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    raw = _env_str("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def db_pool_max_size() -> int:
    return max(1, _env_int("DB_POOL_MAX_SIZE", 5))


def db_command_timeout() -> int:
    return max(1, _env_int("DB_COMMAND_TIMEOUT", 30))


def api_host() -> str:
    return _env_str("API_HOST", "0.0.0.0")


def api_port() -> int:
    return _env_int("API_PORT", 8000)
