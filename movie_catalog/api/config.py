"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

from movie_catalog.core.catalog.errors import ConfigurationError
from movie_catalog.core.catalog.seed import DEFAULT_SEED_PATH

DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:8080",
    "http://localhost:1234",
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_seed_path() -> Path | None:
    """Get seed movies file from env or default. Empty string disables seeding."""
    value = os.getenv("MOVIES_SEED_PATH")
    if value is None:
        return DEFAULT_SEED_PATH
    return Path(value) if value.strip() else None


def get_allowed_origins() -> list[str]:
    """Get CORS origin allow-list (comma-separated env var)."""
    value = os.getenv("CORS_ALLOWED_ORIGINS")
    if value is None:
        return list(DEFAULT_ALLOWED_ORIGINS)
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def _int_env(name: str, default: int, minimum: int, maximum: int | None = None) -> int:
    """Read an integer setting, rejecting garbage and out-of-range values."""
    value = os.getenv(name, str(default))
    try:
        number = int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None
    if number < minimum or (maximum is not None and number > maximum):
        raise ConfigurationError(f"{name} out of range: {number}")
    return number


def get_log_level() -> str:
    """Get log level from env or default."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


def get_log_file() -> str | None:
    """Get log file name from env; console only when unset."""
    return os.getenv("LOG_FILE") or None


def get_log_dir() -> str:
    """Get directory for the log file."""
    return os.getenv("LOG_DIR", "logs")


def get_log_max_bytes() -> int:
    """Get log file size that triggers rotation."""
    return _int_env("LOG_MAX_BYTES", 10 * 1024 * 1024, minimum=1)


def get_log_backup_count() -> int:
    """Get number of rotated log files to keep."""
    return _int_env("LOG_BACKUP_COUNT", 5, minimum=0)


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return _int_env("API_PORT", 1234, minimum=1, maximum=65535)
