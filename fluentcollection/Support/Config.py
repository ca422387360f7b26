from __future__ import annotations

from typing import Optional, Union
import logging
import os

from .Exceptions import InvalidArgumentException


def env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get environment variable, falling back to the default when unset or blank."""
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value


def log_level(value: Union[int, str]) -> int:
    """Resolve a log level given by name ("debug") or number ("10")."""
    if isinstance(value, int):
        return value

    text = value.strip()
    if text.isdigit():
        return int(text)

    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise InvalidArgumentException(f"Unknown log level `{value}`.")
    return level


class Settings:
    """Collection settings read from the environment."""

    def __init__(self) -> None:
        self.LOG_CHANNEL: str = env("COLLECTION_LOG_CHANNEL") or "fluentcollection"
        self.LOG_LEVEL: int = log_level(env("COLLECTION_LOG_LEVEL") or "WARNING")
        # Format strings are taken verbatim
        self.LOG_FORMAT: str = env("COLLECTION_LOG_FORMAT") or "[%(asctime)s] %(levelname)s in %(name)s: %(message)s"
        self.LOG_DATE_FORMAT: str = env("COLLECTION_LOG_DATE_FORMAT") or "%Y-%m-%d %H:%M:%S"


settings = Settings()
