"""
Typed, process-wide settings read from ``OPENSHAPES_*`` environment variables.
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_int, env_str

MIN_CANVAS_SIZE = 16


@dataclass
class _Settings:
    # Raster backends
    BACKEND: str = "opencv"
    CANVAS_SIZE: int = 512

    # Logging
    LOG_LEVEL: str = "WARNING"


_settings = _Settings()


def reload_from_env() -> None:
    """Re-read every field from the environment."""
    _settings.BACKEND = env_str("OPENSHAPES_BACKEND", "opencv").lower()
    _settings.CANVAS_SIZE = env_int(
        "OPENSHAPES_CANVAS_SIZE", 512, min_value=MIN_CANVAS_SIZE
    )
    _settings.LOG_LEVEL = env_str("OPENSHAPES_LOG_LEVEL", "WARNING").upper()


def get() -> _Settings:
    return _settings


reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
