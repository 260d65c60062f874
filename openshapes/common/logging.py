from __future__ import annotations

import logging

DEFAULT_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str) -> int:
    """Map a level name or number to a logging level.

    Unknown names fall back to WARNING.
    """
    if isinstance(level, int):
        return level
    # getLevelName maps known names to ints and anything else to "Level <x>"
    lvl = logging.getLevelName(str(level).strip().upper())
    return lvl if isinstance(lvl, int) else DEFAULT_LEVEL


def setup_default_logging(level: int | str = DEFAULT_LEVEL) -> None:
    """Configure the root logger once, unless the application already did."""
    if logging.getLogger().handlers:
        return
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)


__all__ = ["resolve_level", "setup_default_logging"]
