"""Mini README: Application-wide logging helpers for the flight planner.

Structure:
    * configure_root_logger - one-time root handler setup with level control.
    * get_logger - factory returning module loggers with the baseline applied.

Usage:
    Modules create a ``LOGGER = get_logger(__name__)`` at import time. The
    planner also accepts an injected logger so callers can route search
    diagnostics (for example unreachable refuel stops) to their own handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def _resolve_level(level: Union[int, str]) -> int:
    """Translate level names such as ``"debug"`` into logging constants."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Attach a single formatted stream handler to the root logger.

    Repeated calls never add handlers; an explicit ``level`` is still applied
    so entry points can raise or lower verbosity after modules were imported.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        if level is not None:
            root_logger.setLevel(_resolve_level(level))
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(_resolve_level(level if level is not None else logging.INFO))
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
