"""Mini README: Application-wide logging helpers for the expense tracker.

Structure:
    * configure_root_logger - installs the shared stream handler once.
    * get_logger - module logger factory used throughout the package.

Usage:
    Modules keep a module-level ``LOGGER = get_logger(__name__)``. The root
    logger is configured lazily on first use so importing the package from
    tests, the CLI, or uvicorn never stacks duplicate handlers. Passing an
    explicit level later (the CLI does this from the settings) only adjusts
    the level.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger with a debugging friendly formatter."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        if level is not None:
            root_logger.setLevel(_coerce_level(level))
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(_coerce_level(level if level is not None else logging.INFO))
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
