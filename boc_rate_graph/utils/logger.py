"""Logging utilities for the boc_rate_graph package."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None
PACKAGE_LOGGER_NAME = "boc_rate_graph"


def get_logger(name: str = PACKAGE_LOGGER_NAME) -> logging.Logger:
    """Return a module-level logger configured with a simple formatter."""
    global _LOGGER
    if _LOGGER is None:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        _LOGGER = logging.getLogger(PACKAGE_LOGGER_NAME)
    return logging.getLogger(name)


def set_debug(enabled: bool = True) -> None:
    """Switch the package logger between DEBUG and INFO."""

    get_logger().setLevel(logging.DEBUG if enabled else logging.INFO)
