"""Package logging helpers."""

from __future__ import annotations

import logging
from typing import Final, Optional

_LOGGER_NAME: Final = "dynarray"


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """
    Return a logger under the ``dynarray`` namespace.

    The handler is attached once, on the root package logger, so child
    loggers propagate to a single stream.
    """
    root = logging.getLogger(_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(logging.WARNING)

    if component:
        return logging.getLogger(f"{_LOGGER_NAME}.{component}")
    return root


def set_verbose(verbose: bool = True) -> None:
    """Switch the package logger between DEBUG and WARNING."""
    get_logger().setLevel(logging.DEBUG if verbose else logging.WARNING)
