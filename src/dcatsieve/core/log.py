# log.py
# SPDX-License-Identifier: MIT
"""Logger helpers for the dcatsieve package.

The package logger carries a NullHandler so that harvesting hosts which never
configure logging do not see "no handler" warnings. Hosts that want output
call :func:`configure_logging` (or :meth:`LoggingConfig.apply`).
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager

__all__ = [
    "PACKAGE_LOGGER_NAME",
    "DEFAULT_LOG_FORMAT",
    "get_logger",
    "configure_logging",
    "temp_level",
]

PACKAGE_LOGGER_NAME = "dcatsieve"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def _coerce_level(level: int | str) -> int:
    """Map a level name such as ``"debug"`` to its numeric value."""
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``name``'s logger, or the package logger when omitted."""
    return logging.getLogger(name or PACKAGE_LOGGER_NAME)


def configure_logging(
    *,
    level: int | str = logging.INFO,
    stream=None,
    fmt: str | None = None,
    datefmt: str | None = None,
    propagate: bool | None = None,
    logger_name: str = PACKAGE_LOGGER_NAME,
) -> logging.Logger:
    """Attach a stream handler to a dcatsieve logger and set its level.

    Calling this repeatedly does not stack handlers: an existing
    StreamHandler is reused, and re-pointed at ``stream`` if its own stream
    has been closed (as happens between pytest captures).

    Args:
        level (int | str): Numeric level or level name.
        stream (IO[str] | None): Output stream, ``sys.stderr`` by default.
        fmt (str | None): Record format; :data:`DEFAULT_LOG_FORMAT` when None.
        datefmt (str | None): ``asctime`` format.
        propagate (bool | None): Whether records reach ancestor loggers.
            None keeps propagation on so host handlers still see records.
        logger_name (str): Logger to configure.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = get_logger(logger_name or PACKAGE_LOGGER_NAME)
    logger.setLevel(_coerce_level(level))
    logger.propagate = True if propagate is None else bool(propagate)

    stream = stream if stream is not None else sys.stderr
    existing = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    if existing:
        for handler in existing:
            if getattr(getattr(handler, "stream", None), "closed", False):
                handler.stream = stream
        return logger

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=fmt or DEFAULT_LOG_FORMAT, datefmt=datefmt))
    logger.addHandler(handler)
    return logger


@contextmanager
def temp_level(level: int | str, name: str | None = None):
    """Run a block with a logger temporarily set to ``level``."""
    logger = get_logger(name or PACKAGE_LOGGER_NAME)
    previous = logger.level
    logger.setLevel(_coerce_level(level))
    try:
        yield logger
    finally:
        logger.setLevel(previous)
