"""Logging setup for pathgraph.

All package loggers hang off the ``pathgraph`` logger. Its handler writes to
stderr so that command output on stdout (such as ``path --json``) stays
machine-readable.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "pathgraph"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
    force: bool = False,
) -> logging.Logger:
    """Configure the ``pathgraph`` logger with exactly one handler.

    The first call installs the handler; later calls return the logger
    unchanged unless ``force`` is set, in which case the handler, format and
    level are replaced. The CLI forces a fresh setup on every run so the
    handler binds to the current ``sys.stderr``.

    Args:
        level: Level for the package logger and its handler.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Handler to install; defaults to a stderr ``StreamHandler``.
        force: Replace an existing configuration.

    Returns:
        The ``pathgraph`` logger.
    """
    global _configured

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured and not force:
        return root_logger

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    handler.setLevel(level)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _configured = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger that takes its level from the ``pathgraph`` logger."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


setup_root_logger()
