"""Logging setup utilities for termfolio.

Configures logging for the entire application based on the logging
configuration settings.
"""

from __future__ import annotations

import logging
import sys

from termfolio.config.settings import LoggingConfig


def setup_logging(config: LoggingConfig | None = None, console: bool = True) -> None:
    """Configure logging for the termfolio application.

    Sets up the ``termfolio`` logger with the specified level, format, and
    optional file handler.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).
        console: Whether to attach a stderr handler. The TTY front-end
                 passes False so log records don't interleave with the
                 terminal it draws; records then go to ``config.file``
                 only, if one is configured.
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger("termfolio")
    root_logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))
    root_logger.handlers.clear()

    formatter = logging.Formatter(config.format)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if config.file:
        file_handler = logging.FileHandler(config.file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.propagate = console
    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    root_logger.info("Logging initialized at %s level", config.level)
