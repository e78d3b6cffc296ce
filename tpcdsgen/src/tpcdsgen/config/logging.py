"""Logging setup: one ``tpcdsgen`` logger tree writing to stderr and optionally a file."""

import logging
import sys
from pathlib import Path
from typing import Optional
from .settings import get_settings

LOGGER_NAME = "tpcdsgen"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(threadName)s] - %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to the current ``sys.stderr`` at emit time, not at creation."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
) -> None:
    """
    (Re)configure the ``tpcdsgen`` logger.

    Generated data only ever goes to output files, so console logging uses
    stderr. Worker threads are named in every record because chunks run
    concurrently.

    Args:
        level: Level name; defaults to ``settings.log_level``
        log_file: Extra file to log to; defaults to ``settings.log_file``
        format_string: Record format; defaults to ``DEFAULT_FORMAT``
    """
    settings = get_settings()
    numeric_level = getattr(logging, (level or settings.log_level).upper())
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    handlers = [_StderrHandler()]
    log_file_path = log_file or settings.log_file
    if log_file_path:
        handlers.append(logging.FileHandler(log_file_path, encoding="utf-8"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``tpcdsgen`` tree; configures logging on first use."""
    if not logging.getLogger(LOGGER_NAME).handlers:
        setup_logging()
    if name.startswith(LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
