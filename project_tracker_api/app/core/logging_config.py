"""
Logging setup for the Project Tracker API.

``setup_logging`` takes the application ``Settings`` and configures the
root logger from ``LOG_LEVEL`` and ``LOG_FILE``.  It runs from
``create_app``; because tests build many apps in one process, only the
first call attaches handlers.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _handlers(log_file: str) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    # An empty LOG_FILE means console only.
    if log_file.strip():
        handlers.append(logging.FileHandler(Path(log_file).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(settings: Settings) -> None:
    """Attach console (and optional file) handlers to the root logger.

    An unknown ``LOG_LEVEL`` falls back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _handlers(settings.log_file):
        handler.setFormatter(formatter)
        root.addHandler(handler)
