"""Logging setup for the converter application."""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

LOG_LEVEL_ENV = "CLASSIN_GRADEBOOK_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def level_from_env(default: int = logging.INFO) -> int:
    """Read the log level name from the environment, e.g. ``DEBUG``."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logging(
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
) -> None:
    """Configure root logging once for the application.

    Args:
        level: Logging level; defaults to the environment setting.
        log_file: Optional path to an additional log file.
        format_string: Custom format string for log messages.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=level if level is not None else level_from_env(),
        format=format_string or DEFAULT_FORMAT,
        handlers=handlers,
        force=True,
    )
