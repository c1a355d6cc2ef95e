"""Process-wide logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

from pisysinfo.config import LoggingConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILENAME = "pisysinfo.log"


def setup_logging(config: LoggingConfig) -> None:
    """Send diagnostics to stderr and, when log_dir is set, to a log file."""
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_dir:
        log_dir = Path(config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / LOG_FILENAME, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


__all__ = ["setup_logging"]
