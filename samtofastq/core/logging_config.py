#!/usr/bin/env python3
"""Logging configuration using loguru for samtofastq."""

import contextlib
from datetime import datetime
from pathlib import Path
from typing import Literal

from loguru import logger
from rich.logging import RichHandler

# Track file handler ID so we can avoid duplicates
_file_handler_id: int | None = None

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: LogLevel = "INFO") -> None:
    """Configure the console sink.

    At INFO only the CLI module reports progress; other modules surface
    warnings and errors. DEBUG shows everything.

    Args:
        level: Minimum log level to display.
    """
    logger.remove()

    console_filter = {"samtofastq.cli": "INFO", "": "WARNING"} if level == "INFO" else None

    logger.add(
        RichHandler(markup=False, show_time=False, show_level=True, show_path=False),
        format="{message}",
        level=level,
        filter=console_filter,
    )


def get_logger(name: str | None = None):
    """Get a logger instance bound to ``name``."""
    if name:
        return logger.bind(name=name)
    return logger


def get_log_path(output_dir: Path | str) -> Path:
    """Generate timestamped log file path.

    Args:
        output_dir: Directory where log file will be created.

    Returns:
        Path with format: samtofastq_YYYYMMDD_HHMMSS.log
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Path(output_dir) / f"samtofastq_{timestamp}.log"


def add_file_handler(log_path: Path | str, level: LogLevel = "DEBUG") -> int:
    """Add a file sink, replacing any file sink added earlier.

    Args:
        log_path: Path to the log file.
        level: Minimum log level for file logging.

    Returns:
        Handler ID that can be used to remove the handler later.
    """
    global _file_handler_id

    if _file_handler_id is not None:
        with contextlib.suppress(ValueError):
            logger.remove(_file_handler_id)

    log_path = Path(log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    _file_handler_id = logger.add(
        str(log_path),
        format=LOG_FORMAT,
        level=level,
        rotation="10 MB",
        retention="7 days",
        compression="gz",
    )

    return _file_handler_id
