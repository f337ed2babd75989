"""abbrkit logging configuration.

Provides file logging for the abbreviation subsystem.
Logs are written to ~/.config/abbrkit/logs/abbr.log
"""
from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Optional

# Directory for log files
LOGS_DIR = Path.home() / ".config" / "abbrkit" / "logs"

# Module-level state
_file_handler: Optional[logging.FileHandler] = None


def configure_file_logging(level: int | str = logging.WARNING) -> Path:
    """Attach a file handler to the ``abbrkit`` logger.

    Args:
        level: Logging level for file output (name or number)

    Returns:
        Path to the log file
    """
    global _file_handler

    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    log_path = LOGS_DIR / "abbr.log"

    close_file_logging()

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    _file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    _file_handler.setLevel(level)
    _file_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    logger = logging.getLogger("abbrkit")
    logger.addHandler(_file_handler)
    logger.setLevel(level)

    return log_path


def close_file_logging() -> None:
    """Remove and close the file handler, if any."""
    global _file_handler

    if _file_handler is not None:
        logger = logging.getLogger("abbrkit")
        logger.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None


def log_exception(error: Exception, context: str = "") -> str:
    """Log an exception with its traceback and return a short message.

    Args:
        error: The exception to log
        context: What was happening when it was raised

    Returns:
        User-friendly error message (without traceback)
    """
    logger = logging.getLogger("abbrkit")

    error_type = type(error).__name__
    user_msg = f"{context}: {error}" if context else f"{error_type}: {error}"

    tb_str = traceback.format_exc()
    logger.error(f"{context}\n{error_type}: {error}\n\nTraceback:\n{tb_str}")

    return user_msg
