"""Logging configuration for scriptsync.

Log records go to stderr by default so that commands printing alignment
JSON on stdout stay machine-readable.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    verbose: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Set up the ``scriptsync`` logger.

    Args:
        level: Logging level name
        log_file: Optional file that receives the same records
        verbose: Include timestamps and logger names
        stream: Console stream (default: sys.stderr at call time)
    """
    logger = logging.getLogger("scriptsync")
    logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    logger.handlers.clear()

    if verbose:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "scriptsync") -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)
