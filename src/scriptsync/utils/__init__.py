"""Utility modules."""

from .logging import setup_logging, get_logger
from .validation import (
    validate_position,
    validate_lookahead,
    validate_output_path,
    validate_script_text,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "validate_position",
    "validate_lookahead",
    "validate_output_path",
    "validate_script_text",
]
