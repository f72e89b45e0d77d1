"""Validation utilities."""

import logging
from pathlib import Path

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


def validate_position(position_ms: int) -> int:
    """Validate a playback position in milliseconds."""
    if position_ms < 0:
        raise ValidationError("Playback position must be non-negative")
    return position_ms


def validate_lookahead(lookahead: int) -> int:
    """Validate lookahead window size."""
    if lookahead < 1:
        raise ValidationError("Lookahead must be at least 1 token")
    return lookahead


def validate_output_path(path: str) -> Path:
    """Validate and normalize output path."""
    output_path = Path(path)

    # Check if parent directory exists or can be created
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ValidationError(f"Cannot create output directory: {e}")

    if output_path.suffix.lower() != ".json":
        raise ValidationError("Output file must have .json extension")

    return output_path


def validate_script_text(text: str) -> str:
    """Warn about scripts that will produce an empty alignment."""
    if not text.strip():
        logger.warning("Reference script is blank; alignment will be empty")
    return text
