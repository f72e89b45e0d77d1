"""Configuration settings for scriptsync."""

import os
from typing import Optional

from .exceptions import ConfigError

# Matching (can be overridden via environment variables)
LOOKAHEAD = int(os.getenv("SCRIPTSYNC_LOOKAHEAD", "5"))

# Acceptance threshold: distance <= max(MIN_MATCH_DISTANCE, len(word) // MATCH_DISTANCE_DIVISOR)
MIN_MATCH_DISTANCE = 1
MATCH_DISTANCE_DIVISOR = 3

# Transcript ingest
DEFAULT_CONFIDENCE = 1.0  # Used when a transcript entry carries no probability

# Report quality bands (percent of words matched)
GOOD_MATCH_RATE = 70.0
POOR_MATCH_RATE = 40.0


def validate_config() -> None:
    """Validate configuration values."""
    if LOOKAHEAD < 1:
        raise ConfigError("Invalid lookahead: SCRIPTSYNC_LOOKAHEAD must be >= 1")

    if MIN_MATCH_DISTANCE < 0 or MATCH_DISTANCE_DIVISOR <= 0:
        raise ConfigError("Invalid match distance settings")

    if not (0.0 <= POOR_MATCH_RATE <= GOOD_MATCH_RATE <= 100.0):
        raise ConfigError("Invalid report quality bands")


def resolve_lookahead(lookahead: Optional[int] = None) -> int:
    """Return an explicit lookahead, or the configured default.

    Raises:
        ConfigError: If the lookahead is smaller than one token
    """
    if lookahead is None:
        return LOOKAHEAD
    if lookahead < 1:
        raise ConfigError(f"Invalid lookahead: {lookahead} (must be >= 1)")
    return lookahead


# Validate config on import
validate_config()
