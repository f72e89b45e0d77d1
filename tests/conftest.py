"""Test configuration and fixtures.

Provides reusable fixtures for:
- Temporary files and directories
- Recognized token sequences in the shape the recognizer emits
- Reference scripts and transcript JSON files
"""

import json
import tempfile
from pathlib import Path

import pytest

from scriptsync.core.models import RecognizedToken


# =============================================================================
# Basic Fixtures
# =============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# =============================================================================
# Recognizer Fixtures
# =============================================================================


@pytest.fixture
def news_tokens():
    """Recognizer output for the sample news script."""
    return [
        RecognizedToken("Hello", 0, 500, 0.95),
        RecognizedToken("and", 500, 700, 0.92),
        RecognizedToken("welcome", 700, 1200, 0.94),
        RecognizedToken("to", 1200, 1400, 0.93),
        RecognizedToken("CNN", 1400, 1900, 0.91),
        RecognizedToken("news.", 1900, 2400, 0.89),
        RecognizedToken("Today", 2500, 3000, 0.95),
        RecognizedToken("we", 3000, 3200, 0.93),
        RecognizedToken("will", 3200, 3500, 0.92),
        RecognizedToken("discuss", 3500, 4200, 0.94),
        RecognizedToken("the", 4200, 4400, 0.91),
        RecognizedToken("latest", 4400, 4900, 0.93),
        RecognizedToken("developments", 4900, 5800, 0.88),
        RecognizedToken("in", 5800, 6000, 0.92),
        RecognizedToken("technology.", 6000, 7000, 0.90),
    ]


@pytest.fixture
def news_script():
    """Reference script matching news_tokens."""
    return (
        "Hello and welcome to CNN news. Today we will discuss "
        "the latest developments in technology."
    )


@pytest.fixture
def whisper_transcript_data():
    """Transcript JSON in the recognizer's native format."""
    return {
        "tokens": [
            {"text": "Hello", "t0": 0, "t1": 500, "p": 0.95},
            {"text": "and", "t0": 500, "t1": 700, "p": 0.92},
            {"text": "welcom", "t0": 700, "t1": 1200, "p": 0.94},
        ]
    }


@pytest.fixture
def transcript_file(temp_dir, whisper_transcript_data):
    """Transcript JSON written to disk."""
    path = temp_dir / "transcript.json"
    path.write_text(json.dumps(whisper_transcript_data), encoding="utf-8")
    return path


@pytest.fixture
def script_file(temp_dir):
    """Reference script written to disk."""
    path = temp_dir / "script.txt"
    path.write_text("Hello and welcome", encoding="utf-8")
    return path
