"""
Text utilities for word normalization and script tokenization.

Normalization is only ever used for comparison; the surface form of a
script word is what ends up in the alignment output.
"""

import re
from typing import List

from .models import ReferenceWord

# A run of word characters with optional trailing sentence punctuation,
# or a lone punctuation mark.
_WORD_PATTERN = re.compile(r"[\w']+[.,!?;:]*|[.,!?;:]")


def normalize_word(text: str) -> str:
    """Lowercase and keep only letters, digits and apostrophes."""
    if not text:
        return ""
    lowered = text.lower()
    return "".join(
        ch for ch in lowered if ch.isalpha() or ch.isdecimal() or ch == "'"
    ).strip()


def tokenize_script(text: str) -> List[ReferenceWord]:
    """Split reference script text into words, preserving surface forms.

    Tokens that normalize to an empty string (isolated punctuation,
    underscores) are dropped.
    """
    if not text or not text.strip():
        return []

    words: List[ReferenceWord] = []
    for match in _WORD_PATTERN.finditer(text):
        surface = match.group(0)
        normalized = normalize_word(surface)
        if not normalized:
            continue
        words.append(ReferenceWord(surface_form=surface, normalized_form=normalized))
    return words
