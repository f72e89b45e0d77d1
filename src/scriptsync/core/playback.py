"""Lookups used by a playback layer to highlight the spoken word."""

from typing import Optional, Sequence

from .models import AlignedWord


def find_word_at_position(words: Sequence[AlignedWord], position_ms: int) -> int:
    """Index of the first word whose ``[start, end)`` range holds the position.

    Returns -1 when no word is being spoken at ``position_ms``. Overlapping
    or inverted ranges are not repaired; the first containing word wins.
    """
    for index, word in enumerate(words):
        if word.contains(position_ms):
            return index
    return -1


def seek_position_for_word(words: Sequence[AlignedWord], index: int) -> Optional[int]:
    """Playback position to jump to when a word is selected."""
    if 0 <= index < len(words):
        return words[index].start_ms
    return None


def alignment_duration_ms(words: Sequence[AlignedWord]) -> int:
    """End of the last aligned word, 0 for an empty alignment."""
    return words[-1].end_ms if words else 0
