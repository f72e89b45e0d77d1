"""Align recognized speech tokens to a trusted reference script.

Pipeline: tokenize the script, match each script word against a forward
window of recognized tokens, then interpolate timing for the words that
matched nothing. The whole procedure is a pure function of its inputs and
never raises for odd input shapes.
"""

from typing import List, Optional, Sequence

from ..config import resolve_lookahead
from ..utils.logging import get_logger
from .interpolate import interpolate_missing_timestamps
from .matcher import match_words, prepare_tokens
from .models import AlignedWord, RecognizedToken
from .text_utils import tokenize_script

logger = get_logger(__name__)


class Aligner:
    """Stateless script aligner; holds only its lookahead setting."""

    def __init__(self, lookahead: Optional[int] = None):
        self.lookahead = resolve_lookahead(lookahead)

    def align(
        self, tokens: Sequence[RecognizedToken], script: str
    ) -> List[AlignedWord]:
        """Map every script word to a start/end time in milliseconds.

        Args:
            tokens: Recognizer output in recognition order
            script: Reference script text

        Returns:
            One AlignedWord per script word, in reading order. When no
            usable tokens exist every word gets a zero time range.
        """
        script_words = tokenize_script(script)
        if not script_words:
            return []

        prepared = prepare_tokens(tokens)
        if not prepared:
            logger.debug(
                "No usable recognized tokens; %d script words left untimed",
                len(script_words),
            )
            return [
                AlignedWord(word=w.surface_form, start_ms=0, end_ms=0, matched=False)
                for w in script_words
            ]

        outcome = match_words(script_words, prepared, self.lookahead)
        aligned = interpolate_missing_timestamps(outcome.words)
        interpolated = sum(
            1 for before, after in zip(outcome.words, aligned) if before != after
        )

        logger.debug(
            "Aligned %d script words against %d tokens: %d matched, "
            "%d interpolated, cursor at %d",
            len(script_words),
            len(prepared),
            len(outcome.consumed_indices),
            interpolated,
            outcome.cursor,
        )
        return aligned


def align(
    tokens: Sequence[RecognizedToken],
    script: str,
    *,
    lookahead: Optional[int] = None,
) -> List[AlignedWord]:
    """Align ``tokens`` to ``script`` with a one-off Aligner."""
    return Aligner(lookahead=lookahead).align(tokens, script)
