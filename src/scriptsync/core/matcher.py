"""Greedy forward matching of script words against recognized tokens.

A single cursor walks the recognized tokens. For each script word only a
small window of not-yet-consumed tokens starting at the cursor is
considered, and the closest candidate by edit distance is accepted if it
is within a tolerance that grows with word length. A match moves the
cursor past the consumed token; a miss leaves it where it is.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from rapidfuzz.distance import Levenshtein

from ..config import LOOKAHEAD, MATCH_DISTANCE_DIVISOR, MIN_MATCH_DISTANCE
from .models import AlignedWord, NormalizedToken, RecognizedToken, ReferenceWord
from .text_utils import normalize_word


@dataclass(frozen=True)
class MatchCandidate:
    """Best acceptable token for one script word."""

    index: int
    token: RecognizedToken
    distance: int


@dataclass
class MatchOutcome:
    """Result of matching a whole script against a token sequence."""

    words: List[AlignedWord] = field(default_factory=list)
    consumed_indices: List[int] = field(default_factory=list)
    cursor: int = 0


def levenshtein(left: str, right: str) -> int:
    """Unit-cost edit distance (insertion, deletion, substitution)."""
    return Levenshtein.distance(left, right)


def max_allowed_distance(normalized_word: str) -> int:
    """Largest edit distance accepted for a word of this length."""
    return max(MIN_MATCH_DISTANCE, len(normalized_word) // MATCH_DISTANCE_DIVISOR)


def prepare_tokens(tokens: Sequence[RecognizedToken]) -> List[NormalizedToken]:
    """Normalize recognized tokens, dropping those with no comparable text."""
    prepared: List[NormalizedToken] = []
    for token in tokens:
        normalized = normalize_word(token.text)
        if normalized:
            prepared.append(NormalizedToken(normalized=normalized, token=token))
    return prepared


def find_best_match(
    normalized_word: str,
    tokens: Sequence[NormalizedToken],
    start_index: int,
    lookahead: int = LOOKAHEAD,
) -> Optional[MatchCandidate]:
    """Find the closest acceptable token in ``[start_index, start_index + lookahead)``.

    Candidates are scanned in index order and only a strictly smaller
    distance replaces the current best, so ties go to the earliest token.
    """
    if not normalized_word or start_index >= len(tokens):
        return None

    end_index = min(start_index + lookahead, len(tokens))
    threshold = max_allowed_distance(normalized_word)
    best: Optional[MatchCandidate] = None

    for index in range(start_index, end_index):
        candidate = tokens[index]
        distance = levenshtein(normalized_word, candidate.normalized)
        if distance > threshold:
            continue
        if best is None or distance < best.distance:
            best = MatchCandidate(index=index, token=candidate.token, distance=distance)

    return best


def match_words(
    words: Sequence[ReferenceWord],
    tokens: Sequence[NormalizedToken],
    lookahead: int = LOOKAHEAD,
) -> MatchOutcome:
    """Assign timing to each script word by forward matching.

    Unmatched words get a zero-width placeholder at the end of the last
    emitted word (0 before the first one).
    """
    outcome = MatchOutcome()

    for word in words:
        match = find_best_match(word.normalized_form, tokens, outcome.cursor, lookahead)
        if match is not None:
            outcome.words.append(
                AlignedWord(
                    word=word.surface_form,
                    start_ms=match.token.start_ms,
                    end_ms=match.token.end_ms,
                )
            )
            outcome.consumed_indices.append(match.index)
            outcome.cursor = match.index + 1
        else:
            prev_end = outcome.words[-1].end_ms if outcome.words else 0
            outcome.words.append(
                AlignedWord(
                    word=word.surface_form,
                    start_ms=prev_end,
                    end_ms=prev_end,
                    matched=False,
                )
            )

    return outcome
