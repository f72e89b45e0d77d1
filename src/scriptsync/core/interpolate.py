"""Fill timing for script words the matcher could not place."""

from dataclasses import replace
from typing import List, Sequence

from .models import AlignedWord


def _is_gap(word: AlignedWord) -> bool:
    return not word.matched and word.start_ms == 0 and word.end_ms == 0


def _truncating_div(span: int, parts: int) -> int:
    """Integer division rounding toward zero, also for negative spans."""
    step = abs(span) // parts
    return step if span >= 0 else -step


def interpolate_missing_timestamps(words: Sequence[AlignedWord]) -> List[AlignedWord]:
    """Spread runs of untimed, unmatched words evenly between their anchors.

    A run is bounded by the end of the word before it (0 at the start) and
    the start of the word after it (the left bound again at the end of the
    sequence). Anchors out of order give negative or zero-width steps;
    those are kept as-is.
    """
    result = list(words)
    i = 0
    while i < len(result):
        if not _is_gap(result[i]):
            i += 1
            continue

        j = i
        while j < len(result) and _is_gap(result[j]):
            j += 1

        boundary_start = result[i - 1].end_ms if i > 0 else 0
        boundary_end = result[j].start_ms if j < len(result) else boundary_start

        count = j - i
        step = _truncating_div(boundary_end - boundary_start, count + 1)

        for k in range(i, j):
            start = boundary_start + (k - i + 1) * step
            end = min(start + step, boundary_end)
            result[k] = replace(result[k], start_ms=start, end_ms=end)

        i = j

    return result
