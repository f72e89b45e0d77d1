"""Alignment quality reporting."""

from dataclasses import dataclass, field
from typing import List, Sequence

from ..config import GOOD_MATCH_RATE, POOR_MATCH_RATE
from .models import AlignedWord


@dataclass
class AlignmentReport:
    """Summary of how much of a script was actually matched."""

    total_words: int = 0
    matched_words: int = 0
    interpolated_words: int = 0  # Unmatched words given a non-empty range
    placeholder_words: int = 0  # Unmatched words left zero-width
    inverted_intervals: int = 0  # Words with end_ms < start_ms
    issues: List[str] = field(default_factory=list)

    @property
    def match_rate(self) -> float:
        return (
            (self.matched_words / self.total_words * 100)
            if self.total_words > 0
            else 0.0
        )

    @property
    def is_good(self) -> bool:
        return self.match_rate >= GOOD_MATCH_RATE

    @property
    def needs_review(self) -> bool:
        return POOR_MATCH_RATE <= self.match_rate < GOOD_MATCH_RATE

    @property
    def is_poor(self) -> bool:
        return self.match_rate < POOR_MATCH_RATE

    def summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [
            f"Matched: {self.matched_words}/{self.total_words} words "
            f"({self.match_rate:.0f}%)",
            f"Interpolated: {self.interpolated_words}, "
            f"untimed: {self.placeholder_words}",
        ]
        if self.issues:
            lines.append(f"Issues: {len(self.issues)}")
            for issue in self.issues[:3]:  # Show top 3
                lines.append(f"  - {issue}")
        return "\n".join(lines)


def build_alignment_report(words: Sequence[AlignedWord]) -> AlignmentReport:
    """Count matched, interpolated and untimed words in an alignment."""
    report = AlignmentReport(total_words=len(words))

    for index, word in enumerate(words):
        if word.matched:
            report.matched_words += 1
        elif word.end_ms != word.start_ms:
            report.interpolated_words += 1
        else:
            report.placeholder_words += 1

        if word.end_ms < word.start_ms:
            report.inverted_intervals += 1
            report.issues.append(
                f"Word {index + 1} '{word.word}' ends before it starts "
                f"({word.start_ms}ms -> {word.end_ms}ms)"
            )

    if report.total_words and report.is_poor:
        report.issues.append("Low match rate; check the transcript belongs to this script")

    return report
