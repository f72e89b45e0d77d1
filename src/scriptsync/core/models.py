"""Data models for recognized tokens, script words and alignment output."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RecognizedToken:
    """One unit of speech-recognizer output with approximate timing."""

    text: str
    start_ms: int
    end_ms: int
    confidence: float = 1.0

    def validate(self) -> None:
        if self.start_ms < 0 or self.end_ms < 0:
            raise ValueError("Token timing must be non-negative")
        if self.end_ms < self.start_ms:
            raise ValueError("Token end_ms must be >= start_ms")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError("Token confidence must be in [0, 1]")


@dataclass(frozen=True)
class ReferenceWord:
    """A word of the reference script, as written and as compared."""

    surface_form: str
    normalized_form: str


@dataclass(frozen=True)
class NormalizedToken:
    """A recognized token paired with its comparison form."""

    normalized: str
    token: RecognizedToken


@dataclass(frozen=True)
class AlignedWord:
    """A script word with the time range it was spoken in.

    ``matched`` is False for words that no recognized token was found for;
    their timing is a placeholder or an interpolation.
    """

    word: str
    start_ms: int
    end_ms: int
    matched: bool = True

    @property
    def duration_ms(self) -> int:
        return self.end_ms - self.start_ms

    def contains(self, position_ms: int) -> bool:
        return self.start_ms <= position_ms < self.end_ms
