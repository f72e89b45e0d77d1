"""scriptsync - word timing for reference scripts from speech recognition."""

__version__ = "0.1.0"

from .core import (
    AlignedWord,
    Aligner,
    RecognizedToken,
    align,
    find_word_at_position,
    tokenize_script,
)

__all__ = [
    "__version__",
    "AlignedWord",
    "Aligner",
    "RecognizedToken",
    "align",
    "find_word_at_position",
    "tokenize_script",
]
