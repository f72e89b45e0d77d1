"""Core alignment modules."""

from .models import AlignedWord, RecognizedToken, ReferenceWord
from .aligner import Aligner, align
from .interpolate import interpolate_missing_timestamps
from .matcher import levenshtein
from .playback import find_word_at_position, seek_position_for_word
from .report import AlignmentReport, build_alignment_report
from .text_utils import normalize_word, tokenize_script

__all__ = [
    "AlignedWord",
    "RecognizedToken",
    "ReferenceWord",
    "Aligner",
    "align",
    "interpolate_missing_timestamps",
    "levenshtein",
    "find_word_at_position",
    "seek_position_for_word",
    "AlignmentReport",
    "build_alignment_report",
    "normalize_word",
    "tokenize_script",
]
