"""JSON serialization for transcripts and alignment results."""

import json
from typing import Any, List, Sequence

from ..config import DEFAULT_CONFIDENCE
from ..exceptions import TranscriptError, ValidationError
from ..utils.logging import get_logger
from .models import AlignedWord, RecognizedToken

logger = get_logger(__name__)

# Key names per transcript format: text, start, end, confidence
_WHISPER_KEYS = ("text", "t0", "t1", "p")
_SIMPLE_KEYS = ("text", "start_ms", "end_ms", "confidence")


def _token_from_entry(entry: Any, keys: Sequence[str]) -> RecognizedToken:
    text_key, start_key, end_key, conf_key = keys
    if not isinstance(entry, dict):
        raise TranscriptError(f"Transcript entry must be an object, got {type(entry).__name__}")
    try:
        return RecognizedToken(
            text=str(entry[text_key]),
            start_ms=int(entry[start_key]),
            end_ms=int(entry[end_key]),
            confidence=float(entry.get(conf_key, DEFAULT_CONFIDENCE)),
        )
    except KeyError as e:
        raise TranscriptError(f"Transcript entry missing field {e}")
    except (TypeError, ValueError) as e:
        raise TranscriptError(f"Transcript entry has invalid field: {e}")


def tokens_from_json(data: Any, strict: bool = True) -> List[RecognizedToken]:
    """Convert decoded transcript JSON into RecognizedToken objects.

    Accepts the recognizer format ``{"tokens": [{"text", "t0", "t1", "p"}]}``
    or a plain list of ``{"text", "start_ms", "end_ms", "confidence"}``.
    With ``strict=False`` tokens with impossible timing are skipped
    instead of raising ValidationError.
    """
    if isinstance(data, dict) and "tokens" in data:
        entries, keys = data["tokens"], _WHISPER_KEYS
    elif isinstance(data, list):
        entries, keys = data, _SIMPLE_KEYS
    else:
        raise TranscriptError("Unrecognized transcript format")

    if not isinstance(entries, list):
        raise TranscriptError("Transcript tokens must be a list")

    tokens: List[RecognizedToken] = []
    for index, entry in enumerate(entries):
        token = _token_from_entry(entry, keys)
        try:
            token.validate()
        except ValueError as e:
            if strict:
                raise ValidationError(f"Token {index + 1} ({token.text!r}): {e}")
            logger.warning("Skipping token %d (%r): %s", index + 1, token.text, e)
            continue
        tokens.append(token)
    return tokens


def parse_transcript(text: str, strict: bool = True) -> List[RecognizedToken]:
    """Parse a transcript JSON string; blank input yields no tokens."""
    if not text or not text.strip():
        logger.warning("Empty transcript")
        return []
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Transcript JSON content (first 200 chars): %s", text[:200])
        raise TranscriptError(f"Invalid transcript JSON: {e}")
    return tokens_from_json(data, strict=strict)


def load_transcript(filepath: str, strict: bool = True) -> List[RecognizedToken]:
    """Load recognized tokens from a transcript JSON file."""
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise TranscriptError(f"Cannot read transcript {filepath}: {e}")
    return parse_transcript(text, strict=strict)


def aligned_words_to_json(words: Sequence[AlignedWord]) -> List[dict]:
    """Convert aligned words into JSON-serializable dicts."""
    return [
        {
            "word": w.word,
            "start_ms": w.start_ms,
            "end_ms": w.end_ms,
            "matched": w.matched,
        }
        for w in words
    ]


def aligned_words_from_json(data: List[dict]) -> List[AlignedWord]:
    """Convert JSON data back into AlignedWord objects."""
    return [
        AlignedWord(
            word=item["word"],
            start_ms=int(item["start_ms"]),
            end_ms=int(item["end_ms"]),
            matched=bool(item.get("matched", True)),
        )
        for item in data
    ]


def save_alignment_to_json(filepath: str, words: Sequence[AlignedWord]) -> None:
    """Save an alignment to a JSON file."""
    data = {"words": aligned_words_to_json(words)}
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def load_alignment_from_json(filepath: str) -> List[AlignedWord]:
    """Load an alignment from a JSON file."""
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("Alignment JSON must be an object with a 'words' list")
    return aligned_words_from_json(data.get("words", []))
