"""Helper utilities for the Wage Signal AI system."""

import json
import re
from typing import Any, Iterator, List, Optional, Tuple

_FENCE_PATTERN = re.compile(r"```(?:json|JSON)?\s*(.*?)```", re.DOTALL)
_DECODER = json.JSONDecoder()


# Literal strings models (and careless callers) use instead of null
NULL_STRINGS = {"", "null", "none", "n/a", "unknown"}

# ISO-639-2 codes some models return instead of the two-letter form
ISO_639_2_TO_1 = {
    "eng": "en", "spa": "es", "fra": "fr", "fre": "fr", "deu": "de", "ger": "de",
    "por": "pt", "ita": "it", "nld": "nl", "dut": "nl", "rus": "ru", "zho": "zh",
    "chi": "zh", "jpn": "ja", "kor": "ko", "ara": "ar", "hin": "hi", "tur": "tr", "pol": "pl",
}


def coerce_optional_str(value: Any) -> Optional[str]:
    """Profile values are string-or-null: blanks, null-like strings and structured values read as None."""
    if value is None or isinstance(value, (dict, list, tuple, bool)):
        return None
    text = str(value)
    if text.strip().lower() in NULL_STRINGS:
        return None
    return text


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code block (``` or ```json) if present."""
    raw = (text or "").strip()
    if raw.startswith("```"):
        raw = re.sub(r"^```(?:json|JSON)?\s*", "", raw)
        raw = re.sub(r"\s*```$", "", raw)
    return raw


def fenced_blocks(text: str) -> List[str]:
    """Contents of all fenced code blocks, in order."""
    return [m.strip() for m in _FENCE_PATTERN.findall(text or "")]


def _json_objects(text: str) -> Iterator[Tuple[int, int, dict]]:
    """
    Yield (start, end, obj) for every top-level JSON object embedded in text.
    Nested objects are skipped; a '{' that does not start valid JSON is ignored.
    """
    pos = 0
    while True:
        start = text.find("{", pos)
        if start < 0:
            return
        try:
            obj, end = _DECODER.raw_decode(text, start)
        except json.JSONDecodeError:
            pos = start + 1
            continue
        if isinstance(obj, dict):
            yield start, end, obj
        pos = end


def first_json_object(text: str) -> Optional[dict]:
    """First well-formed JSON object found anywhere in text."""
    for _, _, obj in _json_objects(text or ""):
        return obj
    return None


def largest_json_object(text: str) -> Optional[dict]:
    """Longest top-level JSON object span in text."""
    best: Optional[dict] = None
    best_len = -1
    for start, end, obj in _json_objects(text or ""):
        if end - start > best_len:
            best, best_len = obj, end - start
    return best


def extract_json_object(text: str) -> Optional[dict]:
    """
    Locate and parse a JSON object in LLM output: content of fenced code blocks
    wins, otherwise the largest top-level {...} span in the whole text.
    """
    for block in fenced_blocks(text):
        obj = largest_json_object(block)
        if obj is not None:
            return obj
    return largest_json_object(text or "")


def normalize_language_tag(tag: Any, default: str) -> str:
    """Lower-cased primary ISO-639 subtag ('pt-BR' -> 'pt'); default when unusable."""
    if not isinstance(tag, str):
        return default
    primary = re.split(r"[-_\s]", tag.strip().lower(), maxsplit=1)[0]
    if not re.fullmatch(r"[a-z]{2,3}", primary):
        return default
    return ISO_639_2_TO_1.get(primary, primary)


def format_wage(wage: float) -> str:
    """Format an annual wage for the user-facing message."""
    return f"${wage:.2f}"
