"""Parse and repair untrusted extractor output into an ExtractionResult or ExtractionFailure."""

from typing import Any, List, Optional

from pydantic import ValidationError

from config import REQUIRED_FIELDS
from schemas.extraction import ExtractionFailure, ExtractionOutcome, ExtractionResult
from utils.helpers import coerce_optional_str, extract_json_object
from utils.logger import get_logger

logger = get_logger(__name__)

def _coerce_missing(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if v is not None and str(v).strip()]
    return []


def _coerce_question(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def parse_extraction(raw_text: str) -> ExtractionOutcome:
    """
    Two-stage decode of extractor output: locate a JSON object (fenced block
    preferred, else largest {...} span), then coerce it to ExtractionResult.
    Never raises; any failure returns ExtractionFailure carrying the raw text.
    """
    raw_text = raw_text or ""
    data = extract_json_object(raw_text)
    if data is None:
        logger.warning("No JSON object in extractor output (%s chars)", len(raw_text))
        return ExtractionFailure(raw_text=raw_text, reason="no JSON object found")

    payload = dict(data)
    for field in REQUIRED_FIELDS:
        payload[field] = coerce_optional_str(data.get(field))
    missing_key = "missingFields" if "missingFields" in data else "missing_fields"
    question_key = "nextQuestion" if "nextQuestion" in data else "next_question"
    payload.pop("missing_fields", None)
    payload.pop("next_question", None)
    payload["missingFields"] = _coerce_missing(data.get(missing_key))
    payload["nextQuestion"] = _coerce_question(data.get(question_key))

    try:
        result = ExtractionResult.model_validate(payload)
    except ValidationError as e:
        logger.warning("Extractor output validation failed: %s", e)
        return ExtractionFailure(raw_text=raw_text, reason=str(e))

    logger.info(
        "Extraction parsed: known=%s missing=%s",
        [f for f, v in result.profile_fields().items() if v is not None],
        result.missing_fields,
    )
    return result
