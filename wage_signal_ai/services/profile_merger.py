"""Merge extracted fields into the caller's partial profile and decide readiness."""

from config import REQUIRED_FIELDS
from schemas.extraction import ExtractionFailure, ExtractionOutcome, ExtractionResult
from schemas.turn import ReadinessDecision
from schemas.wage_profile import WageProfile
from utils.logger import get_logger

logger = get_logger(__name__)

DATA_QUALITY_FIELD = "data_quality"
DATA_QUALITY_MESSAGE = (
    "Sorry, I couldn't quite understand that. Could you rephrase and tell me your age, "
    "years of experience, education, gender, country and industry?"
)
FALLBACK_QUESTION = "More information required."


def merge_profile(existing: WageProfile, extraction: ExtractionResult) -> WageProfile:
    """
    Field-by-field merge. A null field in the extraction leaves the existing value;
    a non-null field overwrites it. Does not mutate either input.
    """
    updates = {f: v for f, v in extraction.profile_fields().items() if v is not None}
    return existing.model_copy(update=updates)


def evaluate_readiness(existing: WageProfile, extraction: ExtractionOutcome) -> ReadinessDecision:
    """
    Completion gate. Readiness comes from the merged profile; missing fields and
    the next question come from the extractor's own report, minus fields that
    are now known.
    """
    if isinstance(extraction, ExtractionFailure):
        logger.info("Completion gate: extraction failed (%s); asking user to rephrase", extraction.reason)
        return ReadinessDecision(
            ready_for_prediction=False,
            missing_fields=[DATA_QUALITY_FIELD],
            next_question=DATA_QUALITY_MESSAGE,
            merged_profile=extraction.as_payload(),
        )

    merged = merge_profile(existing, extraction)
    ready = merged.is_complete()
    missing = [
        f for f in extraction.missing_fields
        if f not in REQUIRED_FIELDS or getattr(merged, f) is None
    ]
    next_question = None if ready else (extraction.next_question or FALLBACK_QUESTION)
    logger.info(
        "Completion gate: ready=%s reported_missing=%s actually_missing=%s",
        ready,
        missing,
        merged.missing(),
    )
    return ReadinessDecision(
        ready_for_prediction=ready,
        missing_fields=missing,
        next_question=next_question,
        merged_profile=merged.as_state(),
    )
