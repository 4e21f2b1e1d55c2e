"""Extractor Agent: send pivot text plus the known profile to the LLM, return validated extraction."""

import json

from prompts import EXTRACTION_CONTEXT_TEMPLATE
from schemas.extraction import ExtractionOutcome
from schemas.wage_profile import WageProfile
from services.extraction_parser import parse_extraction
from services.generation import GenerationClient, Message
from utils.logger import get_logger

logger = get_logger(__name__)


def build_extraction_messages(pivot_text: str, existing: WageProfile) -> list[Message]:
    """Known profile goes in the system context; only the new text is sent as the user turn."""
    context = json.dumps(existing.as_state(), indent=2, ensure_ascii=False)
    return [
        {"role": "system", "content": EXTRACTION_CONTEXT_TEMPLATE.format(context=context)},
        {"role": "user", "content": pivot_text},
    ]


async def request_extraction(
    extractor: GenerationClient,
    pivot_text: str,
    existing: WageProfile,
) -> str:
    """Raw candidate text from the extractor. Collaborator errors propagate to the caller."""
    raw = await extractor.generate(build_extraction_messages(pivot_text, existing))
    logger.debug("Extractor raw output: %s", (raw or "")[:500])
    return raw or ""


async def run_extractor_agent(
    extractor: GenerationClient,
    pivot_text: str,
    existing: WageProfile,
) -> ExtractionOutcome:
    """
    Run the Extractor Agent: call the LLM with the merged-context prompt, then
    parse/repair its output. Returns ExtractionResult or ExtractionFailure.
    """
    raw = await request_extraction(extractor, pivot_text, existing)
    outcome = parse_extraction(raw)
    logger.info("Extractor Agent finished: outcome=%s", type(outcome).__name__)
    return outcome
