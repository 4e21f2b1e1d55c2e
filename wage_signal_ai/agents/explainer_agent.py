"""Explainer Agent: short rationale and top contributing factors for a successful prediction."""

import json
import re
from typing import List, Optional

from prompts import EXPLANATION_PROMPT_TEMPLATE
from schemas.prediction import WageExplanation
from schemas.wage_profile import WageProfile
from services.generation import GenerationClient
from utils.helpers import format_wage
from utils.logger import get_logger

logger = get_logger(__name__)

MAX_FACTORS = 3
FALLBACK_FACTORS: List[str] = [
    "Years of professional experience",
    "Education level",
    "Industry and country of employment",
]

_EXPLANATION_RE = re.compile(r"EXPLANATION:\s*(.+?)(?=FACTORS:|\Z)", re.DOTALL)
_FACTORS_RE = re.compile(r"FACTORS:")
_FACTOR_LINE_RE = re.compile(r"^\s*\d+\s*[.)]\s*(.+?)\s*$", re.MULTILINE)


def parse_explanation(text: str) -> WageExplanation:
    """
    Pull the EXPLANATION paragraph and the numbered FACTORS list out of free text.
    Fewer than three factors means the fixed fallback list is used instead.
    """
    text = text or ""
    explanation: Optional[str] = None
    m = _EXPLANATION_RE.search(text)
    if m:
        explanation = " ".join(m.group(1).split()).strip("*_ ") or None

    factors: List[str] = []
    fm = _FACTORS_RE.search(text)
    if fm:
        factors = [f.strip("*_ ") for f in _FACTOR_LINE_RE.findall(text[fm.end():])]
        factors = [f for f in factors if f][:MAX_FACTORS]
    if len(factors) < MAX_FACTORS:
        factors = list(FALLBACK_FACTORS)
    return WageExplanation(explanation=explanation, key_factors=factors)


async def run_explainer_agent(
    explainer: GenerationClient,
    profile: WageProfile,
    predicted_wage: float,
) -> WageExplanation:
    """Never raises: a failed or malformed reply yields the fallback factors."""
    prompt = EXPLANATION_PROMPT_TEMPLATE.format(
        wage=format_wage(predicted_wage),
        profile=json.dumps(profile.as_state(), indent=2, ensure_ascii=False),
    )
    try:
        reply = await explainer.generate([{"role": "user", "content": prompt}])
    except Exception as e:
        logger.warning("Explanation generation failed, using fallback factors: %s", e)
        return WageExplanation(explanation=None, key_factors=list(FALLBACK_FACTORS))
    result = parse_explanation(reply)
    logger.info(
        "Explainer Agent finished: has_explanation=%s factors=%s",
        result.explanation is not None,
        len(result.key_factors),
    )
    return result
