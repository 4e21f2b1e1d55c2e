"""
LLM prompt templates for the wage prediction pipeline.

Pipeline order:
  1. DETECTION     - raw user text -> {"language", "translated"} JSON
  2. EXTRACTION    - pivot text + known profile -> profile JSON with missingFields/nextQuestion
  3. EXPLANATION   - predicted wage + profile -> EXPLANATION / FACTORS block
  4. LOCALIZATION  - final English message -> user's language
"""

from .wage_prompts import (
    DETECTION_PROMPT_TEMPLATE,
    EXPLANATION_PROMPT_TEMPLATE,
    EXTRACTION_CONTEXT_TEMPLATE,
    EXTRACTOR_INSTRUCTIONS,
    LOCALIZATION_PROMPT_TEMPLATE,
    TRANSLATOR_INSTRUCTIONS,
)

__all__ = [
    "DETECTION_PROMPT_TEMPLATE",
    "EXPLANATION_PROMPT_TEMPLATE",
    "EXTRACTION_CONTEXT_TEMPLATE",
    "EXTRACTOR_INSTRUCTIONS",
    "LOCALIZATION_PROMPT_TEMPLATE",
    "TRANSLATOR_INSTRUCTIONS",
]
