"""Language Agent: detect + translate user text to the pivot language, and localize replies back."""

from typing import Tuple

from config import PIVOT_LANGUAGE
from prompts import DETECTION_PROMPT_TEMPLATE, LOCALIZATION_PROMPT_TEMPLATE
from services.generation import GenerationClient
from utils.helpers import first_json_object, normalize_language_tag, strip_code_fences
from utils.logger import get_logger

logger = get_logger(__name__)


async def normalize_language(translator: GenerationClient, text: str) -> Tuple[str, str]:
    """
    Return (pivot_text, language_tag). Fail soft: if detection fails in any way the
    original text is returned as-is and assumed to be in the pivot language.
    """
    if not (text or "").strip():
        return text, PIVOT_LANGUAGE
    try:
        reply = await translator.generate(
            [{"role": "user", "content": DETECTION_PROMPT_TEMPLATE.format(text=text)}]
        )
    except Exception as e:
        logger.warning("Language detection failed, assuming %s: %s", PIVOT_LANGUAGE, e)
        return text, PIVOT_LANGUAGE

    data = first_json_object(reply or "")
    if data is None:
        logger.warning("Language detection returned no JSON, assuming %s", PIVOT_LANGUAGE)
        return text, PIVOT_LANGUAGE

    language = normalize_language_tag(data.get("language"), PIVOT_LANGUAGE)
    translated = data.get("translated")
    if language == PIVOT_LANGUAGE or not isinstance(translated, str) or not translated.strip():
        # Already pivot, or nothing usable to extract from: keep the user's own words
        pivot_text = text
    else:
        pivot_text = translated.strip()
    logger.info("Language detected: %s (translated=%s)", language, pivot_text != text)
    return pivot_text, language


async def localize_text(translator: GenerationClient, text: str, language: str) -> str:
    """Translate a final message into the user's language. Best effort; never raises."""
    if not text or language == PIVOT_LANGUAGE:
        return text
    try:
        reply = await translator.generate(
            [
                {
                    "role": "user",
                    "content": LOCALIZATION_PROMPT_TEMPLATE.format(language=language, text=text),
                }
            ]
        )
    except Exception as e:
        logger.warning("Localization to %s failed, keeping %s text: %s", language, PIVOT_LANGUAGE, e)
        return text
    translated = strip_code_fences(reply or "")
    if not translated:
        logger.warning("Localization to %s returned empty text, keeping %s text", language, PIVOT_LANGUAGE)
        return text
    return translated
