"""Instructions and prompt templates for the extractor, translator and explainer."""

from config import (
    AGE_BUCKETS,
    EDUCATION_LEVELS,
    EXPERIENCE_BUCKETS,
    GENDERS,
    INDUSTRIES,
)


def _quoted(values: list) -> str:
    return ", ".join(f'"{v}"' for v in values)


EXTRACTOR_INSTRUCTIONS = f"""You are an AI assistant that extracts and normalizes user data to structured categories for a wage prediction model.

Return a JSON object with the following keys:
- age (choose one bucket: {_quoted(AGE_BUCKETS)})
- years_experience (choose one bucket: {_quoted(EXPERIENCE_BUCKETS)})
- education (one of: {_quoted(EDUCATION_LEVELS)})
- gender (one of: {_quoted(GENDERS)})
- country (country name only; if only a city is mentioned, infer the country)
- industry (choose one from this list: {_quoted(INDUSTRIES)})

Also return:
- missingFields: array of field names not detected
- nextQuestion: a question to ask the user to help fill a missing field

If any value is missing or unclear, return null and include the field in "missingFields".

Always return JSON."""

EXTRACTION_CONTEXT_TEMPLATE = """You are an AI assistant that extracts and normalizes user data for a wage prediction model.
The current known data state is: {context}

The new user input is provided below. You must merge the new information with the known data and re-evaluate all required fields (age, years_experience, education, gender, country, industry).
Return a single, complete JSON object."""

TRANSLATOR_INSTRUCTIONS = """You are an expert AI language assistant focused strictly on translation and language detection.
Your tasks are:
1. Detect the ISO-639 language code of the user's input.
2. If the language is not English ('en'), translate the text to English.
3. If asked to translate a final message, provide ONLY the translated text.

Always respond strictly with the requested format (e.g., JSON for detection, plain text for final translation)."""

DETECTION_PROMPT_TEMPLATE = """Detect the language of the text below and translate it to English.
Respond with JSON only: {{"language": "<ISO-639-1 code>", "translated": "<English text>"}}
If the text is already English, return it unchanged in "translated".

Text:
{text}"""

LOCALIZATION_PROMPT_TEMPLATE = """Translate the following message into the language with ISO-639 code '{language}'.
Keep numbers and currency amounts exactly as written. Provide ONLY the translated text.

Message:
{text}"""

EXPLANATION_PROMPT_TEMPLATE = """A wage prediction model estimated an annual wage of {wage} for this profile:
{profile}

Explain briefly which attributes most likely drove this estimate. Respond in exactly this format:
EXPLANATION: <two or three sentences>
FACTORS:
1. <most important factor>
2. <second factor>
3. <third factor>"""
