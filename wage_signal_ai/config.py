"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# API keys - never hardcode
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
# Any OpenAI-compatible endpoint (e.g. https://api.groq.com/openai/v1); empty uses OpenAI
OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")
EXTRACTOR_MODEL_NAME: str = os.getenv("EXTRACTOR_MODEL_NAME", MODEL_NAME)
TRANSLATOR_MODEL_NAME: str = os.getenv("TRANSLATOR_MODEL_NAME", MODEL_NAME)

# Wage prediction service
PREDICTION_API_URL: str = os.getenv(
    "PREDICTION_API_URL", "https://plumber-api-2-latest.onrender.com/predict"
)

# HTTP / LLM settings (timeouts live in the clients, never in the pipeline)
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))
LLM_TIMEOUT_SECONDS: float = float(os.getenv("LLM_TIMEOUT_SECONDS", "60"))

# Language all extraction runs in; reduced to its primary subtag ("EN-us" -> "en")
PIVOT_LANGUAGE: str = (
    os.getenv("PIVOT_LANGUAGE", "en").strip().lower().replace("_", "-").split("-")[0] or "en"
)

ENABLE_EXPLANATIONS: bool = os.getenv("ENABLE_EXPLANATIONS", "true").strip().lower() in ("1", "true", "yes")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Profile fields required before the prediction service is called (order = API body order)
REQUIRED_FIELDS: tuple = (
    "age",
    "years_experience",
    "education",
    "gender",
    "country",
    "industry",
)

# Centralized field vocabularies (the prediction model was trained on these labels)
AGE_BUCKETS: list = [
    "18-21", "22-24", "25-29", "30-34", "35-39", "40-44",
    "45-49", "50-54", "55-59", "60-69", "70-79", "80+",
]

EXPERIENCE_BUCKETS: list = [
    "0-1", "1-2", "2-3", "3-4", "4-5", "5-11",
    "11-15", "15-20", "20-25", "25-30", "30+",
]

EDUCATION_LEVELS: list = [
    "Master’s degree",
    "Bachelor’s degree",
    "Some college/university study without earning a bachelor’s degree",
    "Doctoral degree",
    "Professional degree",
    "I prefer not to answer",
]

GENDERS: list = [
    "Female",
    "Male",
    "Prefer not to say",
    "Prefer to self-describe",
]

INDUSTRIES: list = [
    "I am a student",
    "Online Service/Internet-based Services",
    "Other",
    "Academics/Education",
    "Energy/Mining",
    "Military/Security/Defense",
    "Computers/Technology",
    "Insurance/Risk Assessment",
    "Broadcasting/Communications",
    "Accounting/Finance",
    "Shipping/Transportation",
    "Online Business/Internet-based Sales",
    "Manufacturing/Fabrication",
    "Medical/Pharmaceutical",
    "Government/Public Service",
    "Non-profit/Service",
    "Marketing/CRM",
    "Retail/Sales",
    "Hospitality/Entertainment/Sports",
]
