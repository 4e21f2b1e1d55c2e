"""Surface-form normalization of a complete profile before it is sent to the prediction API."""

from typing import Dict, Optional

from config import REQUIRED_FIELDS
from schemas.wage_profile import WageProfile

# Explicit label rewrites expected by the prediction API; add new rules here, never infer them
EDUCATION_CANONICAL: Dict[str, str] = {
    "Some college/university study without earning a bachelor’s degree": "Some college",
    "Some college/university study without earning a bachelor's degree": "Some college",
}


def _trim(value: Optional[str]) -> Optional[str]:
    return value.strip() if isinstance(value, str) else value


def standardize_profile(profile: WageProfile) -> WageProfile:
    """Trim every field, then apply the field-specific canonical tables."""
    cleaned = {f: _trim(getattr(profile, f)) for f in REQUIRED_FIELDS}
    education = cleaned.get("education")
    if education in EDUCATION_CANONICAL:
        cleaned["education"] = EDUCATION_CANONICAL[education]
    return WageProfile(**cleaned)
