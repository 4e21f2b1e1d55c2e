"""Partial wage profile carried by the caller between conversational turns."""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

from config import REQUIRED_FIELDS
from utils.helpers import coerce_optional_str


class WageProfile(BaseModel):
    """Normalized profile fields; None means unknown."""

    age: Optional[str] = Field(default=None, description="Age bucket (e.g. '25-29')")
    years_experience: Optional[str] = Field(default=None, description="Experience bucket (e.g. '2-3')")
    education: Optional[str] = Field(default=None, description="Highest education level")
    gender: Optional[str] = Field(default=None, description="Gender label")
    country: Optional[str] = Field(default=None, description="Country name")
    industry: Optional[str] = Field(default=None, description="Industry label")

    @classmethod
    def from_state(cls, state: Optional[Mapping[str, Any]]) -> "WageProfile":
        """
        Build a profile from caller-supplied state. Unknown keys are ignored and
        values are coerced the same way extractor output is, so blanks,
        null-like strings and booleans stay unknown. A previously echoed error
        payload therefore reads back as an empty profile.
        """
        if not state or not isinstance(state, Mapping):
            return cls()
        return cls(**{field: coerce_optional_str(state.get(field)) for field in REQUIRED_FIELDS})

    def missing(self) -> List[str]:
        """Required fields that are still unknown, in API order."""
        return [f for f in REQUIRED_FIELDS if getattr(self, f) is None]

    def is_complete(self) -> bool:
        return not self.missing()

    def as_state(self) -> Dict[str, Optional[str]]:
        """Plain dict the caller persists and sends back as currentState."""
        return {f: getattr(self, f) for f in REQUIRED_FIELDS}
