"""Validated extraction output of one generation call, or a typed parse failure."""

from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from config import REQUIRED_FIELDS

INVALID_OUTPUT_ERROR = "Invalid model output"


class ExtractionResult(BaseModel):
    """Profile fields reported by the extractor plus its own completeness report."""

    # Unknown keys from the model are kept for diagnostics but never read downstream
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    age: Optional[str] = None
    years_experience: Optional[str] = None
    education: Optional[str] = None
    gender: Optional[str] = None
    country: Optional[str] = None
    industry: Optional[str] = None
    missing_fields: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("missingFields", "missing_fields"),
        description="Field names the extractor could not determine",
    )
    next_question: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("nextQuestion", "next_question"),
        description="Clarifying question for a missing field",
    )

    def profile_fields(self) -> Dict[str, Optional[str]]:
        return {f: getattr(self, f) for f in REQUIRED_FIELDS}


class ExtractionFailure(BaseModel):
    """Marker for model output that could not be parsed into an ExtractionResult."""

    raw_text: str = Field(default="", description="Raw model output, kept for diagnostics")
    reason: str = Field(default="", description="Why parsing failed")

    def as_payload(self) -> Dict[str, Any]:
        """Error payload echoed to the caller as structuredData."""
        return {"error": INVALID_OUTPUT_ERROR, "raw": self.raw_text}


ExtractionOutcome = Union[ExtractionResult, ExtractionFailure]
