"""Per-turn schemas: input, readiness decision, threaded context and final result."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from config import PIVOT_LANGUAGE
from schemas.extraction import ExtractionOutcome
from schemas.wage_profile import WageProfile

TurnStatus = Literal["success", "need_more_info", "error"]


class TurnInput(BaseModel):
    """Raw user text plus the partial profile the caller persisted from the last turn."""

    text: str = Field(..., description="Raw user text in any language")
    current_state: Optional[Dict[str, Any]] = Field(
        default=None, description="structuredData returned by the previous turn"
    )


class ReadinessDecision(BaseModel):
    """Output of the completion gate."""

    ready_for_prediction: bool
    missing_fields: List[str] = Field(default_factory=list)
    next_question: Optional[str] = None
    # WageProfile after a successful merge, or the error payload on a parse failure
    merged_profile: Dict[str, Any] = Field(default_factory=dict)


class TurnContext(BaseModel):
    """Explicit state threaded through the stages of a single turn."""

    user_text: str
    existing_profile: WageProfile = Field(default_factory=WageProfile)
    pivot_text: str = ""
    language: str = PIVOT_LANGUAGE
    extraction: Optional[ExtractionOutcome] = None
    decision: Optional[ReadinessDecision] = None
    clean_profile: Optional[WageProfile] = None


class TurnResult(BaseModel):
    """One of three outcome variants, distinguished by status."""

    status: TurnStatus
    message: str
    structured_data: Dict[str, Any] = Field(default_factory=dict)
    language: str = PIVOT_LANGUAGE
    predicted_wage: Optional[float] = None
    explanation: Optional[str] = None
    key_factors: List[str] = Field(default_factory=list)

    def to_response(self) -> Dict[str, Any]:
        """Serialize to the caller contract; success-only fields appear only on success."""
        response: Dict[str, Any] = {
            "status": self.status,
            "message": self.message,
            "structuredData": self.structured_data,
            "language": self.language,
        }
        if self.status == "success":
            response["predictedWage"] = self.predicted_wage
            if self.explanation:
                response["explanation"] = self.explanation
            if self.key_factors:
                response["keyFactors"] = list(self.key_factors)
        return response
