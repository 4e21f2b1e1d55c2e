"""Prediction service response and explanation schemas."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class PredictionResponse(BaseModel):
    """Result of one call to the wage prediction service."""

    status: Literal["success", "error"] = Field(..., description="success or error")
    predicted_wage: Optional[float] = Field(default=None, description="Annual wage when status is success")
    message: str = Field(..., description="User-facing message; never contains diagnostics")
    diagnostics: Dict[str, Any] = Field(
        default_factory=dict,
        description="Operator-facing detail (status code, response body, error) for logs only",
    )


class WageExplanation(BaseModel):
    """Short rationale and ranked contributing factors for a prediction."""

    explanation: Optional[str] = Field(default=None, description="Short natural-language rationale")
    key_factors: List[str] = Field(default_factory=list, description="Up to three ranked factors")
