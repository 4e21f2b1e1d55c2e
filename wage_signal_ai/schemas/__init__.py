"""Schema exports."""

from .extraction import ExtractionFailure, ExtractionOutcome, ExtractionResult
from .prediction import PredictionResponse, WageExplanation
from .turn import ReadinessDecision, TurnContext, TurnInput, TurnResult
from .wage_profile import WageProfile

__all__ = [
    "WageProfile",
    "ExtractionResult",
    "ExtractionFailure",
    "ExtractionOutcome",
    "PredictionResponse",
    "WageExplanation",
    "ReadinessDecision",
    "TurnContext",
    "TurnInput",
    "TurnResult",
]
