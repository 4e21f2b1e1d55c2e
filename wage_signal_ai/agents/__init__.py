"""Agent exports."""

from .explainer_agent import run_explainer_agent
from .extractor_agent import run_extractor_agent
from .language_agent import localize_text, normalize_language
from .wage_prediction_agent import (
    WagePredictionPipeline,
    create_default_pipeline,
    run_turn_sync,
    run_wage_prediction_turn,
)

__all__ = [
    "normalize_language",
    "localize_text",
    "run_extractor_agent",
    "run_explainer_agent",
    "WagePredictionPipeline",
    "create_default_pipeline",
    "run_wage_prediction_turn",
    "run_turn_sync",
]
