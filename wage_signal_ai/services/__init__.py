"""Service exports."""

from .extraction_parser import parse_extraction
from .generation import GenerationClient, OpenAIGenerationClient, get_generation_client
from .prediction_client import PredictionClient, normalize_wage
from .profile_merger import evaluate_readiness, merge_profile
from .standardizer import standardize_profile

__all__ = [
    "GenerationClient",
    "OpenAIGenerationClient",
    "get_generation_client",
    "parse_extraction",
    "merge_profile",
    "evaluate_readiness",
    "standardize_profile",
    "PredictionClient",
    "normalize_wage",
]
