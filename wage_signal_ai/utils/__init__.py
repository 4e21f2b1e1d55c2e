"""Utility exports."""

from .helpers import (
    coerce_optional_str,
    extract_json_object,
    first_json_object,
    format_wage,
    normalize_language_tag,
    strip_code_fences,
)
from .logger import get_logger

__all__ = [
    "get_logger",
    "coerce_optional_str",
    "extract_json_object",
    "first_json_object",
    "format_wage",
    "normalize_language_tag",
    "strip_code_fences",
]
