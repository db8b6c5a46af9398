"""Validation and normalization of model-generated nutrition text."""

from .errors import (
    EnumViolationError,
    MissingFieldError,
    NormalizationError,
    NumericFormatError,
    StructuralError,
    UnitResolutionError,
)
from .lenient import extract_best_effort, find_follow_up_questions
from .numbers import format_number, parse_number
from .pipeline import normalize_items, normalize_response
from .serializer import serialize, serialize_items, to_food_items

__all__ = [
    "NormalizationError",
    "StructuralError",
    "MissingFieldError",
    "EnumViolationError",
    "UnitResolutionError",
    "NumericFormatError",
    "normalize_items",
    "normalize_response",
    "extract_best_effort",
    "find_follow_up_questions",
    "parse_number",
    "format_number",
    "serialize",
    "serialize_items",
    "to_food_items",
]
