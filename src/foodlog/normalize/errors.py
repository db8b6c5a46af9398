"""Exceptions raised by the strict normalization pipeline."""

from __future__ import annotations

from typing import Any, Optional


class NormalizationError(ValueError):
    """Base class for every fatal normalization failure.

    The message is already phrased for end users; ``item_index`` is 1-based and
    ``None`` when the failure is not tied to a single item.
    """

    kind = "normalization_error"

    def __init__(
        self,
        message: str,
        *,
        item_index: Optional[int] = None,
        field: Optional[str] = None,
        raw_value: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.item_index = item_index
        self.field = field
        self.raw_value = raw_value

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.kind,
            "message": self.message,
            "item_index": self.item_index,
            "field": self.field,
            "raw_value": self.raw_value,
        }


class StructuralError(NormalizationError):
    """Blank input, a line that is not ``Key: value``, or a key outside the schema."""

    kind = "structural_error"


class MissingFieldError(NormalizationError):
    """A required field is absent or empty."""

    kind = "missing_field"


class EnumViolationError(NormalizationError):
    """A meal or icon value is outside its closed vocabulary."""

    kind = "enum_violation"


class UnitResolutionError(NormalizationError):
    """A serving or hydration unit cannot be resolved to a known unit."""

    kind = "unit_resolution"


class NumericFormatError(NormalizationError):
    """A numeric value is malformed, non-finite, or outside its allowed range."""

    kind = "numeric_format"


def item_suffix(item_index: Optional[int]) -> str:
    """Return `` in item N`` for messages, or an empty string."""

    if item_index is None:
        return ""
    return f" in item {item_index}"


__all__ = [
    "NormalizationError",
    "StructuralError",
    "MissingFieldError",
    "EnumViolationError",
    "UnitResolutionError",
    "NumericFormatError",
    "item_suffix",
]
