"""Render food item records in the line-oriented diary block format."""

from __future__ import annotations

from typing import Iterable, List

from foodlog.models.food import FoodItemRecord
from foodlog.normalize.numbers import format_number
from foodlog.normalize.vocab import FLUID_OUNCE, NUTRITION_FIELDS, pluralize_unit

ITEM_SEPARATOR = "\n\n"


def _line(label: str, value: str) -> str:
    return f"{label}: {value}".rstrip()


def serialize(record: FoodItemRecord) -> str:
    """Return one diary block, fields in canonical order, hydration last when present."""

    lines: List[str] = [
        _line("Food Name", record.food_name),
        _line("Date", record.date),
        _line("Meal", record.meal),
        _line("Brand", record.brand),
        _line("Icon", record.icon),
        _line("Serving Size", f"{format_number(record.serving_amount)} {record.serving_unit}"),
    ]
    lines.extend(
        _line(label, format_number(getattr(record, attr)))
        for label, attr in NUTRITION_FIELDS.items()
    )
    if record.hydration_fluid_oz is not None:
        amount = record.hydration_fluid_oz
        lines.append(
            _line("Hydration", f"{format_number(amount)} {pluralize_unit(FLUID_OUNCE, amount)}")
        )
    return "\n".join(lines)


def serialize_items(records: Iterable[FoodItemRecord]) -> str:
    return ITEM_SEPARATOR.join(serialize(record) for record in records)


def to_food_items(records: Iterable[FoodItemRecord]) -> List[str]:
    """Return the per-item block strings the diary service expects in ``food_items``."""

    return [serialize(record) for record in records]


__all__ = ["ITEM_SEPARATOR", "serialize", "serialize_items", "to_food_items"]
