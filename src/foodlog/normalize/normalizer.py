"""Strict, fail-fast normalization of one parsed diary block."""

from __future__ import annotations

import logging
import math
import re
from typing import Mapping, Optional, Tuple

from foodlog.models.food import MAX_FOOD_NAME_LENGTH, MEALS, FoodItemRecord
from foodlog.normalize.errors import (
    EnumViolationError,
    MissingFieldError,
    NumericFormatError,
    UnitResolutionError,
    item_suffix,
)
from foodlog.normalize.numbers import parse_number, split_quantity
from foodlog.normalize.repairs import repair_quantity
from foodlog.normalize.vocab import (
    FLUID_OUNCE,
    HYDRATION_FIELD,
    ICONS,
    MEAL_FIELD,
    NUTRITION_FIELDS,
    REQUIRED_FIELDS,
    SERVING_FIELD,
    pluralize_unit,
    resolve_unit,
)

logger = logging.getLogger(__name__)

_DATE = re.compile(r"^\s*(\d{1,2})[/-](\d{1,2})(?:[/-]\d{2,4})?\s*$")

# Brand must be present but may be blank (unbranded, home-cooked food).
_BLANK_ALLOWED = frozenset({"Brand"})


def normalize_date(value: str) -> str:
    """Return ``MM/DD`` for ``M/D``, ``MM-DD`` and friends (a trailing year is dropped).

    Text that does not look like a month/day pair is returned unchanged.
    """

    match = _DATE.match(value)
    if not match:
        return value
    month, day = (int(part) for part in match.groups())
    return f"{month:02d}/{day:02d}"


def truncate_food_name(value: str) -> str:
    return value[:MAX_FOOD_NAME_LENGTH].rstrip()


def require_fields(fields: Mapping[str, str], item_index: int) -> None:
    for key in REQUIRED_FIELDS:
        value = fields.get(key)
        if value is None or (not value and key not in _BLANK_ALLOWED):
            raise MissingFieldError(
                f'Missing "{key}"{item_suffix(item_index)}.',
                item_index=item_index,
                field=key,
            )


def check_meal(value: str, item_index: int) -> str:
    if value not in MEALS:
        raise EnumViolationError(
            f"Invalid Meal{item_suffix(item_index)}. Must be Breakfast, Lunch, Dinner, or Snacks.",
            item_index=item_index,
            field=MEAL_FIELD,
            raw_value=value,
        )
    return value


def check_icon(value: str, item_index: int) -> str:
    if value not in ICONS:
        raise EnumViolationError(
            f'Invalid Icon "{value}"{item_suffix(item_index)}.',
            item_index=item_index,
            field="Icon",
            raw_value=value,
        )
    return value


def _split_amount(
    raw: str, field: str, item_index: int, usage: str
) -> Tuple[float, str]:
    cleaned = repair_quantity(raw)
    parts = split_quantity(cleaned)
    if parts is None:
        raise NumericFormatError(
            f"Invalid {field} format{item_suffix(item_index)}. Use {usage}.",
            item_index=item_index,
            field=field,
            raw_value=raw,
        )
    amount_text, unit_text = parts
    # Rounded up front so the unit agrees with the amount as it will be printed.
    amount = round(parse_number(amount_text), 3)
    if not math.isfinite(amount) or amount <= 0:
        raise NumericFormatError(
            f"Invalid {field} amount{item_suffix(item_index)}.",
            item_index=item_index,
            field=field,
            raw_value=raw,
        )
    return amount, unit_text


def normalize_serving(raw: str, item_index: int) -> Tuple[float, str]:
    """Return the serving amount and its display unit (``(2.0, "tablespoons")``)."""

    amount, unit_text = _split_amount(raw, SERVING_FIELD, item_index, '"<amount> <unit>"')
    canonical = resolve_unit(unit_text)
    if canonical is None:
        raise UnitResolutionError(
            f'Serving unit "{unit_text}" not allowed{item_suffix(item_index)}.',
            item_index=item_index,
            field=SERVING_FIELD,
            raw_value=raw,
        )
    return amount, pluralize_unit(canonical, amount)


def normalize_hydration(raw: str, item_index: int) -> float:
    """Return the fluid-ounce amount of a ``Hydration`` value."""

    amount, unit_text = _split_amount(
        raw, HYDRATION_FIELD, item_index, '"<number> fluid ounces"'
    )
    if resolve_unit(unit_text) != FLUID_OUNCE:
        raise UnitResolutionError(
            f'Hydration unit must be "fluid ounces"{item_suffix(item_index)}.',
            item_index=item_index,
            field=HYDRATION_FIELD,
            raw_value=raw,
        )
    return amount


def parse_nutrient(label: str, raw: Optional[str], item_index: int) -> float:
    if not raw:
        raise MissingFieldError(
            f'Missing "{label}"{item_suffix(item_index)}.',
            item_index=item_index,
            field=label,
        )
    value = parse_number(raw)
    if not math.isfinite(value):
        raise NumericFormatError(
            f"Invalid number for {label}{item_suffix(item_index)}.",
            item_index=item_index,
            field=label,
            raw_value=raw,
        )
    if value < 0:
        raise NumericFormatError(
            f"{label} cannot be negative{item_suffix(item_index)}.",
            item_index=item_index,
            field=label,
            raw_value=raw,
        )
    return value


def normalize_fields(fields: Mapping[str, str], item_index: int) -> FoodItemRecord:
    """Validate and canonicalize one parsed block.

    Checks run in a fixed order (presence, meal, date, icon, serving, nutrition,
    hydration) and the first violation raises a ``NormalizationError`` subclass.
    """

    require_fields(fields, item_index)
    meal = check_meal(fields[MEAL_FIELD], item_index)
    date = normalize_date(fields["Date"])
    icon = check_icon(fields["Icon"], item_index)
    serving_amount, serving_unit = normalize_serving(fields[SERVING_FIELD], item_index)
    nutrition = {
        attr: parse_nutrient(label, fields.get(label), item_index)
        for label, attr in NUTRITION_FIELDS.items()
    }
    hydration = None
    if fields.get(HYDRATION_FIELD):
        hydration = normalize_hydration(fields[HYDRATION_FIELD], item_index)

    record = FoodItemRecord(
        food_name=truncate_food_name(fields["Food Name"]),
        date=date,
        meal=meal,
        brand=fields["Brand"],
        icon=icon,
        serving_amount=serving_amount,
        serving_unit=serving_unit,
        hydration_fluid_oz=hydration,
        provisional=False,
        **nutrition,
    )
    logger.debug("Normalized item %s: %s", item_index, record.food_name)
    return record


__all__ = [
    "normalize_date",
    "truncate_food_name",
    "require_fields",
    "check_meal",
    "check_icon",
    "normalize_serving",
    "normalize_hydration",
    "parse_nutrient",
    "normalize_fields",
]
