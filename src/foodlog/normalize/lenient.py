"""Best-effort extraction for model responses the strict pipeline rejects.

Everything here substitutes defaults instead of raising, so the records it returns
are always marked ``provisional``: their nutrition values may be placeholders.
Callers pick this path explicitly; the strict pipeline never falls back to it.
"""

from __future__ import annotations

import datetime
import logging
import math
import re
from typing import Dict, List, Optional, Tuple

from rapidfuzz import fuzz, process, utils

from foodlog.models.food import MEALS, FoodItemRecord
from foodlog.normalize.normalizer import normalize_date, truncate_food_name
from foodlog.normalize.numbers import parse_number, split_quantity
from foodlog.normalize.repairs import repair_quantity
from foodlog.normalize.vocab import (
    DEFAULT_ICON,
    EACH,
    FLUID_OUNCE,
    ICONS,
    NUTRITION_FIELDS,
    pluralize_unit,
    resolve_unit,
)

logger = logging.getLogger(__name__)

DEFAULT_ICON_THRESHOLD = 85.0
DEFAULT_MEAL = "Snacks"
UNKNOWN_FOOD = "Unknown Food"

_ICON_CHOICES: Tuple[str, ...] = tuple(sorted(ICONS))
_ICONS_BY_LOWER: Dict[str, str] = {icon.lower(): icon for icon in _ICON_CHOICES}
_MEALS_BY_LOWER: Dict[str, str] = {meal.lower(): meal for meal in MEALS}
_MEALS_BY_LOWER["snack"] = "Snacks"

_LABELS: Dict[str, str] = {
    "food name": "Food Name",
    "food": "Food Name",
    "item": "Food Name",
    "date": "Date",
    "meal": "Meal",
    "brand": "Brand",
    "restaurant": "Brand",
    "brand/restaurant": "Brand",
    "icon": "Icon",
    "serving size": "Serving Size",
    "serving": "Serving Size",
    "portion": "Serving Size",
    "calories": "Calories",
    "cal": "Calories",
    "kcal": "Calories",
    "energy": "Calories",
    "fat": "Fat (g)",
    "total fat": "Fat (g)",
    "saturated fat": "Saturated Fat (g)",
    "sat fat": "Saturated Fat (g)",
    "cholesterol": "Cholesterol (mg)",
    "chol": "Cholesterol (mg)",
    "sodium": "Sodium (mg)",
    "carbs": "Carbs (g)",
    "carbohydrate": "Carbs (g)",
    "carbohydrates": "Carbs (g)",
    "total carbohydrates": "Carbs (g)",
    "fiber": "Fiber (g)",
    "fibre": "Fiber (g)",
    "dietary fiber": "Fiber (g)",
    "sugar": "Sugar (g)",
    "sugars": "Sugar (g)",
    "total sugar": "Sugar (g)",
    "total sugars": "Sugar (g)",
    "protein": "Protein (g)",
    "hydration": "Hydration",
    "fluid ounces": "Hydration",
}

_CODE_FENCE = re.compile(r"^\s*```.*$", re.MULTILINE)
_LIST_MARKER = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s+")
_LOOSE_FIELD = re.compile(r"^([^:]{1,40}):\s*(.*)$")
_FIRST_NUMBER = re.compile(r"-?\d[\d,]*(?:\.\d+)?(?:\s+\d+/\d+|/\d+)?|-?\.\d+")


def _canonical_label(raw_label: str) -> Optional[str]:
    label = re.sub(r"\(.*?\)", " ", raw_label.lower())
    label = " ".join(label.split())
    return _LABELS.get(label)


def _loose_fields(line: str) -> Optional[Tuple[str, str]]:
    cleaned = _LIST_MARKER.sub("", line.replace("**", "").replace("__", "")).strip()
    match = _LOOSE_FIELD.match(cleaned)
    if not match:
        return None
    label = _canonical_label(match.group(1))
    if label is None:
        return None
    return label, match.group(2).strip()


def _sections(raw_text: str) -> List[Dict[str, str]]:
    """Group recognised fields into items, starting a new item at each food name."""

    text = _CODE_FENCE.sub("", raw_text.replace("\r\n", "\n"))
    sections: List[Dict[str, str]] = []
    current: Optional[Dict[str, str]] = None
    for line in text.split("\n"):
        parsed = _loose_fields(line)
        if parsed is None:
            continue
        label, value = parsed
        if label == "Food Name":
            current = {}
            sections.append(current)
        if current is not None and label not in current:
            current[label] = value
    return sections


def first_number(value: str) -> float:
    """Return the first non-negative number in ``value`` (``"~250 kcal"`` -> 250), else 0."""

    match = _FIRST_NUMBER.search(value or "")
    if not match:
        return 0.0
    number = parse_number(match.group(0))
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def coerce_icon(value: Optional[str], threshold: float = DEFAULT_ICON_THRESHOLD) -> str:
    """Map ``value`` onto the icon vocabulary, falling back to ``Default``."""

    candidate = (value or "").strip()
    if not candidate:
        return DEFAULT_ICON
    if candidate in ICONS:
        return candidate
    if candidate.lower() in _ICONS_BY_LOWER:
        return _ICONS_BY_LOWER[candidate.lower()]
    result = process.extractOne(
        candidate,
        _ICON_CHOICES,
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        score_cutoff=threshold,
    )
    if not result:
        return DEFAULT_ICON
    matched, score, _ = result
    logger.debug("Coerced icon %r to %r (score=%.1f)", candidate, matched, score)
    return matched


def coerce_meal(value: Optional[str], default: Optional[str] = None) -> str:
    for candidate in (value, default):
        if candidate and candidate.strip().lower() in _MEALS_BY_LOWER:
            return _MEALS_BY_LOWER[candidate.strip().lower()]
    return DEFAULT_MEAL


def coerce_serving(value: Optional[str]) -> Tuple[float, str]:
    """Return a serving amount and display unit, defaulting to ``1 each``."""

    amount, canonical = 1.0, EACH
    parts = split_quantity(repair_quantity(value or ""))
    if parts is not None:
        parsed = round(parse_number(parts[0]), 3)
        if math.isfinite(parsed) and parsed > 0:
            amount = parsed
        canonical = resolve_unit(parts[1]) or EACH
    elif value:
        amount = round(first_number(value), 3) or 1.0
    return amount, pluralize_unit(canonical, amount)


def coerce_hydration(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    parts = split_quantity(repair_quantity(value))
    if parts is not None:
        if resolve_unit(parts[1]) != FLUID_OUNCE:
            return None
        amount = round(parse_number(parts[0]), 3)
    else:
        amount = round(first_number(value), 3)
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount


def _coerce_date(value: Optional[str], default: Optional[str], today: datetime.date) -> str:
    for candidate in (value, default):
        if not candidate:
            continue
        normalized = normalize_date(candidate)
        if re.fullmatch(r"\d{2}/\d{2}", normalized):
            return normalized
    return today.strftime("%m/%d")


def _placeholder(
    description: str,
    entry_date: str,
    meal: str,
    brand: str,
) -> FoodItemRecord:
    name = truncate_food_name(" ".join(description.split())) or UNKNOWN_FOOD
    return FoodItemRecord(
        food_name=name,
        date=entry_date,
        meal=meal,
        brand=brand,
        icon=DEFAULT_ICON,
        serving_amount=1.0,
        serving_unit=EACH,
        provisional=True,
        **{attr: 0.0 for attr in NUTRITION_FIELDS.values()},
    )


def extract_best_effort(
    raw_text: str,
    *,
    description: str = "",
    entry_date: Optional[str] = None,
    meal: Optional[str] = None,
    brand: Optional[str] = None,
    icon_threshold: float = DEFAULT_ICON_THRESHOLD,
    today: Optional[datetime.date] = None,
) -> List[FoodItemRecord]:
    """Extract provisional records from any text without raising.

    ``entry_date``, ``meal`` and ``brand`` are the values the user picked and fill
    fields the model left out. When nothing resembling an item is found a single
    zero-nutrition placeholder named after ``description`` is returned.
    """

    today = today or datetime.date.today()
    records: List[FoodItemRecord] = []
    for fields in _sections(raw_text or ""):
        name = truncate_food_name(fields.get("Food Name", ""))
        if not name:
            continue
        serving_amount, serving_unit = coerce_serving(fields.get("Serving Size"))
        records.append(
            FoodItemRecord(
                food_name=name,
                date=_coerce_date(fields.get("Date"), entry_date, today),
                meal=coerce_meal(fields.get("Meal"), meal),
                brand=fields.get("Brand") or brand or "",
                icon=coerce_icon(fields.get("Icon"), icon_threshold),
                serving_amount=serving_amount,
                serving_unit=serving_unit,
                hydration_fluid_oz=coerce_hydration(fields.get("Hydration")),
                provisional=True,
                **{
                    attr: first_number(fields.get(label, ""))
                    for label, attr in NUTRITION_FIELDS.items()
                },
            )
        )

    if not records:
        logger.warning("No food items recognised; returning a placeholder record")
        records.append(
            _placeholder(
                description,
                _coerce_date(None, entry_date, today),
                coerce_meal(None, meal),
                brand or "",
            )
        )
    else:
        logger.info("Extracted %s provisional food item(s)", len(records))
    return records


def find_follow_up_questions(raw_text: str) -> List[str]:
    """Return the clarifying questions in a response that asks for more detail."""

    questions: List[str] = []
    for line in (raw_text or "").replace("\r\n", "\n").split("\n"):
        cleaned = _LIST_MARKER.sub("", line.replace("**", "")).strip()
        if "?" not in cleaned or _loose_fields(cleaned) is not None:
            continue
        questions.append(cleaned)
    return questions


__all__ = [
    "DEFAULT_ICON_THRESHOLD",
    "DEFAULT_MEAL",
    "UNKNOWN_FOOD",
    "first_number",
    "coerce_icon",
    "coerce_meal",
    "coerce_serving",
    "coerce_hydration",
    "extract_best_effort",
    "find_follow_up_questions",
]
