"""Pydantic models defining shared data contracts."""

from foodlog.models.food import MEALS, FoodItemRecord, FoodLogResult, Meal

__all__ = [
    "MEALS",
    "Meal",
    "FoodItemRecord",
    "FoodLogResult",
]
