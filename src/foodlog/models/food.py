"""Food item records exchanged between the normalizer, the API, and the diary."""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Meal = Literal["Breakfast", "Lunch", "Dinner", "Snacks"]

MEALS: tuple[str, ...] = ("Breakfast", "Lunch", "Dinner", "Snacks")

MAX_FOOD_NAME_LENGTH = 60


class FoodItemRecord(BaseModel):
    """One food-diary entry.

    ``provisional`` is ``False`` only for records produced by the strict normalizer.
    Best-effort extraction always sets it, because its nutrition values may be
    placeholders rather than data the model actually returned.
    """

    food_name: str = Field(min_length=1, max_length=MAX_FOOD_NAME_LENGTH)
    date: str
    meal: Meal
    brand: str = ""
    icon: str
    serving_amount: float = Field(gt=0)
    serving_unit: str = Field(min_length=1)
    calories: float = Field(ge=0)
    fat_g: float = Field(ge=0)
    sat_fat_g: float = Field(ge=0)
    cholesterol_mg: float = Field(ge=0)
    sodium_mg: float = Field(ge=0)
    carbs_g: float = Field(ge=0)
    fiber_g: float = Field(ge=0)
    sugar_g: float = Field(ge=0)
    protein_g: float = Field(ge=0)
    hydration_fluid_oz: Optional[float] = Field(default=None, gt=0)
    provisional: bool = False

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class FoodLogResult(BaseModel):
    """Outcome reported by the food-diary automation service."""

    success: bool
    message: str
    output: Optional[str] = None
    verification: Dict[str, Any] = Field(default_factory=dict)
