"""Integrations with external services."""

from .food_diary import FoodDiaryClient, FoodDiaryError, build_food_diary_client

__all__ = ["FoodDiaryClient", "FoodDiaryError", "build_food_diary_client"]
