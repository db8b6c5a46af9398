"""Dependency definitions for the food-log API server."""

from __future__ import annotations

from typing import Callable, List, Optional

from fastapi import Depends, HTTPException, Request, status

from foodlog.config import get_settings
from foodlog.integrations.food_diary import FoodDiaryClient, build_food_diary_client
from foodlog.models.food import FoodItemRecord
from foodlog.normalize import extract_best_effort, normalize_items

StrictNormalizer = Callable[[str], List[FoodItemRecord]]
LenientExtractor = Callable[..., List[FoodItemRecord]]


def get_strict_normalizer() -> StrictNormalizer:
    """Return the fail-fast normalizer used for data that will be logged."""

    return normalize_items


def get_lenient_extractor() -> LenientExtractor:
    return extract_best_effort


def get_food_diary_client() -> Optional[FoodDiaryClient]:
    return build_food_diary_client()


def require_api_token(
    request: Request,
    settings = Depends(get_settings),
) -> None:
    """Ensure requests carry the configured API token when required."""

    token = settings.api_token
    if not token:
        return

    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.split("Bearer ")[-1].strip() == token:
        return

    if request.headers.get("X-API-Key") == token:
        return

    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
