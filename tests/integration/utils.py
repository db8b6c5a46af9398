"""Shared helpers for integration tests."""

from __future__ import annotations

from typing import Callable

import httpx

from foodlog.config import get_settings
from foodlog.integrations.food_diary import FoodDiaryClient


def auth_headers() -> dict[str, str]:
    token = get_settings().api_token
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


def mock_diary(handler: Callable[[httpx.Request], httpx.Response]) -> FoodDiaryClient:
    return FoodDiaryClient("http://diary.test", transport=httpx.MockTransport(handler))
