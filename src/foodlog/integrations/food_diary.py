"""Client for the food-diary automation service."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

import httpx

from foodlog.config import get_settings
from foodlog.models.food import FoodItemRecord, FoodLogResult
from foodlog.normalize.serializer import to_food_items

logger = logging.getLogger(__name__)

DIARY_TIMEOUT = 30.0


class FoodDiaryError(RuntimeError):
    """Raised when the diary service is unreachable or rejects a batch outright."""


class FoodDiaryClient:
    """Minimal wrapper around the diary service's ``/food_log`` and ``/health`` endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = DIARY_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = httpx.BasicAuth(username, password) if username and password else None
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            auth=self._auth,
            timeout=self._timeout,
            transport=self._transport,
            headers={"Content-Type": "application/json"},
        )

    def log_food(self, food_items: Sequence[str], log_water: bool = False) -> FoodLogResult:
        """Submit canonical diary blocks; one string per food item."""

        if not food_items:
            raise ValueError("At least one food item is required.")

        payload = {"food_items": list(food_items), "log_water": bool(log_water)}
        endpoint = f"{self._base_url}/food_log"
        try:
            with self._client() as client:
                response = client.post(endpoint, json=payload)
        except httpx.HTTPError as exc:
            logger.warning("Food diary request failed: %s", exc)
            raise FoodDiaryError(f"Cannot connect to the food diary service: {exc}") from exc

        body = _json_body(response)
        message = body.get("error") or body.get("message")
        verification = body.get("verification") or {}

        if response.is_success:
            return FoodLogResult(
                success=bool(body.get("success", True)),
                message=body.get("message") or "Food logged successfully!",
                output=body.get("output") or body.get("message"),
                verification=verification,
            )

        if verification:
            # The service ran but some items failed verification; report per-item detail.
            logger.info(
                "Food diary reported partial failure status=%s items=%s",
                response.status_code,
                len(food_items),
            )
            return FoodLogResult(
                success=False,
                message=message or "Food logging failed",
                output=body.get("output") or "",
                verification=verification,
            )

        raise FoodDiaryError(
            f"Food diary error ({response.status_code}): {message or 'Unknown error'}"
        )

    def log_records(
        self,
        records: Sequence[FoodItemRecord],
        *,
        log_water: bool = False,
        allow_provisional: bool = False,
    ) -> FoodLogResult:
        """Serialize and submit records, refusing placeholders unless explicitly allowed."""

        provisional = [record.food_name for record in records if record.provisional]
        if provisional and not allow_provisional:
            raise ValueError(
                "Refusing to log provisional (unverified) nutrition data for: "
                + ", ".join(provisional)
            )
        return self.log_food(to_food_items(records), log_water=log_water)

    def check_health(self) -> bool:
        try:
            with self._client() as client:
                response = client.get(f"{self._base_url}/health")
        except httpx.HTTPError as exc:
            logger.debug("Food diary health check failed: %s", exc)
            return False
        return response.is_success


def _json_body(response: httpx.Response) -> Dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {"message": response.text.strip()[:200]}
    return body if isinstance(body, dict) else {}


def build_food_diary_client() -> FoodDiaryClient | None:
    """Create a diary client from settings, or ``None`` when no service is configured."""

    settings = get_settings()
    if not settings.diary_base_url:
        logger.debug("Food diary base URL not configured.")
        return None
    return FoodDiaryClient(
        settings.diary_base_url,
        username=settings.diary_username,
        password=settings.diary_password,
        timeout=settings.diary_timeout,
    )


__all__ = ["FoodDiaryClient", "FoodDiaryError", "build_food_diary_client"]
