"""Application configuration helpers."""

from __future__ import annotations

import math
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))


class Settings(BaseModel):
    """Global application settings loaded from environment variables or .env files."""

    api_token: Optional[str] = Field(
        default=None,
        description="Bearer token required for authenticated endpoints.",
    )
    log_level: str = Field(default="INFO", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )
    log_requests: bool = Field(
        default=True,
        description="Emit request access logs when true.",
    )
    diary_base_url: Optional[str] = Field(
        default=None,
        description="Base URL of the food-diary automation service.",
    )
    diary_username: Optional[str] = Field(
        default=None,
        description="Basic-auth username for the food-diary service.",
    )
    diary_password: Optional[str] = Field(
        default=None,
        description="Basic-auth password for the food-diary service.",
    )
    diary_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for the food-diary service to respond.",
    )
    icon_match_threshold: float = Field(
        default=85.0,
        ge=0,
        le=100,
        description="Minimum fuzzy score (0-100) for best-effort icon coercion.",
    )
    allow_provisional_logging: bool = Field(
        default=False,
        description="Allow best-effort placeholder records to be sent to the diary.",
    )

    model_config = ConfigDict(frozen=True)


def _coerce_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _coerce_float(
    value: Optional[str],
    *,
    gt: Optional[float] = None,
    ge: Optional[float] = None,
    le: Optional[float] = None,
) -> Optional[float]:
    """Parse a numeric override, returning ``None`` when it is malformed or out of range."""

    if not value:
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    if not math.isfinite(parsed):
        return None
    if (gt is not None and parsed <= gt) or (ge is not None and parsed < ge):
        return None
    if le is not None and parsed > le:
        return None
    return parsed


def _parse_env_file(path: Path) -> dict[str, str]:
    payload: dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, raw_value = line.split("=", 1)
                payload[key.strip()] = raw_value.strip()
    except FileNotFoundError:
        return {}
    return payload


def _load_env_file_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        values.update(_parse_env_file(candidate))
    return values


def _load_from_env() -> dict[str, object]:
    """Load optional overrides from env vars (with .env fallbacks)."""

    file_values = _load_env_file_values()

    def _env(key: str) -> Optional[str]:
        return os.environ.get(key) or file_values.get(key)

    payload: dict[str, object] = {}
    if (api_token := _env("FOODLOG_API_TOKEN")):
        payload["api_token"] = api_token
    if (log_level := _env("FOODLOG_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("FOODLOG_LOG_FORMAT")):
        payload["log_format"] = log_format
    if (log_requests := _env("FOODLOG_LOG_REQUESTS")):
        payload["log_requests"] = _coerce_bool(log_requests)
    if (diary_base_url := _env("FOODLOG_DIARY_BASE_URL")):
        payload["diary_base_url"] = diary_base_url.rstrip("/")
    if (diary_username := _env("FOODLOG_DIARY_USERNAME")):
        payload["diary_username"] = diary_username
    if (diary_password := _env("FOODLOG_DIARY_PASSWORD")):
        payload["diary_password"] = diary_password
    if (diary_timeout := _coerce_float(_env("FOODLOG_DIARY_TIMEOUT"), gt=0)) is not None:
        payload["diary_timeout"] = diary_timeout
    icon_threshold = _coerce_float(_env("FOODLOG_ICON_MATCH_THRESHOLD"), ge=0, le=100)
    if icon_threshold is not None:
        payload["icon_match_threshold"] = icon_threshold
    if (allow_provisional := _env("FOODLOG_ALLOW_PROVISIONAL_LOGGING")):
        payload["allow_provisional_logging"] = _coerce_bool(allow_provisional)
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
