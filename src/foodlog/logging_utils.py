"""Logging configuration helpers with secret redaction support."""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Iterable, List, Sequence

REDACTED = "[redacted]"

# Raw model text can be long; keep log lines readable.
MAX_VALUE_CHARS = 200

_CREDENTIAL_PATTERNS = (
    re.compile(r"(Bearer\s+)([A-Za-z0-9\-._~+/=]+)", re.IGNORECASE),
    re.compile(r"(Basic\s+)([A-Za-z0-9+/=]+)", re.IGNORECASE),
    re.compile(r"(api_token=)([^&\s]+)", re.IGNORECASE),
    re.compile(r"(X-API-Key=)([^&\s]+)", re.IGNORECASE),
    re.compile(r"(password=)([^&\s]+)", re.IGNORECASE),
)

# Structured context attached through ``extra=`` by the normalizer and the server.
_CONTEXT_FIELDS = ("request_id", "item_index", "field", "error_kind")
_STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({})))


def _mask_credentials(value: str) -> str:
    for pattern in _CREDENTIAL_PATTERNS:
        value = pattern.sub(r"\1" + REDACTED, value)
    return value


def _shorten(value: str) -> str:
    if len(value) <= MAX_VALUE_CHARS:
        return value
    return value[:MAX_VALUE_CHARS] + "..."


def _sanitize(message: str, secrets: Sequence[str]) -> str:
    sanitized = _mask_credentials(message)
    for secret in secrets:
        sanitized = sanitized.replace(secret, REDACTED)
    return sanitized


class SensitiveDataFilter(logging.Filter):
    """Redact auth headers and configured secrets (API token, diary password)."""

    def __init__(self, secrets: Iterable[str]):
        super().__init__()
        self._secrets: List[str] = [
            secret.strip() for secret in secrets if secret and secret.strip()
        ]

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - standard interface
        message = record.getMessage()
        sanitized = _sanitize(message, self._secrets)
        if sanitized != message:
            record.msg = sanitized
            record.args = ()

        for key, value in list(vars(record).items()):
            if key == "msg" or not isinstance(value, str):
                continue
            sanitized_value = _sanitize(value, self._secrets)
            if key not in _STANDARD_ATTRS:
                sanitized_value = _shorten(sanitized_value)
            setattr(record, key, sanitized_value)

        return True


class JsonFormatter(logging.Formatter):
    """JSON formatter carrying request and food-item context when present."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - override
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in _CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                payload[name] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        if record.stack_info:
            payload["stack"] = record.stack_info

        return json.dumps(payload, ensure_ascii=True)


def configure_logging(level_name: str, fmt: str, secrets: Iterable[str]) -> None:
    """Configure root logging with optional JSON output and secret redaction."""

    numeric_level = getattr(logging, level_name.upper(), logging.INFO)

    handler = logging.StreamHandler()
    if (fmt or "plain").lower() == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    handler.setFormatter(formatter)

    filter_ = SensitiveDataFilter(secrets)
    handler.addFilter(filter_)

    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(numeric_level)

    logging.captureWarnings(True)

    # httpx logs diary requests, so it shares the redaction filter.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx"):
        logger = logging.getLogger(name)
        logger.handlers = []
        logger.setLevel(numeric_level)
        logger.propagate = True
        logger.addFilter(filter_)


__all__ = ["REDACTED", "SensitiveDataFilter", "JsonFormatter", "configure_logging"]
