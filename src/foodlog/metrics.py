"""Prometheus metrics definitions for the food-log service."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "foodlog_http_requests_total",
    "Total number of HTTP requests processed by the food-log API",
    ["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "foodlog_http_request_duration_seconds",
    "Latency of HTTP requests processed by the food-log API",
    ["method", "path"],
)

NORMALIZATIONS = Counter(
    "foodlog_normalizations_total",
    "Number of model responses normalized, by mode and result",
    ["mode", "result"],
)

DIARY_SUBMISSIONS = Counter(
    "foodlog_diary_submissions_total",
    "Number of food-log batches forwarded to the diary service",
    ["result"],
)

__all__ = [
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "NORMALIZATIONS",
    "DIARY_SUBMISSIONS",
]
