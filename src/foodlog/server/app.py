"""ASGI application for the food-log service."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Optional
from uuid import uuid4

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel, Field

from foodlog import __version__, metrics
from foodlog.config import Settings, get_settings
from foodlog.integrations.food_diary import FoodDiaryClient, FoodDiaryError
from foodlog.logging_utils import configure_logging as configure_app_logging
from foodlog.models.food import FoodItemRecord, FoodLogResult
from foodlog.normalize import (
    NormalizationError,
    find_follow_up_questions,
    serialize_items,
    to_food_items,
)
from foodlog.server import deps

logger = logging.getLogger(__name__)

MAX_RESPONSE_TEXT_CHARS = 50_000


class NormalizeRequest(BaseModel):
    text: str = Field(max_length=MAX_RESPONSE_TEXT_CHARS)


class NormalizeResponse(BaseModel):
    text: str
    food_items: list[str]
    items: list[FoodItemRecord]


class ExtractRequest(BaseModel):
    text: str = Field(default="", max_length=MAX_RESPONSE_TEXT_CHARS)
    description: str = Field(default="", max_length=2000)
    date: Optional[str] = Field(default=None, max_length=32)
    meal: Optional[str] = Field(default=None, max_length=32)
    brand: Optional[str] = Field(default=None, max_length=255)


class ExtractResponse(BaseModel):
    items: list[FoodItemRecord]
    food_items: list[str]
    provisional: bool = True
    questions: list[str] = Field(default_factory=list)


class FoodLogRequest(BaseModel):
    text: str = Field(max_length=MAX_RESPONSE_TEXT_CHARS)
    log_water: bool = False


def _configure_logging(settings: Settings) -> None:
    secrets = [settings.api_token or "", settings.diary_password or ""]
    configure_app_logging(settings.log_level, settings.log_format, secrets)


def _normalization_error_response(exc: NormalizationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.to_dict()},
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application instance."""

    settings = get_settings()
    _configure_logging(settings)

    application = FastAPI(title="Food Log Normalizer", version=__version__)
    logger.debug("Application created with log level %s", settings.log_level)

    if settings.log_requests:
        access_logger = logging.getLogger("foodlog.access")

        @application.middleware("http")
        async def log_request_response(request: Request, call_next):
            """Log request/response details without leaking sensitive data."""

            request_id = request.headers.get("X-Request-ID") or uuid4().hex
            request.state.request_id = request_id
            start = perf_counter()
            path = request.url.path
            method = request.method
            try:
                response: Response = await call_next(request)
            except Exception:
                duration_ms = (perf_counter() - start) * 1000
                access_logger.exception(
                    "HTTP %s %s status=500 duration_ms=%.2f",
                    method,
                    path,
                    duration_ms,
                    extra={"request_id": request_id},
                )
                metrics.REQUEST_COUNT.labels(method=method, path=path, status="500").inc()
                metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(
                    duration_ms / 1000.0
                )
                raise

            duration_ms = (perf_counter() - start) * 1000
            response.headers.setdefault("X-Request-ID", request_id)
            access_logger.info(
                "HTTP %s %s status=%s duration_ms=%.2f",
                method,
                path,
                response.status_code,
                duration_ms,
                extra={"request_id": request_id},
            )
            metrics.REQUEST_COUNT.labels(
                method=method,
                path=path,
                status=str(response.status_code),
            ).inc()
            metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(
                duration_ms / 1000.0
            )
            return response

    @application.get("/health", summary="Liveness probe")
    def health() -> dict[str, Any]:
        return {"status": "ok", "version": __version__}

    @application.get("/metrics", include_in_schema=False)
    def metrics_endpoint() -> Response:
        payload = generate_latest()
        return Response(content=payload, media_type=CONTENT_TYPE_LATEST)

    @application.post(
        "/normalize",
        response_model=NormalizeResponse,
        summary="Strictly validate and normalize a model response",
    )
    def normalize_endpoint(
        payload: NormalizeRequest,
        auth: None = Depends(deps.require_api_token),
        normalizer: deps.StrictNormalizer = Depends(deps.get_strict_normalizer),
    ):
        try:
            records = normalizer(payload.text)
        except NormalizationError as exc:
            logger.warning("Normalization rejected response: %s", exc)
            metrics.NORMALIZATIONS.labels(mode="strict", result="rejected").inc()
            return _normalization_error_response(exc)

        metrics.NORMALIZATIONS.labels(mode="strict", result="ok").inc()
        return NormalizeResponse(
            text=serialize_items(records),
            food_items=to_food_items(records),
            items=records,
        )

    @application.post(
        "/extract",
        response_model=ExtractResponse,
        summary="Best-effort extraction producing provisional records",
    )
    def extract_endpoint(
        payload: ExtractRequest,
        auth: None = Depends(deps.require_api_token),
        extractor: deps.LenientExtractor = Depends(deps.get_lenient_extractor),
    ) -> ExtractResponse:
        records = extractor(
            payload.text,
            description=payload.description,
            entry_date=payload.date,
            meal=payload.meal,
            brand=payload.brand,
            icon_threshold=settings.icon_match_threshold,
        )
        metrics.NORMALIZATIONS.labels(mode="lenient", result="ok").inc()
        return ExtractResponse(
            items=records,
            food_items=to_food_items(records),
            questions=find_follow_up_questions(payload.text),
        )

    @application.post(
        "/food-log",
        response_model=FoodLogResult,
        summary="Normalize a model response and submit it to the food diary",
    )
    def food_log_endpoint(
        payload: FoodLogRequest,
        auth: None = Depends(deps.require_api_token),
        normalizer: deps.StrictNormalizer = Depends(deps.get_strict_normalizer),
        diary: Optional[FoodDiaryClient] = Depends(deps.get_food_diary_client),
    ):
        if diary is None:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Food diary service is not configured.",
            )
        try:
            records = normalizer(payload.text)
        except NormalizationError as exc:
            logger.warning("Refusing to log invalid response: %s", exc)
            metrics.NORMALIZATIONS.labels(mode="strict", result="rejected").inc()
            return _normalization_error_response(exc)
        metrics.NORMALIZATIONS.labels(mode="strict", result="ok").inc()

        try:
            result = diary.log_records(
                records,
                log_water=payload.log_water,
                allow_provisional=settings.allow_provisional_logging,
            )
        except FoodDiaryError as exc:
            metrics.DIARY_SUBMISSIONS.labels(result="error").inc()
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc

        metrics.DIARY_SUBMISSIONS.labels(result="ok" if result.success else "partial").inc()
        logger.info("Logged %s item(s) to food diary success=%s", len(records), result.success)
        return result

    return application


app = create_app()

__all__ = ["app", "create_app"]
