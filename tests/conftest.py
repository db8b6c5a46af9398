"""Shared pytest fixtures for the food-log test suite."""

from __future__ import annotations

import os
from typing import Callable, Dict, Generator, Optional

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from foodlog.config import get_settings
from foodlog.server.app import create_app

LATTE_BLOCK = """Food Name: Iced Latte
Date: 03/14
Meal: Breakfast
Brand: Starbucks
Icon: Latte
Serving Size: 16 fluid ounces
Calories: 190
Fat (g): 7
Saturated Fat (g): 4.5
Cholesterol (mg): 30
Sodium (mg): 150
Carbs (g): 19
Fiber (g): 0
Sugar (g): 17
Protein (g): 12
Hydration: 16 fluid ounces"""

MUFFIN_BLOCK = """Food Name: Blueberry Muffin
Date: 03/14
Meal: Breakfast
Brand: Starbucks
Icon: Muffin
Serving Size: 1 each
Calories: 360
Fat (g): 15
Saturated Fat (g): 3
Cholesterol (mg): 50.5
Sodium (mg): 270
Carbs (g): 52
Fiber (g): 1.25
Sugar (g): 29
Protein (g): 5"""

_DEFAULT_FIELDS: Dict[str, str] = dict(
    line.split(": ", 1) for line in MUFFIN_BLOCK.split("\n")
)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep developer .env files and FOODLOG_* variables out of the tests."""

    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("FOODLOG_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def app() -> Generator[FastAPI, None, None]:
    """Create a new FastAPI app instance for each test and reset overrides."""

    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app) -> TestClient:
    """Return a test client bound to the FastAPI app."""

    return TestClient(app)


@pytest.fixture()
def canonical_batch() -> str:
    """Two canonical items, the first a beverage with a hydration line."""

    return f"{LATTE_BLOCK}\n\n{MUFFIN_BLOCK}"


@pytest.fixture()
def make_block() -> Callable[..., str]:
    """Build a block from the muffin defaults; ``None`` drops a line.

    Keyword arguments use the diary labels, e.g. ``make_block(**{"Meal": "Lunch"})``.
    """

    def _build(overrides: Optional[Dict[str, Optional[str]]] = None, **labels: Optional[str]) -> str:
        fields: Dict[str, Optional[str]] = dict(_DEFAULT_FIELDS)
        fields.update(overrides or {})
        fields.update(labels)
        return "\n".join(f"{key}: {value}" for key, value in fields.items() if value is not None)

    return _build
