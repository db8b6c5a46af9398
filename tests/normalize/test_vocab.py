"""Tests for the icon and serving-unit vocabularies."""

from __future__ import annotations

import pytest

from foodlog.normalize.vocab import (
    DEFAULT_ICON,
    ICONS,
    UNIT_ALIASES,
    UNIT_GROUPS,
    pluralize_unit,
    resolve_unit,
    unit_kind,
)


def test_unit_groups_are_disjoint():
    seen: set[str] = set()
    for units in UNIT_GROUPS.values():
        assert seen.isdisjoint(units)
        seen.update(units)


def test_every_alias_targets_a_grouped_unit():
    for alias, canonical in UNIT_ALIASES.items():
        assert alias == alias.lower()
        assert unit_kind(canonical) is not None, alias


def test_icon_vocabulary_contains_fallback():
    assert DEFAULT_ICON in ICONS
    assert "Mixed Drink, Martini" in ICONS
    assert "mixed drink, martini" not in ICONS


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("tbsp", "tablespoons"),
        ("Tablespoon", "tablespoons"),
        ("mL", "milliliters"),
        ("fl oz", "fluid ounce"),
        ("Fluid  Ounces", "fluid ounce"),
        ("slices", "slice"),
        ("each", "each"),
        ("lbs", "pounds"),
        ("dry cups", "dry cup"),
        ("boxs", "box"),
    ],
)
def test_resolve_unit(raw, expected):
    assert resolve_unit(raw) == expected


@pytest.mark.parametrize("raw", ["bowls", "handful", ""])
def test_resolve_unit_unknown(raw):
    assert resolve_unit(raw) is None


@pytest.mark.parametrize(
    ("unit", "amount", "expected"),
    [
        ("tablespoons", 1, "tablespoon"),
        ("tablespoons", 2, "tablespoons"),
        ("each", 1, "each"),
        ("each", 3, "each"),
        ("fluid ounce", 1, "fluid ounce"),
        ("fluid ounce", 8, "fluid ounces"),
        ("serving", 0.5, "serving"),
        ("serving", 1, "serving"),
        ("serving", 2, "servings"),
        ("cups", 0.5, "cups"),
        ("cups", 0.333, "cups"),
        ("fluid ounce", 0.5, "fluid ounces"),
        ("slice", 2, "slices"),
        ("box", 2, "boxs"),
    ],
)
def test_pluralize_unit(unit, amount, expected):
    assert pluralize_unit(unit, amount) == expected
