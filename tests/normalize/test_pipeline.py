"""End-to-end tests for the strict normalization pipeline."""

from __future__ import annotations

import pytest

from foodlog.normalize import (
    EnumViolationError,
    MissingFieldError,
    StructuralError,
    UnitResolutionError,
    normalize_items,
    normalize_response,
    serialize_items,
)


def test_canonical_text_round_trips(canonical_batch):
    assert serialize_items(normalize_items(canonical_batch)) == canonical_batch
    assert normalize_response(canonical_batch) == canonical_batch


def test_normalization_is_idempotent(make_block):
    messy = "\n\n".join(
        [
            make_block(**{"Date": "3-4-2025", "Serving Size": "1 2 serving", "Calories": "1,250.50"}),
            make_block(**{"Serving Size": "3 tbsp", "Hydration": "8 fl oz"}),
        ]
    )
    once = normalize_response(messy)
    assert normalize_response(once) == once
    assert "Serving Size: 0.5 serving" in once
    assert "Calories: 1250.5" in once
    assert "Date: 03/04" in once


def test_mixed_batch_keeps_order_and_optional_hydration(make_block):
    beverage = make_block(
        **{
            "Food Name": "Orange Juice",
            "Icon": "Orange Juice",
            "Serving Size": "1 fl oz",
            "Hydration": "1 fluid ounces",
        }
    )
    food = make_block(**{"Food Name": "Toast", "Icon": "Toast", "Serving Size": "2 slices"})

    output = normalize_response(f"{beverage}\n\n\n{food}\n")
    first, second = output.split("\n\n")

    assert first.startswith("Food Name: Orange Juice\n")
    assert first.splitlines()[-1] == "Hydration: 1 fluid ounce"
    assert "Serving Size: 1 fluid ounce" in first
    assert second.startswith("Food Name: Toast\n")
    assert "Hydration" not in second
    assert second.splitlines()[-1] == "Protein (g): 5"


def test_output_field_order_is_canonical(make_block):
    block = make_block()
    shuffled = "\n".join(reversed(block.split("\n")))
    assert normalize_response(shuffled) == block


def test_empty_input_is_structural_error():
    with pytest.raises(StructuralError) as excinfo:
        normalize_response(" \n\n ")
    assert str(excinfo.value) == "No items found."


def test_missing_field_reports_item_index_in_batch(make_block):
    batch = "\n\n".join([make_block(), make_block(), make_block(**{"Protein (g)": None})])
    with pytest.raises(MissingFieldError) as excinfo:
        normalize_response(batch)
    assert excinfo.value.field == "Protein (g)"
    assert excinfo.value.item_index == 3
    assert str(excinfo.value) == 'Missing "Protein (g)" in item 3.'


def test_batch_fails_fast_on_second_item(make_block):
    batch = "\n\n".join([make_block(), make_block(Icon="Flying Saucer"), make_block(Meal="brunch")])
    with pytest.raises(EnumViolationError) as excinfo:
        normalize_items(batch)
    assert excinfo.value.item_index == 2
    assert excinfo.value.field == "Icon"


def test_meal_outside_vocabulary(make_block):
    with pytest.raises(EnumViolationError) as excinfo:
        normalize_response(make_block(Meal="brunch"))
    assert excinfo.value.item_index == 1


def test_unknown_unit_rejected(make_block):
    with pytest.raises(UnitResolutionError):
        normalize_response(make_block(**{"Serving Size": "2 bowls"}))


def test_unexpected_field_rejected(make_block):
    with pytest.raises(StructuralError) as excinfo:
        normalize_response(make_block() + "\nNotes: tasty")
    assert excinfo.value.item_index == 1


def test_fractional_amounts_round_trip_in_plural(make_block):
    block = make_block(**{"Serving Size": "0.5 cups", "Hydration": "0.5 fluid ounces"})
    assert normalize_response(block) == block


def test_fractional_serving_stays_singular(make_block):
    output = normalize_response(make_block(**{"Serving Size": "0.25 servings"}))
    assert "Serving Size: 0.25 serving\n" in output
