from __future__ import annotations

import datetime

from foodlog.normalize import extract_best_effort, find_follow_up_questions, serialize
from foodlog.normalize.lenient import (
    coerce_hydration,
    coerce_icon,
    coerce_meal,
    coerce_serving,
    first_number,
)

TODAY = datetime.date(2025, 1, 2)

CHATTY_RESPONSE = """Here is my estimate:

**Food Name:** Chicken Burrito
- Calories: ~650 kcal
- Protein: 35 g
- Total Fat: 1,200
- Serving Size: 1 burrito
- Icon: burrito

Would you like me to add guacamole?
"""


def test_extracts_markdown_response():
    records = extract_best_effort(CHATTY_RESPONSE, entry_date="3/5", meal="lunch", today=TODAY)

    assert len(records) == 1
    record = records[0]
    assert record.provisional is True
    assert record.food_name == "Chicken Burrito"
    assert record.date == "03/05"
    assert record.meal == "Lunch"
    assert record.brand == ""
    assert record.icon == "Burrito"
    assert record.calories == 650
    assert record.protein_g == 35
    assert record.fat_g == 1200
    assert record.sugar_g == 0
    assert (record.serving_amount, record.serving_unit) == (1.0, "each")
    assert record.hydration_fluid_oz is None


def test_each_food_name_starts_a_new_item():
    text = "```\nFood Name: Tea\nHydration: 8 fl oz\nFood Name: Scone\nMeal: dinner\n```"
    records = extract_best_effort(text, today=TODAY)

    assert [record.food_name for record in records] == ["Tea", "Scone"]
    assert records[0].hydration_fluid_oz == 8
    assert records[0].meal == "Snacks"
    assert records[1].meal == "Dinner"
    assert all(record.date == "01/02" for record in records)


def test_placeholder_when_nothing_recognised():
    records = extract_best_effort(
        "I need more details. What size was it?",
        description="big   bowl of pho",
        brand="Pho 99",
        today=TODAY,
    )

    assert len(records) == 1
    placeholder = records[0]
    assert placeholder.provisional is True
    assert placeholder.food_name == "big bowl of pho"
    assert placeholder.brand == "Pho 99"
    assert placeholder.icon == "Default"
    assert placeholder.meal == "Snacks"
    assert placeholder.date == "01/02"
    assert placeholder.calories == 0


def test_placeholder_without_description():
    records = extract_best_effort("", today=TODAY)
    assert records[0].food_name == "Unknown Food"


def test_never_raises_on_invalid_values():
    text = "Food Name: Mystery\nServing Size: lots\nCalories: unknown\nIcon: zzqx\nDate: 2024-03-14"
    record = extract_best_effort(text, entry_date="not a date", today=TODAY)[0]

    assert record.icon == "Default"
    assert record.calories == 0
    assert (record.serving_amount, record.serving_unit) == (1.0, "each")
    assert record.date == "01/02"


def test_first_number():
    assert first_number("~250 kcal") == 250
    assert first_number("about 1 1/2 cups") == 1.5
    assert first_number("none") == 0
    assert first_number("") == 0


def test_coerce_icon():
    assert coerce_icon("Latte") == "Latte"
    assert coerce_icon("hamburger") == "Hamburger"
    assert coerce_icon("Muffins") == "Muffin"
    assert coerce_icon("zzqx") == "Default"
    assert coerce_icon(None) == "Default"


def test_coerce_meal():
    assert coerce_meal("breakfast") == "Breakfast"
    assert coerce_meal("snack") == "Snacks"
    assert coerce_meal("brunch", "Dinner") == "Dinner"
    assert coerce_meal(None) == "Snacks"


def test_coerce_serving():
    assert coerce_serving("3 tbsp") == (3.0, "tablespoons")
    assert coerce_serving("1 2 serving") == (0.5, "serving")
    assert coerce_serving("2 bowls") == (2.0, "each")
    assert coerce_serving(None) == (1.0, "each")
    assert coerce_serving("about 0.0001") == (1.0, "each")
    assert coerce_serving("roughly 2.34567") == (2.346, "each")


def test_coerce_hydration():
    assert coerce_hydration("12 fl oz") == 12
    assert coerce_hydration("8") == 8
    assert coerce_hydration("12 oz") is None
    assert coerce_hydration("0 fluid ounces") is None
    assert coerce_hydration("") is None


def test_follow_up_questions():
    questions = find_follow_up_questions(CHATTY_RESPONSE + "\n- Was it a large?\nBrand: Which one?")
    assert questions == ["Would you like me to add guacamole?", "Was it a large?"]


def test_tiny_serving_serializes_to_strict_accepted_text():
    record = extract_best_effort("Food Name: Crumb\nServing Size: about 0.0001", today=TODAY)[0]
    assert serialize(record).splitlines()[5] == "Serving Size: 1 each"
