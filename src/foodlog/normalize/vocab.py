"""Closed vocabularies: diary field labels, icon names, and serving units."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

MEAL_FIELD = "Meal"
HYDRATION_FIELD = "Hydration"
SERVING_FIELD = "Serving Size"

# Canonical line order of a diary block.
REQUIRED_FIELDS: tuple[str, ...] = (
    "Food Name",
    "Date",
    "Meal",
    "Brand",
    "Icon",
    "Serving Size",
    "Calories",
    "Fat (g)",
    "Saturated Fat (g)",
    "Cholesterol (mg)",
    "Sodium (mg)",
    "Carbs (g)",
    "Fiber (g)",
    "Sugar (g)",
    "Protein (g)",
)
OPTIONAL_FIELDS: tuple[str, ...] = (HYDRATION_FIELD,)
KNOWN_FIELDS = frozenset(REQUIRED_FIELDS + OPTIONAL_FIELDS)

# Nutrition labels and the FoodItemRecord attribute each one populates.
NUTRITION_FIELDS: Mapping[str, str] = MappingProxyType(
    {
        "Calories": "calories",
        "Fat (g)": "fat_g",
        "Saturated Fat (g)": "sat_fat_g",
        "Cholesterol (mg)": "cholesterol_mg",
        "Sodium (mg)": "sodium_mg",
        "Carbs (g)": "carbs_g",
        "Fiber (g)": "fiber_g",
        "Sugar (g)": "sugar_g",
        "Protein (g)": "protein_g",
    }
)

DEFAULT_ICON = "Default"

ICONS = frozenset(
    {
        "Alcohol",
        "Alcohol, White",
        "Almond",
        "Almond Butter",
        "Apple",
        "Apple Sauce",
        "Apple, Gala",
        "Apple, Granny Smith",
        "Apple, Honey Crisp",
        "Apple, Macintosh",
        "Artichoke",
        "Asparagus",
        "Avocado",
        "Bacon",
        "Bagel",
        "Bagel, Blueberry",
        "Bagel, Chocolate Chip",
        "Bagel, Sesame",
        "Baguette",
        "Baked Beans",
        "Balsamic Vinaigrette",
        "Bamboo",
        "Banana",
        "Banana Pepper",
        "Bar",
        "Bean, Black",
        "Bean, Green",
        "Bean, Red",
        "Bean, White",
        "Beef",
        "Beer",
        "BeerDark",
        "Beet",
        "Bell Pepper, Green",
        "Bell Pepper, Red",
        "Bell Pepper, Yellow",
        "Biscuit",
        "Biscuit Cracker",
        "Blackberry",
        "Blueberry",
        "Breadsticks",
        "Breakfast",
        "Breakfast Sandwich",
        "Broccoli",
        "Brownie",
        "Brussels Sprout",
        "Burrito",
        "Butter",
        "Cabbage",
        "Cake",
        "CakeDark",
        "CakeWhite",
        "CakeWhiteDark",
        "Calamari",
        "Calories",
        "Can",
        "Candy",
        "Candy Bar",
        "Carrot",
        "Carrots",
        "Cashew",
        "Casserole",
        "Cauliflower",
        "Celery",
        "Cereal",
        "Cereal Bar",
        "CerealCheerios",
        "CerealCornFlakes",
        "CerealFruitLoops",
        "Cheese",
        "CheeseAmerican",
        "CheeseBlue",
        "CheeseBrie",
        "Cheeseburger",
        "Cheesecake",
        "CheeseCheddar",
        "CheeseGouda",
        "CheesePepperjack",
        "Cherry",
        "CherryMaraschino",
        "Chestnut",
        "Chicken",
        "Chicken Tenders",
        "ChickenGrilled",
        "ChickenWing",
        "Chickpea",
        "Chocolate",
        "Chocolate Chip",
        "Chocolate Chips",
        "ChocolateDark",
        "Churro",
        "Cider",
        "Cinnamon Roll",
        "Clam",
        "Coconut",
        "Coffee",
        "Coleslaw",
        "Com",
        "Combread",
        "Cookie",
        "Cookie, Christmas",
        "Cookie, Molasses",
        "Cookie, Red Velvet",
        "Cookie, Sugar",
        "Cottage Cheese",
        "Crab",
        "Cracker",
        "Cranberry",
        "Cream",
        "Croissant",
        "Crouton",
        "Crumpet",
        "Cucumber",
        "Cupcake",
        "Cupcake, Carrot",
        "Cupcake, Vanilla",
        "Curry",
        "Date",
        "Default",
        "Deli Meat",
        "Dinner Roll",
        "Dip, Green",
        "Dip, Red",
        "Dish",
        "Donut",
        "Donut, Chocolate Iced",
        "Donut, Strawberry Iced",
        "DoubleCheeseburger",
        "Dressing, Ranch",
        "Dumpling",
        "Eclair",
        "Egg",
        "Egg McMuffin",
        "Egg Roll",
        "Eggplant",
        "Enchilada",
        "Falafel",
        "Fern",
        "Fig",
        "Filbert",
        "Fish",
        "Food, Can",
        "Fowl",
        "French Fries",
        "French Toast",
        "Fritter",
        "Frosting, Chocolate",
        "Frosting, Yellow",
        "Fruit Cocktail",
        "Fruit Leather",
        "FruitCake",
        "Game",
        "Garlic",
        "Gobo Root",
        "Gourd",
        "Graham Cracker",
        "Grain",
        "Grapefruit",
        "Grapes",
        "Grilled Cheese",
        "Guava",
        "Gummy Bear",
        "Hamburger",
        "Hamburger Bun",
        "Hamburger Patty",
        "Hamburger, Double",
        "Hash",
        "Hazelnut",
        "Honey",
        "Horseradish",
        "Hot Dog",
        "Hot Dog Bun",
        "Hot Pot",
        "Ice Cream",
        "Ice Cream Bar",
        "Ice Cream Sandwich",
        "Ice Cream, Chocolate",
        "Ice Cream, Strawberry",
        "Iced Coffee",
        "Iced Tea",
        "Jam",
        "Jicama",
        "Juice",
        "Kale",
        "Kebab",
        "Ketchup",
        "Kiwi",
        "Lamb",
        "Lasagna",
        "Latte",
        "Leeks",
        "Lemon",
        "Lemonade",
        "Lime",
        "Liquid",
        "Lobster",
        "Mac And Cheese",
        "Macadamia",
        "Mango",
        "Marshmallow",
        "Mayonnaise",
        "Meatballs",
        "Melon",
        "Milk",
        "Milk Shake",
        "Milk Shake, Chocolate",
        "Milk Shake, Strawberry",
        "Mixed Drink",
        "Mixed Drink, Martini",
        "Mixed Nuts",
        "Muffin",
        "Mushroom",
        "Mustard",
        "Nigiri Sushi",
        "Oatmeal",
        "Octopus",
        "Oil",
        "Okra",
        "Olive, Black",
        "Olive, Green",
        "Omelette",
        "Onion",
        "Orange",
        "Orange Chicken",
        "Orange Juice",
        "Pancakes",
        "Papaya",
        "Parfait",
        "Parsley",
        "Parsnip",
        "Pasta",
        "Pastry",
        "Patty Sandwich",
        "Pavlova",
        "Peach",
        "Peanut",
        "Peanut Butter",
        "Pear",
        "Peas",
        "Pecan",
        "Peppers",
        "Persimmon",
        "Pickle",
        "Pie",
        "Pie, Apple",
        "Pill",
        "Pine Nut",
        "Pineapple",
        "Pistachio",
        "Pita Sandwich",
        "Pizza",
        "Plum",
        "Pocky",
        "Pomegranate",
        "Popcom",
        "Popsicle",
        "Pork",
        "Pork Chop",
        "Pot Pie",
        "Potato",
        "Potato Chip",
        "Potato Salad",
        "Powdered Drink",
        "Prawn",
        "Pretzel",
        "Prune",
        "Pudding",
        "Pumpkin",
        "Quesadilla",
        "Quiche",
        "Radish",
        "Raisin",
        "Raspberry",
        "Ravioli",
        "Recipe",
        "Relish",
        "Rhubarb",
        "Ribs",
        "Rice",
        "Rice Cake",
        "Roll",
        "Romaine Lettuce",
        "Salad",
        "Salad Dressing, Balsamic",
        "Salt",
        "Sandwich",
        "Sauce",
        "Sausage",
        "Seaweed",
        "Seed",
        "Shallot",
        "Shrimp",
        "Smoothie",
        "Snack",
        "Snap Bean",
        "Soft Drink",
        "SoftServeChocolate",
        "SoftServeSwirl",
        "SoftServeVanilla",
        "Souffle",
        "Soup",
        "Sour Cream",
        "Soy Nut",
        "Soy Sauce",
        "Spice, Brown",
        "Spice, Green",
        "Spice, Red",
        "Spice, Yellow",
        "Spinach",
        "Spring Roll",
        "Sprouts",
        "Squash",
        "Squash, Spaghetti",
        "Starfruit",
        "Stew, Brown",
        "Stew, Yellow",
        "Stir Fry",
        "Stir Fry Noodles",
        "Strawberry",
        "Stuffing",
        "Sub Sandwich",
        "Sugar Cookie",
        "Sugar, Brown",
        "Sugar, White",
        "Sushi",
        "Syrup",
        "Taco",
        "Taro",
        "Tater Tots",
        "Tea",
        "Tempura",
        "Toast",
        "Toaster Pastry",
        "Tofu",
        "Tomato",
        "Tomato Soup",
        "Tortilla",
        "Tortilla Chip",
        "Tostada",
        "Turkey",
        "Turnip",
        "Turnover",
        "Vegetable",
        "Waffles",
        "Walnut",
        "Water",
        "Water Chestnut",
        "Watermelon",
        "White Bread",
        "Wine, Red",
        "Wine, White",
        "Wrap",
        "Yam",
        "Yogurt",
        "Zucchini",
    }
)

FLUID_OUNCE = "fluid ounce"
EACH = "each"
SERVING = "serving"

# Canonical lowercase serving units accepted by the diary, grouped by kind.
UNIT_GROUPS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "weight": ("grams", "kilograms", "micrograms", "milligrams", "ounces", "pounds"),
        "volume": (
            "cups",
            "dessertspoons",
            FLUID_OUNCE,
            "gallons",
            "imperial fluid ounces",
            "imperial pints",
            "imperial quarts",
            "liters",
            "metric cups",
            "milliliters",
            "pints",
            "quarts",
            "tablespoons",
            "teaspoons",
        ),
        "amount": (
            "bottle",
            "box",
            "can",
            "container",
            "cube",
            "dry cup",
            EACH,
            "jar",
            "package",
            "piece",
            "pot",
            "pouch",
            "punnet",
            "scoop",
            SERVING,
            "slice",
            "stick",
            "tablet",
        ),
    }
)


def _build_unit_aliases() -> Mapping[str, str]:
    aliases: dict[str, str] = {}

    def add(canonical: str, *synonyms: str) -> None:
        for form in (canonical, *synonyms):
            aliases[form.lower()] = canonical

    add("grams", "gram", "g", "gr")
    add("kilograms", "kilogram", "kg")
    add("micrograms", "microgram", "mcg", "µg", "ug")
    add("milligrams", "milligram", "mg")
    add("ounces", "ounce", "oz")
    add("pounds", "pound", "lb", "lbs")

    add("cups", "cup", "c")
    add("dessertspoons", "dessertspoon", "dsp")
    add(FLUID_OUNCE, "fluid ounces", "fl oz", "fl. oz", "fl. oz.", "fl oz.", "floz", "fluid-ounces", "fl-oz")
    add("gallons", "gallon", "gal")
    add("imperial fluid ounces", "imperial fluid ounce")
    add("imperial pints", "imperial pint")
    add("imperial quarts", "imperial quart")
    add("liters", "liter", "litres", "litre", "l", "ltr")
    add("metric cups", "metric cup")
    add("milliliters", "milliliter", "millilitres", "millilitre", "ml")
    add("pints", "pint", "pt")
    add("quarts", "quart", "qt")
    add("tablespoons", "tablespoon", "tbsp", "tbs")
    add("teaspoons", "teaspoon", "tsp")

    for unit in UNIT_GROUPS["amount"]:
        add(unit)
    add(EACH, "ea")
    add("piece", "pc", "pcs")
    add(SERVING, "portion")
    return MappingProxyType(aliases)


UNIT_ALIASES: Mapping[str, str] = _build_unit_aliases()

_UNIT_KIND: Mapping[str, str] = MappingProxyType(
    {unit: kind for kind, units in UNIT_GROUPS.items() for unit in units}
)


def unit_kind(canonical: str) -> Optional[str]:
    """Return ``weight``, ``volume`` or ``amount`` for a canonical unit."""

    return _UNIT_KIND.get(canonical)


def singularize(unit: str) -> str:
    if unit == EACH or not unit.endswith("s"):
        return unit
    return unit[:-1]


def resolve_unit(raw_unit: str) -> Optional[str]:
    """Map a unit as written by the model to its canonical form, or ``None``."""

    lowered = " ".join(raw_unit.lower().split())
    canonical = UNIT_ALIASES.get(lowered) or UNIT_ALIASES.get(singularize(lowered))
    if canonical is None or unit_kind(canonical) is None:
        return None
    return canonical


def pluralize_unit(canonical: str, amount: float) -> str:
    """Return the display form of ``canonical`` for ``amount``.

    Exactly one takes the singular (``1 tablespoon``), any other amount the
    plural (``0.5 cups``). ``each`` never changes and a fractional ``serving``
    stays singular (``0.5 serving``).
    """

    if canonical == EACH:
        return EACH
    if canonical == FLUID_OUNCE:
        return FLUID_OUNCE if amount == 1 else "fluid ounces"
    if canonical == SERVING and amount < 1:
        return SERVING
    if amount == 1:
        return singularize(canonical)
    return canonical if canonical.endswith("s") else f"{canonical}s"


__all__ = [
    "MEAL_FIELD",
    "HYDRATION_FIELD",
    "SERVING_FIELD",
    "REQUIRED_FIELDS",
    "OPTIONAL_FIELDS",
    "KNOWN_FIELDS",
    "NUTRITION_FIELDS",
    "DEFAULT_ICON",
    "ICONS",
    "FLUID_OUNCE",
    "EACH",
    "SERVING",
    "UNIT_GROUPS",
    "UNIT_ALIASES",
    "unit_kind",
    "singularize",
    "resolve_unit",
    "pluralize_unit",
]
