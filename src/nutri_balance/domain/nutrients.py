"""Tracked nutrients and age groups."""

from typing import Literal

AgeGroup = Literal["child", "adult"]

AGE_GROUPS: tuple[AgeGroup, ...] = ("adult", "child")

TRACKED_NUTRIENTS: tuple[str, ...] = (
    "calories",
    "protein",
    "fat",
    "carbs",
    "fiber",
    "vitaminC",
)

# Nutrient key -> FoodItem attribute.
NUTRIENT_ATTRIBUTES: dict[str, str] = {
    "calories": "calories",
    "protein": "protein",
    "fat": "fat",
    "carbs": "carbs",
    "fiber": "fiber",
    "vitaminC": "vitamin_c",
}

NutrientTotals = dict[str, float]


def empty_totals() -> NutrientTotals:
    """Return a totals mapping with every tracked nutrient at zero."""
    return {nutrient: 0.0 for nutrient in TRACKED_NUTRIENTS}


def format_amount(value: float) -> str:
    """Render whole numbers without a trailing ``.0``."""
    return str(int(value)) if float(value).is_integer() else str(value)
