"""Nutrient aggregation over meal entries."""

from collections.abc import Iterable, Sequence

from nutri_balance.domain.foods import FoodItem, MealEntry
from nutri_balance.domain.nutrients import (
    TRACKED_NUTRIENTS,
    NutrientTotals,
    empty_totals,
)


def compute_totals(
    meals: Iterable[MealEntry], catalog: Sequence[FoodItem]
) -> NutrientTotals:
    """Sum ``amount * portion`` for every tracked nutrient, in input order.

    Entries naming a food missing from ``catalog`` contribute nothing.
    """
    totals = empty_totals()
    for meal in meals:
        item = _first_match(catalog, meal.food)
        if item is None:
            continue
        for nutrient in TRACKED_NUTRIENTS:
            totals[nutrient] += item.amount(nutrient) * meal.portion
    return totals


def _first_match(catalog: Sequence[FoodItem], name: str) -> FoodItem | None:
    return next((item for item in catalog if item.name == name), None)
