"""Domain models for completed analyses."""

from dataclasses import dataclass

from nutri_balance.domain.foods import MealEntry
from nutri_balance.domain.nutrients import NutrientTotals, format_amount


@dataclass(frozen=True)
class Submission:
    """Inputs and results of one completed analysis."""

    age: float
    weight: float
    height: float
    activity: str
    meals: tuple[MealEntry, ...]
    nutrients: NutrientTotals
    date: str

    def to_dict(self) -> dict[str, object]:
        """Serialize to the persisted record shape."""
        return {
            "age": self.age,
            "weight": self.weight,
            "height": self.height,
            "activity": self.activity,
            "meals": [meal.to_dict() for meal in self.meals],
            "nutrients": dict(self.nutrients),
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, row: dict[str, object]) -> "Submission":
        meals = row.get("meals") or []
        nutrients = row.get("nutrients") or {}
        return cls(
            age=float(row["age"]),
            weight=float(row["weight"]),
            height=float(row["height"]),
            activity=str(row.get("activity", "")),
            meals=tuple(MealEntry.from_dict(meal) for meal in meals),
            nutrients={key: float(value) for key, value in nutrients.items()},
            date=str(row.get("date", "")),
        )

    def meals_summary(self) -> str:
        """Format meals as ``Apple (2), Egg (1)``."""
        return ", ".join(
            f"{meal.food} ({format_amount(meal.portion)})" for meal in self.meals
        )

    def nutrients_summary(self) -> str:
        """Format totals as ``calories: 172.0, protein: 6.9``."""
        return ", ".join(
            f"{nutrient}: {value:.1f}" for nutrient, value in self.nutrients.items()
        )
