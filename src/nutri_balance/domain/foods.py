"""Domain models for foods and meal entries."""

from dataclasses import dataclass

from nutri_balance.domain.nutrients import NUTRIENT_ATTRIBUTES, TRACKED_NUTRIENTS


@dataclass(frozen=True)
class FoodItem:
    """Nutrient amounts for one portion unit of a named food."""

    name: str = ""
    calories: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbs: float = 0.0
    fiber: float = 0.0
    vitamin_c: float = 0.0

    def amount(self, nutrient: str) -> float:
        """Return the amount of a tracked nutrient."""
        return getattr(self, NUTRIENT_ATTRIBUTES[nutrient])

    def to_dict(self) -> dict[str, object]:
        """Serialize using nutrient keys."""
        return {
            "name": self.name,
            **{nutrient: self.amount(nutrient) for nutrient in TRACKED_NUTRIENTS},
        }

    @classmethod
    def from_dict(cls, row: dict[str, object]) -> "FoodItem":
        """Parse a serialized food, defaulting missing nutrients to zero."""
        amounts = {
            NUTRIENT_ATTRIBUTES[nutrient]: float(row.get(nutrient) or 0.0)
            for nutrient in TRACKED_NUTRIENTS
        }
        return cls(name=str(row.get("name") or ""), **amounts)


@dataclass(frozen=True)
class MealEntry:
    """A portion of a catalog food, referenced by name."""

    food: str
    portion: float

    def to_dict(self) -> dict[str, object]:
        return {"food": self.food, "portion": self.portion}

    @classmethod
    def from_dict(cls, row: dict[str, object]) -> "MealEntry":
        return cls(food=str(row.get("food", "")), portion=float(row.get("portion", 0)))


DEFAULT_FOODS: tuple[FoodItem, ...] = (
    FoodItem("Apple", 52, 0.3, 0.2, 14, 2.4, 4.6),
    FoodItem("Chicken Breast", 165, 31, 3.6, 0, 0, 0),
    FoodItem("Broccoli", 55, 3.7, 0.6, 11, 3.8, 89.2),
    FoodItem("Rice", 130, 2.7, 0.3, 28, 0.4, 0),
    FoodItem("Egg", 68, 6.3, 4.8, 0.6, 0, 0),
)
