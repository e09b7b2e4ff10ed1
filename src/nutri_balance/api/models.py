"""Request models for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field

from nutri_balance.domain.foods import FoodItem, MealEntry


class MealEntryPayload(BaseModel):
    """A food name with a portion multiplier."""

    food: str
    portion: float = Field(gt=0, allow_inf_nan=False)

    def to_entry(self) -> MealEntry:
        return MealEntry(food=self.food, portion=self.portion)


class AnalysisRequest(BaseModel):
    """Form submitted for a nutrition analysis."""

    age: float | None = None
    weight: float | None = None
    height: float | None = None
    activity: str = "sedentary"
    meals: list[MealEntryPayload] = Field(default_factory=list)


class SearchRequest(BaseModel):
    """Catalog search query."""

    query: str = ""


class FoodPayload(BaseModel):
    """Food values for a new catalog entry."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    calories: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    protein: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    fat: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    carbs: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    fiber: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    vitamin_c: float = Field(
        default=0.0, ge=0, allow_inf_nan=False, alias="vitaminC"
    )

    def to_item(self) -> FoodItem:
        return FoodItem(
            name=self.name,
            calories=self.calories,
            protein=self.protein,
            fat=self.fat,
            carbs=self.carbs,
            fiber=self.fiber,
            vitamin_c=self.vitamin_c,
        )


class FoodFieldUpdate(BaseModel):
    """Single-field edit of a catalog entry."""

    field: str
    value: str | float


class ThresholdUpdate(BaseModel):
    """New value for one threshold cell."""

    value: float = Field(ge=0, allow_inf_nan=False)
