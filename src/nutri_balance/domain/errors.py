"""Domain errors raised by store mutations."""


class CatalogError(ValueError):
    """Raised when a catalog edit is rejected."""


class UnknownFieldError(CatalogError):
    """Raised when editing a field a food item does not have."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Unknown food field: {field}")
        self.field = field


class UnknownNutrientError(ValueError):
    """Raised when a nutrient is outside the tracked set."""

    def __init__(self, nutrient: str) -> None:
        super().__init__(f"Unknown nutrient: {nutrient}")
        self.nutrient = nutrient


class UnknownGroupError(ValueError):
    """Raised when an age group is neither adult nor child."""

    def __init__(self, group: str) -> None:
        super().__init__(f"Unknown age group: {group}")
        self.group = group
