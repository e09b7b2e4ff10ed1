"""Daily recommendation defaults."""

RecommendationTable = dict[str, dict[str, float]]

DEFAULT_RECOMMENDATIONS: RecommendationTable = {
    "calories": {"adult": 2000.0, "child": 1600.0},
    "protein": {"adult": 50.0, "child": 30.0},
    "fat": {"adult": 70.0, "child": 50.0},
    "carbs": {"adult": 260.0, "child": 130.0},
    "fiber": {"adult": 30.0, "child": 20.0},
    "vitaminC": {"adult": 90.0, "child": 50.0},
}
