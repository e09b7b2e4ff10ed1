"""Increase/reduce suggestions against resolved thresholds."""

from collections.abc import Mapping

from nutri_balance.domain.nutrients import format_amount

UPPER_TOLERANCE = 1.2


def generate_suggestions(
    totals: Mapping[str, float], thresholds: Mapping[str, float]
) -> list[str]:
    """Return suggestions in the order of ``thresholds``.

    Totals from the threshold up to and including ``threshold * 1.2`` are
    within tolerance and produce no message.
    """
    suggestions = []
    for nutrient, threshold in thresholds.items():
        current = totals.get(nutrient, 0.0)
        if current < threshold:
            suggestions.append(_message("Increase", nutrient, threshold, current))
        elif current > threshold * UPPER_TOLERANCE:
            suggestions.append(_message("Reduce", nutrient, threshold, current))
    return suggestions


def _message(verb: str, nutrient: str, threshold: float, current: float) -> str:
    return (
        f"{verb} {nutrient} intake "
        f"(recommended: {format_amount(threshold)}, current: {current:.1f})"
    )
