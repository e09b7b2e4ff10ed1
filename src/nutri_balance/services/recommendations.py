"""Recommendation thresholds and age-group resolution."""

import logging
from copy import deepcopy
from dataclasses import dataclass, field

from nutri_balance.domain.errors import UnknownGroupError, UnknownNutrientError
from nutri_balance.domain.nutrients import AGE_GROUPS, AgeGroup
from nutri_balance.domain.recommendations import (
    DEFAULT_RECOMMENDATIONS,
    RecommendationTable,
)

ADULT_AGE = 18

_logger = logging.getLogger(__name__)


@dataclass
class RecommendationStore:
    """Per-nutrient adult/child thresholds with a fixed key set."""

    table: RecommendationTable = field(
        default_factory=lambda: deepcopy(DEFAULT_RECOMMENDATIONS)
    )

    def edit_threshold(self, nutrient: str, group: str, value: float) -> None:
        """Set one threshold cell. Unknown nutrients or groups are rejected."""
        if nutrient not in self.table:
            raise UnknownNutrientError(nutrient)
        if group not in AGE_GROUPS:
            raise UnknownGroupError(group)
        self.table[nutrient][group] = float(value)
        _logger.info("Threshold updated: %s/%s=%s", nutrient, group, value)

    def to_state(self) -> RecommendationTable:
        return deepcopy(self.table)

    @classmethod
    def from_state(cls, table: RecommendationTable) -> "RecommendationStore":
        """Load persisted thresholds onto the default key set.

        Keys outside the defaults are ignored and missing keys keep their
        default cells.
        """
        store = cls()
        for nutrient, cells in table.items():
            if nutrient not in store.table:
                continue
            for group in AGE_GROUPS:
                if group in cells:
                    store.table[nutrient][group] = float(cells[group])
        return store


def resolve_group(age: float) -> AgeGroup:
    """Return ``child`` below 18 years and ``adult`` otherwise."""
    return "child" if age < ADULT_AGE else "adult"


def resolve_thresholds(table: RecommendationTable, age: float) -> dict[str, float]:
    """Select each nutrient's threshold for the age group of ``age``."""
    group = resolve_group(age)
    return {nutrient: cells[group] for nutrient, cells in table.items()}
