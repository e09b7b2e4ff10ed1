"""Nutrition analysis workflow."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from nutri_balance.domain.foods import MealEntry
from nutri_balance.domain.nutrients import AgeGroup, NutrientTotals
from nutri_balance.domain.submissions import Submission
from nutri_balance.services.aggregation import compute_totals
from nutri_balance.services.catalog import FoodCatalogStore
from nutri_balance.services.ledger import SubmissionLedger
from nutri_balance.services.recommendations import (
    RecommendationStore,
    resolve_group,
    resolve_thresholds,
)
from nutri_balance.services.state import PersistenceError, StateService
from nutri_balance.services.suggestions import generate_suggestions

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisForm:
    """Personal details entered with the meals."""

    age: float | None
    weight: float | None
    height: float | None
    activity: str = "sedentary"

    def is_complete(self) -> bool:
        """Age, weight and height must all be present and positive."""
        return all(
            value is not None and value > 0
            for value in (self.age, self.weight, self.height)
        )


@dataclass(frozen=True)
class ChartRow:
    """Intake against recommendation for one nutrient."""

    name: str
    intake: float
    recommended: float


@dataclass(frozen=True)
class AnalysisResult:
    """Totals, thresholds and suggestions of a completed analysis."""

    group: AgeGroup
    totals: NutrientTotals
    thresholds: dict[str, float]
    suggestions: list[str]
    chart: list[ChartRow]
    submission: Submission


@dataclass
class AnalysisService:
    """Runs an analysis and records it in the ledger."""

    catalog: FoodCatalogStore
    recommendations: RecommendationStore
    ledger: SubmissionLedger
    state_service: StateService

    def analyze(
        self, form: AnalysisForm, meals: Sequence[MealEntry]
    ) -> AnalysisResult | None:
        """Analyze ``meals`` for ``form``.

        Returns None, computing and recording nothing, when the form is
        incomplete or there are no meals.
        """
        if not form.is_complete() or not meals:
            _logger.info(
                "Analysis refused: complete_form=%s meals=%s",
                form.is_complete(),
                len(meals),
            )
            return None

        totals = compute_totals(meals, self.catalog.items)
        submission = Submission(
            age=form.age,
            weight=form.weight,
            height=form.height,
            activity=form.activity,
            meals=tuple(meals),
            nutrients=dict(totals),
            date=datetime.now(tz=UTC).isoformat(),
        )
        previous = list(self.ledger.submissions)
        self.ledger.append(submission)
        try:
            self.state_service.save_ledger(self.ledger)
        except PersistenceError:
            self.ledger.submissions = previous
            raise

        thresholds = resolve_thresholds(self.recommendations.table, form.age)
        return AnalysisResult(
            group=resolve_group(form.age),
            totals=totals,
            thresholds=thresholds,
            suggestions=generate_suggestions(totals, thresholds),
            chart=[
                ChartRow(
                    name=nutrient,
                    intake=round(totals[nutrient], 1),
                    recommended=threshold,
                )
                for nutrient, threshold in thresholds.items()
            ],
            submission=submission,
        )
