"""Admin service for thresholds and submission history."""

from dataclasses import dataclass

from nutri_balance.services.ledger import SubmissionLedger
from nutri_balance.services.recommendations import RecommendationStore
from nutri_balance.services.state import PersistenceError, StateService

EXPORT_FILENAME = "nutri_submissions.csv"


@dataclass
class AdminService:
    """Service for the admin panel."""

    recommendations: RecommendationStore
    ledger: SubmissionLedger
    state_service: StateService

    def get_recommendations(self) -> dict[str, dict[str, float]]:
        return self.recommendations.to_state()

    def update_threshold(self, nutrient: str, group: str, value: float) -> None:
        """Edit one threshold cell and persist the table."""
        previous = self.recommendations.to_state()
        self.recommendations.edit_threshold(nutrient, group, value)
        try:
            self.state_service.save_recommendations(self.recommendations)
        except PersistenceError:
            self.recommendations.table = previous
            raise

    def list_submissions(self) -> list[dict[str, object]]:
        """Return submissions with display summaries, oldest first."""
        return [
            {
                **submission.to_dict(),
                "meals_summary": submission.meals_summary(),
                "nutrients_summary": submission.nutrients_summary(),
            }
            for submission in self.ledger.submissions
        ]

    def export_csv(self) -> str:
        return self.ledger.to_csv()
