"""Persistence of catalog, thresholds and submissions as JSON blobs."""

import logging
from dataclasses import dataclass
from typing import Protocol

from nutri_balance.services.catalog import FoodCatalogStore
from nutri_balance.services.ledger import SubmissionLedger
from nutri_balance.services.recommendations import RecommendationStore

CATALOG_KEY = "nutri_foodDB"
RECOMMENDATIONS_KEY = "nutri_recommendations"
SUBMISSIONS_KEY = "nutri_submissions"

_logger = logging.getLogger(__name__)


class PersistenceError(RuntimeError):
    """Raised when stored state cannot be written."""


class StateRepository(Protocol):
    """Key-value storage for unversioned JSON blobs."""

    def load(self, key: str) -> object | None:
        """Return the stored blob for ``key``, if present."""

    def save(self, key: str, value: object) -> None:
        """Store ``value`` under ``key``, replacing any previous blob."""


@dataclass
class StateService:
    """Restores and saves the three stores independently.

    Saving is refused after a failed restore so that stores still holding
    defaults never overwrite the stored blobs.
    """

    repository: StateRepository
    writable: bool = True

    def restore(
        self,
        catalog: FoodCatalogStore,
        recommendations: RecommendationStore,
        ledger: SubmissionLedger,
    ) -> None:
        """Load stored blobs into the stores in place; absent blobs keep defaults."""
        try:
            foods = self.repository.load(CATALOG_KEY)
            table = self.repository.load(RECOMMENDATIONS_KEY)
            submissions = self.repository.load(SUBMISSIONS_KEY)
            restored_catalog = (
                FoodCatalogStore.from_state(foods) if isinstance(foods, list) else None
            )
            restored_table = (
                RecommendationStore.from_state(table)
                if isinstance(table, dict)
                else None
            )
            restored_ledger = (
                SubmissionLedger.from_state(submissions)
                if isinstance(submissions, list)
                else None
            )
        except Exception:
            self.writable = False
            raise
        self.writable = True
        if restored_catalog is not None:
            catalog.items = restored_catalog.items
        if restored_table is not None:
            recommendations.table = restored_table.table
        if restored_ledger is not None:
            ledger.submissions = restored_ledger.submissions

    def save_catalog(self, catalog: FoodCatalogStore) -> None:
        self._save(CATALOG_KEY, catalog.to_state())

    def save_recommendations(self, recommendations: RecommendationStore) -> None:
        self._save(RECOMMENDATIONS_KEY, recommendations.to_state())

    def save_ledger(self, ledger: SubmissionLedger) -> None:
        self._save(SUBMISSIONS_KEY, ledger.to_state())

    def _save(self, key: str, value: object) -> None:
        if not self.writable:
            raise PersistenceError("State was not restored; refusing to save")
        try:
            self.repository.save(key, value)
        except Exception as exc:
            _logger.exception("Failed to save state: %s", key)
            raise PersistenceError(f"Failed to save state: {key}") from exc
