"""Catalog management and search-driven replacement."""

import logging
from dataclasses import dataclass

from nutri_balance.domain.foods import FoodItem
from nutri_balance.services.catalog import FoodCatalogStore
from nutri_balance.services.food_search import FoodSearchService
from nutri_balance.services.state import PersistenceError, StateService

NO_RESULTS_NOTICE = "No results found."

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchOutcome:
    """Result of a catalog search."""

    replaced: bool
    count: int
    notice: str | None = None


@dataclass
class FoodService:
    """Application service for catalog edits; each edit is persisted."""

    catalog: FoodCatalogStore
    search_service: FoodSearchService
    state_service: StateService

    def list_foods(self) -> list[FoodItem]:
        return list(self.catalog.items)

    def add_food(self, item: FoodItem | None = None) -> FoodItem:
        previous = list(self.catalog.items)
        added = self.catalog.add(item)
        self._commit(previous)
        return added

    def edit_food(self, index: int, field_name: str, value: object) -> FoodItem:
        previous = list(self.catalog.items)
        updated = self.catalog.edit_field(index, field_name, value)
        self._commit(previous)
        return updated

    def remove_food(self, index: int) -> FoodItem:
        previous = list(self.catalog.items)
        removed = self.catalog.remove(index)
        self._commit(previous)
        return removed

    async def search_and_replace(self, query: str) -> SearchOutcome | None:
        """Replace the catalog with search results.

        Returns None for a blank query. An empty or failed search leaves the
        catalog untouched and carries a notice instead.
        """
        if not query:
            return None
        results = await self.search_service.search(query)
        if not results:
            _logger.info("Catalog search returned nothing: query=%s", query)
            return SearchOutcome(replaced=False, count=0, notice=NO_RESULTS_NOTICE)
        previous = list(self.catalog.items)
        self.catalog.replace_all(results)
        self._commit(previous)
        return SearchOutcome(replaced=True, count=len(results))

    def _commit(self, previous: list[FoodItem]) -> None:
        """Persist the catalog, restoring ``previous`` if the save fails."""
        try:
            self.state_service.save_catalog(self.catalog)
        except PersistenceError:
            self.catalog.items = previous
            raise
