"""Food search backed by USDA FoodData Central."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from nutri_balance.adapters.fdc_client import FdcClient
from nutri_balance.domain.foods import FoodItem
from nutri_balance.services.cache import Cache

# FDC nutrient label (lower-cased) -> tracked nutrient key.
_NUTRIENT_LABELS = {
    "energy": "calories",
    "protein": "protein",
    "total lipid (fat)": "fat",
    "carbohydrate, by difference": "carbs",
    "fiber, total dietary": "fiber",
    "vitamin c, total ascorbic acid": "vitaminC",
}

# Used when a row carries an id but no label.
_NUTRIENT_IDS = {
    1008: "calories",
    1003: "protein",
    1004: "fat",
    1005: "carbs",
    1079: "fiber",
    1162: "vitaminC",
}

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class FoodSearchService:
    """Maps FDC search results onto catalog foods, with caching."""

    fdc_client: FdcClient
    cache: Cache
    page_size: int = 10
    search_ttl_seconds: int = 3600
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search(self, query: str) -> list[FoodItem]:
        """Return foods matching ``query``; failures yield an empty list."""
        cache_key = f"fdc:search:{query.lower()}:{self.page_size}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        try:
            payload = await self._call_with_retry(
                lambda: self.fdc_client.search_foods(query, page_size=self.page_size)
            )
            foods = [_parse_food(food) for food in payload.get("foods") or []]
        except Exception as exc:  # noqa: BLE001
            _logger.warning(
                "Food search failed: query=%s status=%s error=%s",
                query,
                _status_code_from_exception(exc),
                exc,
            )
            return []

        if foods:
            self.cache.set(cache_key, foods, ttl_seconds=self.search_ttl_seconds)
        _logger.info("Food search: query=%s results=%s", query, len(foods))
        return foods

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]"
    ) -> dict[str, object]:
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                if attempt > self.retry_attempts:
                    raise
                _logger.warning(
                    "Food search attempt %s/%s failed: %s",
                    attempt,
                    self.retry_attempts + 1,
                    exc,
                )
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _parse_food(food: dict[str, object]) -> FoodItem:
    amounts: dict[str, object] = {"name": food.get("description", "")}
    for nutrient in food.get("foodNutrients") or []:
        key = _nutrient_key(nutrient)
        if key is None:
            continue
        if key == "calories" and str(nutrient.get("unitName", "")).lower() == "kj":
            continue
        value = nutrient.get("value", nutrient.get("amount"))
        if value is not None:
            amounts[key] = value
    return FoodItem.from_dict(amounts)


def _nutrient_key(nutrient: dict[str, object]) -> str | None:
    label = nutrient.get("nutrientName")
    if isinstance(label, str):
        return _NUTRIENT_LABELS.get(label.lower())
    return _NUTRIENT_IDS.get(nutrient.get("nutrientId"))
