"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutri_balance.adapters.fdc_client import FdcClient
from nutri_balance.adapters.memory_state_repository import InMemoryStateRepository
from nutri_balance.config import Settings
from nutri_balance.containers import AppContainer
from nutri_balance.services.admin import AdminService
from nutri_balance.services.analysis import AnalysisService
from nutri_balance.services.cache import InMemoryCache
from nutri_balance.services.catalog import FoodCatalogStore
from nutri_balance.services.food_search import FoodSearchService
from nutri_balance.services.foods import FoodService
from nutri_balance.services.ledger import SubmissionLedger
from nutri_balance.services.recommendations import RecommendationStore
from nutri_balance.services.state import StateService


def _search_payload() -> dict[str, object]:
    return {
        "foods": [
            {
                "fdcId": 171688,
                "description": "Apples, raw, with skin",
                "dataType": "SR Legacy",
                "foodNutrients": [
                    {"nutrientId": 1003, "nutrientName": "Protein", "value": 0.26},
                    {
                        "nutrientId": 1004,
                        "nutrientName": "Total lipid (fat)",
                        "value": 0.17,
                    },
                    {
                        "nutrientId": 1005,
                        "nutrientName": "Carbohydrate, by difference",
                        "value": 13.8,
                    },
                    {
                        "nutrientId": 1008,
                        "nutrientName": "Energy",
                        "unitName": "KCAL",
                        "value": 52,
                    },
                    {
                        "nutrientId": 1062,
                        "nutrientName": "Energy",
                        "unitName": "kJ",
                        "value": 218,
                    },
                    {
                        "nutrientId": 1079,
                        "nutrientName": "Fiber, total dietary",
                        "value": 2.4,
                    },
                    {
                        "nutrientId": 1162,
                        "nutrientName": "Vitamin C, total ascorbic acid",
                        "value": 4.6,
                    },
                    {"nutrientId": 2000, "nutrientName": "Sugars, total", "value": 10},
                ],
            },
            {
                "fdcId": 1750339,
                "description": "Apple juice",
                "dataType": "Branded",
                "foodNutrients": [
                    {"nutrientId": 1008, "nutrientName": "Energy", "value": 46},
                ],
            },
        ]
    }


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client returning a fixed payload and counting calls."""

    payload: dict[str, object] = field(default_factory=_search_payload)
    search_calls: int = 0

    async def search_foods(self, query: str, page_size: int = 10) -> dict[str, object]:
        self.search_calls += 1
        return self.payload


@dataclass
class FailingFdcClient(FdcClient):
    """FDC client whose every call raises."""

    search_calls: int = 0

    async def search_foods(self, query: str, page_size: int = 10) -> dict[str, object]:
        self.search_calls += 1
        raise ConnectionError("network down")


@dataclass
class FlakyStateRepository(InMemoryStateRepository):
    """State repository whose first ``load_failures`` loads raise."""

    load_failures: int = 1

    def load(self, key: str) -> object | None:
        if self.load_failures > 0:
            self.load_failures -= 1
            raise ConnectionError("state backend unavailable")
        return super().load(key)


@dataclass
class UnwritableStateRepository(InMemoryStateRepository):
    """State repository whose saves always raise."""

    def save(self, key: str, value: object) -> None:
        raise RuntimeError("Failed to save state")


@pytest.fixture
def settings() -> Settings:
    return Settings(admin_token="admin-token", fdc_api_key="fdc-key")


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def state_repository() -> InMemoryStateRepository:
    return InMemoryStateRepository()


@pytest.fixture
def state_service(state_repository: InMemoryStateRepository) -> StateService:
    return StateService(state_repository)


@pytest.fixture
def container(
    settings: Settings,
    fdc_client: FakeFdcClient,
    state_service: StateService,
) -> AppContainer:
    catalog = FoodCatalogStore()
    recommendations = RecommendationStore()
    ledger = SubmissionLedger()
    search_service = FoodSearchService(
        fdc_client=fdc_client,
        cache=InMemoryCache(),
        retry_delay_seconds=0,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog=catalog,
        recommendations=recommendations,
        ledger=ledger,
        state_service=state_service,
        food_service=FoodService(
            catalog=catalog,
            search_service=search_service,
            state_service=state_service,
        ),
        analysis_service=AnalysisService(
            catalog=catalog,
            recommendations=recommendations,
            ledger=ledger,
            state_service=state_service,
        ),
        admin_service=AdminService(
            recommendations=recommendations,
            ledger=ledger,
            state_service=state_service,
        ),
        close_resources=close_resources,
    )
