"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutri_balance.adapters.fdc_client import HttpxFdcClient
from nutri_balance.adapters.memory_state_repository import InMemoryStateRepository
from nutri_balance.adapters.supabase_state_repository import SupabaseStateRepository
from nutri_balance.config import Settings
from nutri_balance.services.admin import AdminService
from nutri_balance.services.analysis import AnalysisService
from nutri_balance.services.cache import InMemoryCache
from nutri_balance.services.catalog import FoodCatalogStore
from nutri_balance.services.food_search import FoodSearchService
from nutri_balance.services.foods import FoodService
from nutri_balance.services.ledger import SubmissionLedger
from nutri_balance.services.recommendations import RecommendationStore
from nutri_balance.services.state import StateRepository, StateService


@dataclass
class AppContainer:
    """Holds application-wide dependencies.

    The stores are owned here; every service mutates the same instances.
    """

    settings: Settings
    catalog: FoodCatalogStore
    recommendations: RecommendationStore
    ledger: SubmissionLedger
    state_service: StateService
    food_service: FoodService
    analysis_service: AnalysisService
    admin_service: AdminService
    close_resources: Callable[[], Awaitable[None]]

    def restore_state(self) -> None:
        """Load persisted blobs into the stores."""
        self.state_service.restore(self.catalog, self.recommendations, self.ledger)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    state_repository: StateRepository
    if resolved_settings.uses_supabase:
        state_repository = SupabaseStateRepository(
            create_client(
                resolved_settings.supabase_url,
                resolved_settings.supabase_service_key,
            )
        )
    else:
        state_repository = InMemoryStateRepository()
    state_service = StateService(state_repository)

    catalog = FoodCatalogStore()
    recommendations = RecommendationStore()
    ledger = SubmissionLedger()

    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )
    search_service = FoodSearchService(
        fdc_client=fdc_client,
        cache=InMemoryCache(),
        page_size=resolved_settings.fdc_page_size,
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
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
