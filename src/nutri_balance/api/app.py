"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from nutri_balance.api.admin import router as admin_router
from nutri_balance.api.models import AnalysisRequest, SearchRequest
from nutri_balance.app_logging import configure_logging
from nutri_balance.containers import AppContainer
from nutri_balance.services.analysis import AnalysisForm, AnalysisResult
from nutri_balance.services.state import PersistenceError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.container.restore_state()
        except Exception:
            logger.exception(
                "Failed to restore persisted state; saving disabled until restart"
            )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.exception_handler(PersistenceError)
    async def persistence_error(
        request: Request, exc: PersistenceError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods")
    async def list_foods(request: Request) -> dict[str, object]:
        """Return the current food catalog."""
        state_container: AppContainer = request.app.state.container
        foods = state_container.food_service.list_foods()
        return {"foods": [food.to_dict() for food in foods]}

    @app.post("/foods/search")
    async def search_foods(
        payload: SearchRequest, request: Request
    ) -> dict[str, object]:
        """Replace the catalog with search results, if there are any."""
        state_container: AppContainer = request.app.state.container
        outcome = await state_container.food_service.search_and_replace(payload.query)
        if outcome is None:
            return {"status": "ignored"}
        if not outcome.replaced:
            return {"status": "no_results", "notice": outcome.notice}
        return {"status": "replaced", "count": outcome.count}

    @app.post("/analysis")
    async def analyze(payload: AnalysisRequest, request: Request) -> dict[str, object]:
        """Compute totals and suggestions, recording the submission."""
        state_container: AppContainer = request.app.state.container
        form = AnalysisForm(
            age=payload.age,
            weight=payload.weight,
            height=payload.height,
            activity=payload.activity,
        )
        result = state_container.analysis_service.analyze(
            form, [meal.to_entry() for meal in payload.meals]
        )
        if result is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Age, weight, height and at least one meal are required.",
            )
        return _serialize_result(result)

    return app


def _serialize_result(result: AnalysisResult) -> dict[str, object]:
    return {
        "group": result.group,
        "totals": result.totals,
        "thresholds": result.thresholds,
        "suggestions": result.suggestions,
        "chart": [asdict(row) for row in result.chart],
        "date": result.submission.date,
    }
