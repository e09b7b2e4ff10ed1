"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from nutri_balance.api.models import FoodFieldUpdate, FoodPayload, ThresholdUpdate
from nutri_balance.domain.errors import (
    CatalogError,
    UnknownGroupError,
    UnknownNutrientError,
)
from nutri_balance.services.admin import EXPORT_FILENAME

if TYPE_CHECKING:
    from nutri_balance.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/foods", dependencies=[Depends(require_admin)])
async def list_foods(request: Request) -> dict[str, object]:
    """Return the catalog with positions."""
    container: AppContainer = request.app.state.container
    foods = container.food_service.list_foods()
    return {"foods": [{"index": i, **food.to_dict()} for i, food in enumerate(foods)]}


@router.post(
    "/foods",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_201_CREATED,
)
async def add_food(
    request: Request, payload: FoodPayload | None = None
) -> dict[str, object]:
    """Append a food; an empty body adds a zeroed, unnamed entry."""
    container: AppContainer = request.app.state.container
    item = payload.to_item() if payload is not None else None
    return container.food_service.add_food(item).to_dict()


@router.patch("/foods/{index}", dependencies=[Depends(require_admin)])
async def edit_food(
    index: int, payload: FoodFieldUpdate, request: Request
) -> dict[str, object]:
    """Replace one field of the food at ``index``."""
    container: AppContainer = request.app.state.container
    try:
        updated = container.food_service.edit_food(index, payload.field, payload.value)
    except IndexError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except CatalogError as exc:
        raise HTTPException(
            status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    except ValueError as exc:
        raise HTTPException(
            status.HTTP_422_UNPROCESSABLE_ENTITY, detail=f"Invalid value: {exc}"
        ) from exc
    return updated.to_dict()


@router.delete("/foods/{index}", dependencies=[Depends(require_admin)])
async def remove_food(index: int, request: Request) -> dict[str, object]:
    """Remove the food at ``index``."""
    container: AppContainer = request.app.state.container
    try:
        removed = container.food_service.remove_food(index)
    except IndexError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return removed.to_dict()


@router.get("/recommendations", dependencies=[Depends(require_admin)])
async def get_recommendations(request: Request) -> dict[str, object]:
    """Return the threshold table."""
    container: AppContainer = request.app.state.container
    return {"recommendations": container.admin_service.get_recommendations()}


@router.put(
    "/recommendations/{nutrient}/{group}", dependencies=[Depends(require_admin)]
)
async def update_threshold(
    nutrient: str, group: str, payload: ThresholdUpdate, request: Request
) -> dict[str, object]:
    """Set one threshold cell."""
    container: AppContainer = request.app.state.container
    try:
        container.admin_service.update_threshold(nutrient, group, payload.value)
    except (UnknownNutrientError, UnknownGroupError) as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return {"recommendations": container.admin_service.get_recommendations()}


@router.get("/submissions", dependencies=[Depends(require_admin)])
async def list_submissions(request: Request) -> dict[str, object]:
    """Return recorded analyses."""
    container: AppContainer = request.app.state.container
    return {"submissions": container.admin_service.list_submissions()}


@router.get("/submissions.csv", dependencies=[Depends(require_admin)])
async def export_submissions(request: Request) -> PlainTextResponse:
    """Download recorded analyses as CSV."""
    container: AppContainer = request.app.state.container
    return PlainTextResponse(
        container.admin_service.export_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
