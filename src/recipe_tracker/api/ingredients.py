"""Ingredient library endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request, status

from recipe_tracker.api.dependencies import filter_state, require_user
from recipe_tracker.api.models import IngredientCreate, IngredientUpdate
from recipe_tracker.api.serializers import serialize_ingredient, serialize_stats
from recipe_tracker.domain.filters import FilterState  # noqa: TC001

if TYPE_CHECKING:
    from recipe_tracker.containers import AppContainer

router = APIRouter(prefix="/ingredients", tags=["ingredients"])


@router.get("")
async def list_ingredients(
    request: Request,
    limit: int | None = Query(default=None, ge=1),
    user_id: UUID = Depends(require_user),
    state: FilterState = Depends(filter_state),
) -> dict[str, object]:
    """Return the caller's ingredients, filtered and sorted."""
    container: AppContainer = request.app.state.container
    items = container.ingredient_service.search(
        user_id, state, limit=limit or container.settings.default_page_size
    )
    return {"ingredients": [serialize_ingredient(item) for item in items]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_ingredient(
    payload: IngredientCreate,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Create an ingredient in the caller's library."""
    container: AppContainer = request.app.state.container
    ingredient = container.ingredient_service.create(user_id, payload.model_dump())
    return serialize_ingredient(ingredient)


@router.get("/dietary-restrictions")
async def dietary_restrictions(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return "<Allergen>-Free" labels for the caller's allergens."""
    container: AppContainer = request.app.state.container
    return {
        "dietary_restrictions": container.ingredient_service.dietary_restrictions(
            user_id
        )
    }


@router.get("/stats")
async def ingredient_stats(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return summary numbers for the caller's library."""
    container: AppContainer = request.app.state.container
    return serialize_stats(container.ingredient_service.stats(user_id))


@router.get("/{ingredient_id}")
async def get_ingredient(
    ingredient_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return one of the caller's ingredients."""
    container: AppContainer = request.app.state.container
    return serialize_ingredient(container.ingredient_service.get(user_id, ingredient_id))


@router.put("/{ingredient_id}")
async def update_ingredient(
    ingredient_id: UUID,
    payload: IngredientUpdate,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Update one of the caller's ingredients."""
    container: AppContainer = request.app.state.container
    ingredient = container.ingredient_service.update(
        user_id, ingredient_id, payload.model_dump(exclude_unset=True)
    )
    return serialize_ingredient(ingredient)


@router.delete("/{ingredient_id}")
async def delete_ingredient(
    ingredient_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, str]:
    """Delete one of the caller's ingredients."""
    container: AppContainer = request.app.state.container
    container.ingredient_service.delete(user_id, ingredient_id)
    return {"message": "Ingredient deleted successfully"}
