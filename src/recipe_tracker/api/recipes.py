"""Recipe endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request, status

from recipe_tracker.api.dependencies import filter_state, require_user
from recipe_tracker.api.models import RecipeCreate, RecipeUpdate
from recipe_tracker.api.serializers import serialize_recipe, serialize_recipe_detail
from recipe_tracker.domain.filters import FilterState  # noqa: TC001

if TYPE_CHECKING:
    from recipe_tracker.containers import AppContainer

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("")
async def list_recipes(
    request: Request,
    limit: int | None = Query(default=None, ge=1),
    user_id: UUID = Depends(require_user),
    state: FilterState = Depends(filter_state),
) -> dict[str, object]:
    """Return the caller's recipes with nutrition, filtered and sorted."""
    container: AppContainer = request.app.state.container
    items = container.recipe_service.search(
        user_id, state, limit=limit or container.settings.default_page_size
    )
    return {"recipes": [serialize_recipe(item) for item in items]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_recipe(
    payload: RecipeCreate,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Create a recipe from the caller's ingredients."""
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.create(user_id, payload.model_dump())
    return serialize_recipe(recipe)


@router.get("/{recipe_id}")
async def get_recipe(
    recipe_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return a recipe with total, per-serving and per-line nutrition."""
    container: AppContainer = request.app.state.container
    detail = container.recipe_service.detail(user_id, recipe_id)
    return serialize_recipe_detail(detail)


@router.put("/{recipe_id}")
async def update_recipe(
    recipe_id: UUID,
    payload: RecipeUpdate,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Update a recipe; ingredient lines and allergens are replaced when sent."""
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.update(
        user_id, recipe_id, payload.model_dump(exclude_unset=True)
    )
    return serialize_recipe(recipe)


@router.delete("/{recipe_id}")
async def delete_recipe(
    recipe_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, str]:
    """Delete one of the caller's recipes."""
    container: AppContainer = request.app.state.container
    container.recipe_service.delete(user_id, recipe_id)
    return {"message": "Recipe deleted successfully"}
