"""Services for managing a user's ingredient library."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from recipe_tracker.domain.allergens import dietary_restrictions_from_allergens
from recipe_tracker.domain.filters import (
    FilterState,
    IngredientStats,
    filter_ingredients,
    ingredient_stats,
)
from recipe_tracker.domain.models import Ingredient
from recipe_tracker.domain.units import parse_unit
from recipe_tracker.errors import NotFoundError

_logger = logging.getLogger(__name__)


class IngredientRepository(Protocol):
    """Persistence interface for ingredients."""

    def create_ingredient(
        self, user_id: UUID, payload: dict[str, object]
    ) -> Ingredient:
        """Create an ingredient and return it."""

    def update_ingredient(
        self, ingredient_id: UUID, payload: dict[str, object]
    ) -> Ingredient:
        """Update an ingredient and return it."""

    def get_ingredient(self, ingredient_id: UUID) -> Ingredient | None:
        """Return an ingredient by id, if present."""

    def list_ingredients(self, user_id: UUID) -> list[Ingredient]:
        """Return all ingredients owned by a user."""

    def delete_ingredient(self, ingredient_id: UUID) -> None:
        """Delete an ingredient."""


@dataclass
class IngredientService:
    """Application service for ingredient CRUD and list views."""

    repository: IngredientRepository

    def create(self, user_id: UUID, payload: dict[str, object]) -> Ingredient:
        """Create an ingredient owned by the user."""
        ingredient = self.repository.create_ingredient(
            user_id, normalize_ingredient_payload(payload)
        )
        _logger.info("Ingredient created: id=%s user=%s", ingredient.id, user_id)
        return ingredient

    def get(self, user_id: UUID, ingredient_id: UUID) -> Ingredient:
        """Return an ingredient owned by the user."""
        ingredient = self.repository.get_ingredient(ingredient_id)
        if ingredient is None or ingredient.user_id != user_id:
            raise NotFoundError("ingredient", ingredient_id)
        return ingredient

    def update(
        self, user_id: UUID, ingredient_id: UUID, payload: dict[str, object]
    ) -> Ingredient:
        """Update an ingredient owned by the user."""
        self.get(user_id, ingredient_id)
        ingredient = self.repository.update_ingredient(
            ingredient_id, normalize_ingredient_payload(payload)
        )
        _logger.info("Ingredient updated: id=%s user=%s", ingredient_id, user_id)
        return ingredient

    def delete(self, user_id: UUID, ingredient_id: UUID) -> None:
        """Delete an ingredient owned by the user."""
        self.get(user_id, ingredient_id)
        self.repository.delete_ingredient(ingredient_id)
        _logger.info("Ingredient deleted: id=%s user=%s", ingredient_id, user_id)

    def search(
        self,
        user_id: UUID,
        state: FilterState | None = None,
        limit: int | None = None,
    ) -> list[Ingredient]:
        """Return the user's ingredients filtered and sorted."""
        items = filter_ingredients(
            self.repository.list_ingredients(user_id), state or FilterState()
        )
        return items if limit is None else items[:limit]

    def dietary_restrictions(self, user_id: UUID) -> list[str]:
        """Return the dietary restriction labels available to the user."""
        return dietary_restrictions_from_allergens(
            self.repository.list_ingredients(user_id)
        )

    def stats(self, user_id: UUID) -> IngredientStats:
        """Return summary numbers for the user's library."""
        return ingredient_stats(self.repository.list_ingredients(user_id))


def normalize_ingredient_payload(payload: dict[str, object]) -> dict[str, object]:
    """Clean user-entered ingredient fields before they are stored."""
    cleaned = {key: value for key, value in payload.items() if key != "user_id"}
    if "serving_unit" in cleaned:
        cleaned["serving_unit"] = parse_unit(str(cleaned["serving_unit"]))
    if "allergens" in cleaned:
        cleaned["allergens"] = normalize_allergens(cleaned["allergens"])
    return cleaned


def normalize_allergens(raw: object) -> tuple[str, ...]:
    """Trim allergen names, dropping blanks and repeats."""
    if not isinstance(raw, list | tuple):
        return ()
    names: list[str] = []
    for value in raw:
        name = str(value).strip()
        if name and name not in names:
            names.append(name)
    return tuple(names)
