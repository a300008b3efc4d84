"""Recipe service composing ingredients into nutrition views."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from recipe_tracker.domain.allergens import recipe_allergens
from recipe_tracker.domain.conversion import is_compatible
from recipe_tracker.domain.filters import FilterState, filter_recipes
from recipe_tracker.domain.models import (
    MacroSet,
    Recipe,
    RecipeLine,
    RecipeNutrition,
)
from recipe_tracker.domain.nutrition import aggregate, line_nutrition
from recipe_tracker.domain.units import parse_unit
from recipe_tracker.errors import (
    IncompatibleUnitsError,
    IngredientNotAccessibleError,
    NotFoundError,
)
from recipe_tracker.services.ingredients import IngredientRepository, normalize_allergens

_logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes and their ingredient lines."""

    def create_recipe(
        self, user_id: UUID, payload: dict[str, object], lines: list[RecipeLine]
    ) -> Recipe:
        """Create a recipe with its lines and return it."""

    def update_recipe(
        self,
        recipe_id: UUID,
        payload: dict[str, object],
        lines: list[RecipeLine] | None,
    ) -> Recipe:
        """Update a recipe, replacing its lines when given, and return it."""

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe with resolved ingredient lines, if present."""

    def list_recipes(self, user_id: UUID) -> list[Recipe]:
        """Return all recipes owned by a user with resolved lines."""

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe and its lines."""


@dataclass(frozen=True)
class LineDetail:
    """A recipe line with its computed macro contribution."""

    line: RecipeLine
    macros: MacroSet | None
    compatible: bool


@dataclass(frozen=True)
class RecipeDetail:
    """Recipe detail view with computed nutrition and allergens."""

    recipe: Recipe
    nutrition: RecipeNutrition
    allergens: list[str]
    lines: list[LineDetail]


@dataclass
class RecipeService:
    """Application service for recipe CRUD and nutrition views."""

    repository: RecipeRepository
    ingredient_repository: IngredientRepository
    strict_unit_conversion: bool = False

    def create(self, user_id: UUID, payload: dict[str, object]) -> Recipe:
        """Create a recipe owned by the user."""
        fields, raw_lines = _split_payload(payload)
        lines = self._resolve_lines(user_id, raw_lines or [])
        recipe = self.repository.create_recipe(user_id, fields, lines)
        _logger.info(
            "Recipe created: id=%s user=%s lines=%s", recipe.id, user_id, len(lines)
        )
        return recipe

    def get(self, user_id: UUID, recipe_id: UUID) -> Recipe:
        """Return a recipe owned by the user."""
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None or recipe.user_id != user_id:
            raise NotFoundError("recipe", recipe_id)
        return recipe

    def update(
        self, user_id: UUID, recipe_id: UUID, payload: dict[str, object]
    ) -> Recipe:
        """Update a recipe owned by the user."""
        self.get(user_id, recipe_id)
        fields, raw_lines = _split_payload(payload)
        lines = None if raw_lines is None else self._resolve_lines(user_id, raw_lines)
        recipe = self.repository.update_recipe(recipe_id, fields, lines)
        _logger.info("Recipe updated: id=%s user=%s", recipe_id, user_id)
        return recipe

    def delete(self, user_id: UUID, recipe_id: UUID) -> None:
        """Delete a recipe owned by the user."""
        self.get(user_id, recipe_id)
        self.repository.delete_recipe(recipe_id)
        _logger.info("Recipe deleted: id=%s user=%s", recipe_id, user_id)

    def search(
        self,
        user_id: UUID,
        state: FilterState | None = None,
        limit: int | None = None,
    ) -> list[Recipe]:
        """Return the user's recipes filtered and sorted."""
        items = filter_recipes(
            self.repository.list_recipes(user_id), state or FilterState()
        )
        return items if limit is None else items[:limit]

    def detail(self, user_id: UUID, recipe_id: UUID) -> RecipeDetail:
        """Return a recipe with nutrition, allergens and per-line macros."""
        recipe = self.get(user_id, recipe_id)
        return build_detail(recipe)

    def _resolve_lines(
        self, user_id: UUID, raw_lines: list[dict[str, object]]
    ) -> list[RecipeLine]:
        lines = []
        for raw in raw_lines:
            ingredient_id = UUID(str(raw["ingredient_id"]))
            ingredient = self.ingredient_repository.get_ingredient(ingredient_id)
            if ingredient is None or ingredient.user_id != user_id:
                raise IngredientNotAccessibleError(ingredient_id)
            unit = parse_unit(str(raw.get("unit") or "unit"))
            if not is_compatible(unit, ingredient.serving_unit):
                if self.strict_unit_conversion:
                    raise IncompatibleUnitsError(
                        ingredient_id, unit, ingredient.serving_unit
                    )
                _logger.warning(
                    "Incompatible recipe unit: ingredient=%s unit=%s serving_unit=%s",
                    ingredient_id,
                    unit,
                    ingredient.serving_unit,
                )
            lines.append(
                RecipeLine(
                    ingredient_id=ingredient_id,
                    quantity=float(raw.get("quantity") or 0),
                    unit=unit,
                    ingredient=ingredient,
                )
            )
        return lines


def build_detail(recipe: Recipe) -> RecipeDetail:
    """Compute the detail view for a recipe."""
    return RecipeDetail(
        recipe=recipe,
        nutrition=aggregate(recipe),
        allergens=recipe_allergens(recipe),
        lines=[
            LineDetail(
                line=line,
                macros=line_nutrition(line),
                compatible=line.ingredient is None
                or is_compatible(line.unit, line.ingredient.serving_unit),
            )
            for line in recipe.lines
        ],
    )


def _split_payload(
    payload: dict[str, object],
) -> tuple[dict[str, object], list[dict[str, object]] | None]:
    """Separate scalar recipe fields from ingredient lines."""
    fields = {
        key: value
        for key, value in payload.items()
        if key not in {"user_id", "ingredients"}
    }
    if "allergens" in fields:
        fields["allergens"] = normalize_allergens(fields["allergens"])
    raw_lines = payload.get("ingredients")
    if raw_lines is None:
        return fields, None
    return fields, list(raw_lines)
