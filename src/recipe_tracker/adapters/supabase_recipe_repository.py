"""Supabase implementation for recipes."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from recipe_tracker.adapters.supabase_ingredient_repository import (
    parse_ingredient,
    parse_timestamp,
)
from recipe_tracker.domain.models import Recipe, RecipeLine
from recipe_tracker.domain.units import Unit, parse_unit, storage_name
from recipe_tracker.errors import PersistenceError
from recipe_tracker.services.recipes import RecipeRepository

RECIPE_COLUMNS = (
    "*, recipe_allergens(name), "
    "recipe_ingredients(ingredient_id, quantity, unit, "
    "ingredients(*, ingredient_allergens(name)))"
)

_RECIPE_FIELDS = ("name", "description", "servings")


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for recipes, lines and allergen tags."""

    client: Client

    def create_recipe(
        self, user_id: UUID, payload: dict[str, object], lines: list[RecipeLine]
    ) -> Recipe:
        """Create a recipe with its lines and return it."""
        response = (
            self.client.table("recipes")
            .insert({"user_id": str(user_id), **_to_row(payload)})
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to create recipe")
        row = response.data[0]
        recipe_id = UUID(str(row["id"]))
        allergens = tuple(payload.get("allergens") or ())
        self._insert_lines(recipe_id, lines)
        self._insert_allergens(recipe_id, allergens)
        return _parse_recipe(row, lines=tuple(lines), allergens=allergens)

    def update_recipe(
        self,
        recipe_id: UUID,
        payload: dict[str, object],
        lines: list[RecipeLine] | None,
    ) -> Recipe:
        """Update a recipe, replacing lines and allergens when given."""
        row_payload = _to_row(payload)
        if row_payload:
            self.client.table("recipes").update(row_payload).eq(
                "id", str(recipe_id)
            ).execute()
        if lines is not None:
            self.client.table("recipe_ingredients").delete().eq(
                "recipe_id", str(recipe_id)
            ).execute()
            self._insert_lines(recipe_id, lines)
        if "allergens" in payload:
            self.client.table("recipe_allergens").delete().eq(
                "recipe_id", str(recipe_id)
            ).execute()
            self._insert_allergens(recipe_id, tuple(payload["allergens"] or ()))
        recipe = self.get_recipe(recipe_id)
        if recipe is None:
            raise PersistenceError("Failed to update recipe")
        return recipe

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe with resolved ingredient lines, if present."""
        response = (
            self.client.table("recipes")
            .select(RECIPE_COLUMNS)
            .eq("id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def list_recipes(self, user_id: UUID) -> list[Recipe]:
        """Return all recipes owned by a user."""
        response = (
            self.client.table("recipes")
            .select(RECIPE_COLUMNS)
            .eq("user_id", str(user_id))
            .order("name")
            .execute()
        )
        return [_parse_recipe(row) for row in response.data or []]

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe; lines and allergen tags cascade in the database."""
        self.client.table("recipes").delete().eq("id", str(recipe_id)).execute()

    def _insert_lines(self, recipe_id: UUID, lines: list[RecipeLine]) -> None:
        if not lines:
            return
        self.client.table("recipe_ingredients").insert(
            [
                {
                    "recipe_id": str(recipe_id),
                    "ingredient_id": str(line.ingredient_id),
                    "quantity": line.quantity,
                    "unit": storage_name(line.unit),
                }
                for line in lines
            ]
        ).execute()

    def _insert_allergens(self, recipe_id: UUID, allergens: tuple[str, ...]) -> None:
        if not allergens:
            return
        self.client.table("recipe_allergens").insert(
            [{"recipe_id": str(recipe_id), "name": name} for name in allergens]
        ).execute()


def _to_row(payload: dict[str, object]) -> dict[str, object]:
    return {key: payload[key] for key in _RECIPE_FIELDS if key in payload}


def _parse_line(row: dict[str, object]) -> RecipeLine:
    ingredient_row = row.get("ingredients")
    raw_unit = row.get("unit")
    return RecipeLine(
        ingredient_id=UUID(str(row["ingredient_id"])),
        quantity=float(row.get("quantity") or 0.0),
        unit=parse_unit(str(raw_unit)) if raw_unit else Unit.UNIT,
        ingredient=parse_ingredient(ingredient_row) if ingredient_row else None,
    )


def _parse_recipe(
    row: dict[str, object],
    lines: tuple[RecipeLine, ...] | None = None,
    allergens: tuple[str, ...] | None = None,
) -> Recipe:
    """Parse a recipe row with embedded lines and allergens."""
    if lines is None:
        lines = tuple(_parse_line(item) for item in row.get("recipe_ingredients") or [])
    if allergens is None:
        allergens = tuple(
            str(item["name"]) for item in row.get("recipe_allergens") or []
        )
    return Recipe(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        description=row.get("description"),
        servings=int(row.get("servings") or 1),
        lines=lines,
        allergens=allergens,
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
