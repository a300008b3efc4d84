"""Supabase implementation for the ingredient library."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from recipe_tracker.domain.models import Ingredient
from recipe_tracker.domain.units import Unit, parse_unit, storage_name
from recipe_tracker.errors import PersistenceError
from recipe_tracker.services.ingredients import IngredientRepository

INGREDIENT_COLUMNS = "*, ingredient_allergens(name)"

_INGREDIENT_FIELDS = (
    "name",
    "brand",
    "calories",
    "protein",
    "fat",
    "carbs",
    "sugar",
    "serving_size",
    "serving_unit",
)


@dataclass
class SupabaseIngredientRepository(IngredientRepository):
    """Supabase-backed repository for ingredients and their allergens."""

    client: Client

    def create_ingredient(
        self, user_id: UUID, payload: dict[str, object]
    ) -> Ingredient:
        """Create an ingredient with its allergens and return it."""
        response = (
            self.client.table("ingredients")
            .insert({"user_id": str(user_id), **_to_row(payload)})
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to create ingredient")
        row = response.data[0]
        allergens = tuple(payload.get("allergens") or ())
        self._insert_allergens(UUID(str(row["id"])), allergens)
        return parse_ingredient(row, allergens=allergens)

    def update_ingredient(
        self, ingredient_id: UUID, payload: dict[str, object]
    ) -> Ingredient:
        """Update an ingredient, replacing allergens when given, and return it."""
        row_payload = _to_row(payload)
        if row_payload:
            self.client.table("ingredients").update(row_payload).eq(
                "id", str(ingredient_id)
            ).execute()
        if "allergens" in payload:
            self.client.table("ingredient_allergens").delete().eq(
                "ingredient_id", str(ingredient_id)
            ).execute()
            self._insert_allergens(ingredient_id, tuple(payload["allergens"] or ()))
        ingredient = self.get_ingredient(ingredient_id)
        if ingredient is None:
            raise PersistenceError("Failed to update ingredient")
        return ingredient

    def get_ingredient(self, ingredient_id: UUID) -> Ingredient | None:
        """Return an ingredient by id, if present."""
        response = (
            self.client.table("ingredients")
            .select(INGREDIENT_COLUMNS)
            .eq("id", str(ingredient_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_ingredient(response.data[0])

    def list_ingredients(self, user_id: UUID) -> list[Ingredient]:
        """Return all ingredients owned by a user."""
        response = (
            self.client.table("ingredients")
            .select(INGREDIENT_COLUMNS)
            .eq("user_id", str(user_id))
            .order("name")
            .execute()
        )
        return [parse_ingredient(row) for row in response.data or []]

    def delete_ingredient(self, ingredient_id: UUID) -> None:
        """Delete an ingredient; allergen links cascade in the database."""
        self.client.table("ingredients").delete().eq("id", str(ingredient_id)).execute()

    def _insert_allergens(self, ingredient_id: UUID, allergens: tuple[str, ...]) -> None:
        if not allergens:
            return
        self.client.table("ingredient_allergens").insert(
            [{"ingredient_id": str(ingredient_id), "name": name} for name in allergens]
        ).execute()


def _to_row(payload: dict[str, object]) -> dict[str, object]:
    row = {key: payload[key] for key in _INGREDIENT_FIELDS if key in payload}
    if "serving_unit" in row:
        row["serving_unit"] = storage_name(parse_unit(str(row["serving_unit"])))
    return row


def parse_ingredient(
    row: dict[str, object], allergens: tuple[str, ...] | None = None
) -> Ingredient:
    """Parse an ingredient row, with embedded allergens, into a domain model."""
    if allergens is None:
        allergens = tuple(
            str(item["name"]) for item in row.get("ingredient_allergens") or []
        )
    raw_unit = row.get("serving_unit")
    return Ingredient(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        brand=row.get("brand"),
        calories=_optional_float(row.get("calories")),
        protein=_optional_float(row.get("protein")),
        fat=_optional_float(row.get("fat")),
        carbs=_optional_float(row.get("carbs")),
        sugar=_optional_float(row.get("sugar")),
        serving_size=float(row.get("serving_size") or 1.0),
        serving_unit=parse_unit(str(raw_unit)) if raw_unit else Unit.UNIT,
        allergens=allergens,
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column, if set."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def _optional_float(raw: object) -> float | None:
    return None if raw is None else float(raw)
