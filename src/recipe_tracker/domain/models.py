"""Domain models for ingredients and recipes."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from recipe_tracker.domain.units import Unit


@dataclass(frozen=True)
class Ingredient:
    """An ingredient in a user's library with per-serving macros."""

    id: UUID
    user_id: UUID
    name: str
    brand: str | None
    calories: float | None
    protein: float | None
    fat: float | None
    carbs: float | None
    sugar: float | None
    serving_size: float
    serving_unit: Unit
    allergens: tuple[str, ...] = ()
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class RecipeLine:
    """One ingredient, quantity and unit inside a recipe."""

    ingredient_id: UUID
    quantity: float
    unit: Unit
    ingredient: Ingredient | None = None


@dataclass(frozen=True)
class Recipe:
    """A recipe composed of ordered ingredient lines."""

    id: UUID
    user_id: UUID
    name: str
    description: str | None
    servings: int
    lines: tuple[RecipeLine, ...] = ()
    allergens: tuple[str, ...] = ()
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class MacroSet:
    """Calories plus protein, fat, carbs and sugar in grams.

    Aggregated recipe values hold whole numbers after rounding.
    """

    calories: float | int = 0.0
    protein: float | int = 0.0
    fat: float | int = 0.0
    carbs: float | int = 0.0
    sugar: float | int = 0.0


@dataclass(frozen=True)
class RecipeNutrition:
    """Computed recipe totals and per-serving values."""

    total: MacroSet
    per_serving: MacroSet
    incompatible_lines: tuple[UUID, ...] = ()
