"""Response serialization for domain objects."""

from dataclasses import asdict
from datetime import datetime

from recipe_tracker.domain.filters import IngredientStats
from recipe_tracker.domain.fractions import format_quantity, is_fractionable
from recipe_tracker.domain.models import Ingredient, MacroSet, Recipe, RecipeNutrition
from recipe_tracker.domain.units import Unit, base_magnitude, unit_group
from recipe_tracker.services.recipes import RecipeDetail, build_detail


def serialize_ingredient(ingredient: Ingredient) -> dict[str, object]:
    """Serialize an ingredient with its allergen names."""
    return {
        "id": str(ingredient.id),
        "user_id": str(ingredient.user_id),
        "name": ingredient.name,
        "brand": ingredient.brand,
        "calories": ingredient.calories,
        "protein": ingredient.protein,
        "fat": ingredient.fat,
        "carbs": ingredient.carbs,
        "sugar": ingredient.sugar,
        "serving_size": ingredient.serving_size,
        "serving_unit": ingredient.serving_unit.value,
        "allergens": list(ingredient.allergens),
        "created_at": _isoformat(ingredient.created_at),
        "updated_at": _isoformat(ingredient.updated_at),
    }


def serialize_macros(macros: MacroSet) -> dict[str, float | int]:
    """Serialize a macro set as a plain mapping."""
    return asdict(macros)


def serialize_nutrition(nutrition: RecipeNutrition) -> dict[str, object]:
    """Serialize recipe totals, per-serving values and skipped lines."""
    return {
        "total": serialize_macros(nutrition.total),
        "per_serving": serialize_macros(nutrition.per_serving),
        "incompatible_lines": [str(line) for line in nutrition.incompatible_lines],
    }


def serialize_recipe(recipe: Recipe) -> dict[str, object]:
    """Serialize a recipe for list views, with computed nutrition and allergens."""
    detail = build_detail(recipe)
    return {
        **_recipe_fields(recipe),
        "nutrition": serialize_nutrition(detail.nutrition),
        "computed_allergens": detail.allergens,
    }


def serialize_recipe_detail(detail: RecipeDetail) -> dict[str, object]:
    """Serialize a recipe detail view including per-line macros."""
    return {
        **_recipe_fields(detail.recipe),
        "nutrition": serialize_nutrition(detail.nutrition),
        "computed_allergens": detail.allergens,
        "ingredients": [
            {
                "ingredient_id": str(item.line.ingredient_id),
                "ingredient": serialize_ingredient(item.line.ingredient)
                if item.line.ingredient
                else None,
                "quantity": item.line.quantity,
                "quantity_display": format_quantity(item.line.quantity, item.line.unit),
                "unit": item.line.unit.value,
                "compatible": item.compatible,
                "macros": serialize_macros(item.macros) if item.macros else None,
            }
            for item in detail.lines
        ],
    }


def serialize_stats(stats: IngredientStats) -> dict[str, int]:
    """Serialize ingredient library stats."""
    return asdict(stats)


def serialize_unit(unit: Unit) -> dict[str, object]:
    """Describe a unit with its group and base magnitude."""
    return {
        "unit": unit.value,
        "group": unit_group(unit).value,
        "base_magnitude": base_magnitude(unit),
        "fractionable": is_fractionable(unit),
    }


def _recipe_fields(recipe: Recipe) -> dict[str, object]:
    return {
        "id": str(recipe.id),
        "user_id": str(recipe.user_id),
        "name": recipe.name,
        "description": recipe.description,
        "servings": recipe.servings,
        "allergens": list(recipe.allergens),
        "created_at": _isoformat(recipe.created_at),
        "updated_at": _isoformat(recipe.updated_at),
    }


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
