"""Recipe nutrition aggregation."""

import math

from recipe_tracker.domain.conversion import convert
from recipe_tracker.domain.models import MacroSet, Recipe, RecipeLine, RecipeNutrition


def line_nutrition(line: RecipeLine) -> MacroSet | None:
    """Return the unrounded macros contributed by one recipe line.

    Returns None when the line's ingredient is not resolved.
    """
    ingredient = line.ingredient
    if ingredient is None:
        return None
    multiplier = convert(ingredient.serving_unit, line.quantity or 0, line.unit).value
    return MacroSet(
        calories=(ingredient.calories or 0) * multiplier,
        protein=(ingredient.protein or 0) * multiplier,
        fat=(ingredient.fat or 0) * multiplier,
        carbs=(ingredient.carbs or 0) * multiplier,
        sugar=(ingredient.sugar or 0) * multiplier,
    )


def aggregate(recipe: Recipe) -> RecipeNutrition:
    """Compute rounded recipe totals and per-serving macros."""
    total = _sum_lines(recipe)
    servings = max(recipe.servings or 1, 1)
    per_serving = MacroSet(
        calories=total.calories / servings,
        protein=total.protein / servings,
        fat=total.fat / servings,
        carbs=total.carbs / servings,
        sugar=total.sugar / servings,
    )
    return RecipeNutrition(
        total=_round_macros(total),
        per_serving=_round_macros(per_serving),
        incompatible_lines=tuple(
            line.ingredient_id
            for line in recipe.lines
            if line.ingredient is not None
            and not convert(
                line.ingredient.serving_unit, line.quantity or 0, line.unit
            ).compatible
        ),
    )


def recipe_calories(recipe: Recipe) -> float:
    """Return the unrounded total calories of a recipe."""
    return _sum_lines(recipe).calories


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def _sum_lines(recipe: Recipe) -> MacroSet:
    calories = protein = fat = carbs = sugar = 0.0
    for line in recipe.lines:
        macros = line_nutrition(line)
        if macros is None:
            continue
        calories += macros.calories
        protein += macros.protein
        fat += macros.fat
        carbs += macros.carbs
        sugar += macros.sugar
    return MacroSet(
        calories=calories, protein=protein, fat=fat, carbs=carbs, sugar=sugar
    )


def _round_macros(macros: MacroSet) -> MacroSet:
    return MacroSet(
        calories=round_half_up(macros.calories),
        protein=round_half_up(macros.protein),
        fat=round_half_up(macros.fat),
        carbs=round_half_up(macros.carbs),
        sugar=round_half_up(macros.sugar),
    )
