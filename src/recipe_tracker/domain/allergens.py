"""Allergen aggregation across ingredients and recipes."""

from collections.abc import Iterable

from recipe_tracker.domain.models import Ingredient, Recipe

DIETARY_SUFFIX = "-Free"


def recipe_allergens(recipe: Recipe) -> list[str]:
    """Return the sorted distinct allergens of a recipe's ingredients."""
    return unique_allergens(
        line.ingredient for line in recipe.lines if line.ingredient is not None
    )


def unique_allergens(ingredients: Iterable[Ingredient]) -> list[str]:
    """Return the sorted distinct allergens found across ingredients."""
    allergens: set[str] = set()
    for ingredient in ingredients:
        allergens.update(ingredient.allergens or ())
    return sorted(allergens)


def dietary_restrictions_from_allergens(ingredients: Iterable[Ingredient]) -> list[str]:
    """Return one "<Allergen>-Free" label per distinct allergen, sorted."""
    return sorted(
        f"{allergen}{DIETARY_SUFFIX}" for allergen in unique_allergens(ingredients)
    )


def allergen_from_restriction(label: str) -> str:
    """Return the allergen a dietary restriction label excludes."""
    return label.replace(DIETARY_SUFFIX, "")


def contains_allergen(allergens: Iterable[str], allergen: str) -> bool:
    """Return True if any tag case-insensitively contains the allergen name."""
    needle = allergen.lower()
    return any(needle in tag.lower() for tag in allergens)
