"""Filtering and sorting for ingredient and recipe lists."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeVar

from recipe_tracker.domain.allergens import allergen_from_restriction, contains_allergen
from recipe_tracker.domain.models import Ingredient, Recipe
from recipe_tracker.domain.nutrition import recipe_calories, round_half_up

T = TypeVar("T")


class SortKey(StrEnum):
    """List orderings offered by the list views."""

    NAME = "name"
    NAME_DESC = "name-desc"
    CALORIES = "calories"
    CALORIES_DESC = "calories-desc"
    PROTEIN = "protein"
    PROTEIN_DESC = "protein-desc"
    RECENT = "recent"

    @classmethod
    def parse(cls, raw: str | None) -> "SortKey":
        """Parse a sort key, falling back to name ascending."""
        try:
            return cls(raw)
        except ValueError:
            return cls.NAME


@dataclass(frozen=True)
class FilterState:
    """Current list filters chosen by the caller."""

    sort_by: SortKey = SortKey.NAME
    search_query: str = ""
    calories_min: float | None = None
    calories_max: float | None = None
    dietary_restrictions: tuple[str, ...] = ()


@dataclass(frozen=True)
class IngredientStats:
    """Summary numbers for an ingredient library."""

    total: int
    with_allergens: int
    unique_brands: int
    avg_calories: int


def filter_ingredients(
    ingredients: Iterable[Ingredient], state: FilterState
) -> list[Ingredient]:
    """Filter and sort ingredients according to the filter state."""
    items = list(ingredients)
    query = state.search_query.strip().lower()
    if query:
        items = [item for item in items if _ingredient_matches(item, query)]
    for restriction in state.dietary_restrictions:
        allergen = allergen_from_restriction(restriction)
        items = [
            item for item in items if not contains_allergen(item.allergens, allergen)
        ]
    items = _within_calories(items, state, lambda item: item.calories or 0)
    return _sort(items, state.sort_by, _INGREDIENT_SORTS)


def filter_recipes(recipes: Iterable[Recipe], state: FilterState) -> list[Recipe]:
    """Filter and sort recipes according to the filter state."""
    items = list(recipes)
    query = state.search_query.strip().lower()
    if query:
        items = [
            item
            for item in items
            if query in item.name.lower()
            or (item.description is not None and query in item.description.lower())
        ]
    for restriction in state.dietary_restrictions:
        allergen = allergen_from_restriction(restriction)
        items = [item for item in items if _recipe_avoids(item, allergen)]
    items = _within_calories(items, state, recipe_calories)
    return _sort(items, state.sort_by, _RECIPE_SORTS)


def ingredient_stats(ingredients: Iterable[Ingredient]) -> IngredientStats:
    """Return library totals used by the dashboard."""
    items = list(ingredients)
    if not items:
        return IngredientStats(
            total=0, with_allergens=0, unique_brands=0, avg_calories=0
        )
    calories = sum(item.calories or 0 for item in items)
    return IngredientStats(
        total=len(items),
        with_allergens=sum(1 for item in items if item.allergens),
        unique_brands=len({item.brand for item in items if item.brand}),
        avg_calories=round_half_up(calories / len(items)),
    )


def _ingredient_matches(ingredient: Ingredient, query: str) -> bool:
    if query in ingredient.name.lower():
        return True
    if ingredient.brand and query in ingredient.brand.lower():
        return True
    return contains_allergen(ingredient.allergens, query)


def _recipe_avoids(recipe: Recipe, allergen: str) -> bool:
    return all(
        not contains_allergen(line.ingredient.allergens, allergen)
        for line in recipe.lines
        if line.ingredient is not None
    )


def _within_calories(
    items: list[T], state: FilterState, calories: Callable[[T], float]
) -> list[T]:
    if state.calories_min is not None:
        items = [item for item in items if calories(item) >= state.calories_min]
    if state.calories_max is not None:
        items = [item for item in items if calories(item) <= state.calories_max]
    return items


# Each entry is (key function, reverse).
_Sort = tuple[Callable[[object], object], bool]

_INGREDIENT_SORTS: dict[SortKey, _Sort] = {
    SortKey.NAME: (lambda item: item.name.casefold(), False),
    SortKey.NAME_DESC: (lambda item: item.name.casefold(), True),
    SortKey.CALORIES: (lambda item: item.calories or 0, False),
    SortKey.CALORIES_DESC: (lambda item: item.calories or 0, True),
    SortKey.PROTEIN: (lambda item: item.protein or 0, False),
    SortKey.PROTEIN_DESC: (lambda item: item.protein or 0, True),
    SortKey.RECENT: (lambda item: str(item.id), True),
}

_RECIPE_SORTS: dict[SortKey, _Sort] = {
    SortKey.NAME: (lambda item: item.name.casefold(), False),
    SortKey.NAME_DESC: (lambda item: item.name.casefold(), True),
    SortKey.CALORIES: (recipe_calories, False),
    SortKey.CALORIES_DESC: (recipe_calories, True),
}


def _sort(items: list[T], sort_by: SortKey, sorts: dict[SortKey, _Sort]) -> list[T]:
    key, reverse = sorts.get(sort_by, sorts[SortKey.NAME])
    return sorted(items, key=key, reverse=reverse)
