"""Tests for allergen aggregation."""

from uuid import uuid4

from recipe_tracker.domain.allergens import (
    allergen_from_restriction,
    contains_allergen,
    dietary_restrictions_from_allergens,
    recipe_allergens,
    unique_allergens,
)
from recipe_tracker.domain.models import RecipeLine
from recipe_tracker.domain.units import Unit
from tests.conftest import line_for, make_ingredient, make_recipe


def test_recipe_allergens_are_deduplicated_and_sorted() -> None:
    cheese = make_ingredient("Cheese", allergens=("Dairy", "Nuts"))
    bread = make_ingredient("Bread", allergens=("Nuts", "Gluten"))
    recipe = make_recipe(lines=[line_for(cheese, 1), line_for(bread, 1)])

    assert recipe_allergens(recipe) == ["Dairy", "Gluten", "Nuts"]


def test_recipe_allergens_are_case_sensitive() -> None:
    first = make_ingredient("A", allergens=("dairy",))
    second = make_ingredient("B", allergens=("Dairy",))
    recipe = make_recipe(lines=[line_for(first, 1), line_for(second, 1)])

    assert recipe_allergens(recipe) == ["Dairy", "dairy"]


def test_unresolved_lines_add_no_allergens() -> None:
    missing = RecipeLine(ingredient_id=uuid4(), quantity=1, unit=Unit.UNIT)

    assert recipe_allergens(make_recipe(lines=[missing])) == []


def test_dietary_restrictions_from_allergens() -> None:
    ingredients = [
        make_ingredient("Milk", allergens=("Dairy",)),
        make_ingredient("Peanuts", allergens=("Peanuts", "Dairy")),
        make_ingredient("Water"),
    ]

    assert unique_allergens(ingredients) == ["Dairy", "Peanuts"]
    assert dietary_restrictions_from_allergens(ingredients) == [
        "Dairy-Free",
        "Peanuts-Free",
    ]


def test_restriction_helpers() -> None:
    assert allergen_from_restriction("Gluten-Free") == "Gluten"
    assert contains_allergen(["Tree Nuts"], "nuts")
    assert not contains_allergen([], "nuts")
