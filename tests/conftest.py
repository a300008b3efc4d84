"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from recipe_tracker.config import Settings
from recipe_tracker.containers import AppContainer
from recipe_tracker.domain.models import Ingredient, Recipe, RecipeLine
from recipe_tracker.domain.units import Unit
from recipe_tracker.services.ingredients import IngredientRepository, IngredientService
from recipe_tracker.services.recipes import RecipeRepository, RecipeService

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
    "allergens",
)
_RECIPE_FIELDS = ("name", "description", "servings", "allergens")


def make_ingredient(  # noqa: PLR0913
    name: str = "Oats",
    *,
    user_id: UUID | None = None,
    brand: str | None = None,
    calories: float | None = 100,
    protein: float | None = 0,
    fat: float | None = 0,
    carbs: float | None = 0,
    sugar: float | None = 0,
    serving_size: float = 1,
    serving_unit: Unit = Unit.GRAM,
    allergens: tuple[str, ...] = (),
    ingredient_id: UUID | None = None,
) -> Ingredient:
    return Ingredient(
        id=ingredient_id or uuid4(),
        user_id=user_id or uuid4(),
        name=name,
        brand=brand,
        calories=calories,
        protein=protein,
        fat=fat,
        carbs=carbs,
        sugar=sugar,
        serving_size=serving_size,
        serving_unit=serving_unit,
        allergens=allergens,
    )


def make_recipe(
    name: str = "Porridge",
    lines: list[RecipeLine] | None = None,
    *,
    servings: int = 1,
    description: str | None = None,
    user_id: UUID | None = None,
) -> Recipe:
    return Recipe(
        id=uuid4(),
        user_id=user_id or uuid4(),
        name=name,
        description=description,
        servings=servings,
        lines=tuple(lines or ()),
    )


def line_for(
    ingredient: Ingredient, quantity: float, unit: Unit | None = None
) -> RecipeLine:
    return RecipeLine(
        ingredient_id=ingredient.id,
        quantity=quantity,
        unit=unit or ingredient.serving_unit,
        ingredient=ingredient,
    )


@dataclass
class InMemoryIngredientRepository(IngredientRepository):
    """In-memory ingredient repository for tests."""

    ingredients: dict[UUID, Ingredient] = field(default_factory=dict)

    def create_ingredient(
        self, user_id: UUID, payload: dict[str, object]
    ) -> Ingredient:
        now = datetime.now(tz=UTC)
        ingredient = Ingredient(
            id=uuid4(),
            user_id=user_id,
            name=str(payload.get("name", "")),
            brand=payload.get("brand"),
            calories=payload.get("calories"),
            protein=payload.get("protein"),
            fat=payload.get("fat"),
            carbs=payload.get("carbs"),
            sugar=payload.get("sugar"),
            serving_size=float(payload.get("serving_size", 1.0)),
            serving_unit=payload.get("serving_unit", Unit.UNIT),
            allergens=tuple(payload.get("allergens") or ()),
            created_at=now,
            updated_at=now,
        )
        self.ingredients[ingredient.id] = ingredient
        return ingredient

    def update_ingredient(
        self, ingredient_id: UUID, payload: dict[str, object]
    ) -> Ingredient:
        changes = {key: payload[key] for key in _INGREDIENT_FIELDS if key in payload}
        updated = replace(
            self.ingredients[ingredient_id],
            **changes,
            updated_at=datetime.now(tz=UTC),
        )
        self.ingredients[ingredient_id] = updated
        return updated

    def get_ingredient(self, ingredient_id: UUID) -> Ingredient | None:
        return self.ingredients.get(ingredient_id)

    def list_ingredients(self, user_id: UUID) -> list[Ingredient]:
        return [item for item in self.ingredients.values() if item.user_id == user_id]

    def delete_ingredient(self, ingredient_id: UUID) -> None:
        self.ingredients.pop(ingredient_id, None)


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository that resolves lines at read time."""

    ingredient_repository: InMemoryIngredientRepository
    recipes: dict[UUID, Recipe] = field(default_factory=dict)

    def create_recipe(
        self, user_id: UUID, payload: dict[str, object], lines: list[RecipeLine]
    ) -> Recipe:
        recipe = Recipe(
            id=uuid4(),
            user_id=user_id,
            name=str(payload.get("name", "")),
            description=payload.get("description"),
            servings=int(payload.get("servings", 1)),
            lines=tuple(lines),
            allergens=tuple(payload.get("allergens") or ()),
            created_at=datetime.now(tz=UTC),
        )
        self.recipes[recipe.id] = recipe
        return recipe

    def update_recipe(
        self,
        recipe_id: UUID,
        payload: dict[str, object],
        lines: list[RecipeLine] | None,
    ) -> Recipe:
        changes = {key: payload[key] for key in _RECIPE_FIELDS if key in payload}
        if "allergens" in changes:
            changes["allergens"] = tuple(changes["allergens"] or ())
        if lines is not None:
            changes["lines"] = tuple(lines)
        self.recipes[recipe_id] = replace(self.recipes[recipe_id], **changes)
        return self._resolve(self.recipes[recipe_id])

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        recipe = self.recipes.get(recipe_id)
        return self._resolve(recipe) if recipe else None

    def list_recipes(self, user_id: UUID) -> list[Recipe]:
        return [
            self._resolve(recipe)
            for recipe in self.recipes.values()
            if recipe.user_id == user_id
        ]

    def delete_recipe(self, recipe_id: UUID) -> None:
        self.recipes.pop(recipe_id, None)

    def _resolve(self, recipe: Recipe) -> Recipe:
        lines = tuple(
            replace(
                line,
                ingredient=self.ingredient_repository.get_ingredient(
                    line.ingredient_id
                ),
            )
            for line in recipe.lines
        )
        return replace(recipe, lines=lines)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def ingredient_repository() -> InMemoryIngredientRepository:
    return InMemoryIngredientRepository()


@pytest.fixture
def recipe_repository(
    ingredient_repository: InMemoryIngredientRepository,
) -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository(ingredient_repository)


@pytest.fixture
def ingredient_service(
    ingredient_repository: InMemoryIngredientRepository,
) -> IngredientService:
    return IngredientService(ingredient_repository)


@pytest.fixture
def recipe_service(
    recipe_repository: InMemoryRecipeRepository,
    ingredient_repository: InMemoryIngredientRepository,
) -> RecipeService:
    return RecipeService(
        repository=recipe_repository, ingredient_repository=ingredient_repository
    )


@pytest.fixture
def container(
    settings: Settings,
    ingredient_service: IngredientService,
    recipe_service: RecipeService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        ingredient_service=ingredient_service,
        recipe_service=recipe_service,
    )
