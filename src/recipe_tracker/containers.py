"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from recipe_tracker.adapters.supabase_ingredient_repository import (
    SupabaseIngredientRepository,
)
from recipe_tracker.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from recipe_tracker.config import Settings
from recipe_tracker.services.ingredients import IngredientService
from recipe_tracker.services.recipes import RecipeService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    ingredient_service: IngredientService
    recipe_service: RecipeService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    ingredient_repository = SupabaseIngredientRepository(supabase_client)
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    return AppContainer(
        settings=resolved_settings,
        ingredient_service=IngredientService(ingredient_repository),
        recipe_service=RecipeService(
            repository=recipe_repository,
            ingredient_repository=ingredient_repository,
            strict_unit_conversion=resolved_settings.strict_unit_conversion,
        ),
    )
