"""Errors raised by the service and persistence layers."""

from uuid import UUID

from recipe_tracker.domain.units import Unit


class RecipeTrackerError(Exception):
    """Base error for the application."""


class NotFoundError(RecipeTrackerError):
    """Entity is missing or belongs to another user."""

    def __init__(self, entity: str, entity_id: UUID) -> None:
        super().__init__(f"{entity.capitalize()} not found")
        self.entity = entity
        self.entity_id = entity_id


class IngredientNotAccessibleError(RecipeTrackerError):
    """A recipe line references an ingredient the user does not own."""

    def __init__(self, ingredient_id: UUID) -> None:
        super().__init__(f"Ingredient {ingredient_id} not found or not accessible")
        self.ingredient_id = ingredient_id


class IncompatibleUnitsError(RecipeTrackerError):
    """A recipe line unit cannot be converted to the ingredient serving unit."""

    def __init__(self, ingredient_id: UUID, unit: Unit, serving_unit: Unit) -> None:
        super().__init__(
            f"Unit {unit} cannot be converted to {serving_unit} "
            f"for ingredient {ingredient_id}"
        )
        self.ingredient_id = ingredient_id
        self.unit = unit
        self.serving_unit = serving_unit


class PersistenceError(RecipeTrackerError):
    """A repository write did not return the stored row."""
