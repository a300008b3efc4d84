"""Pydantic models for ingredient and recipe request bodies."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from recipe_tracker.domain.units import Unit, parse_unit


def _validate_unit(value: str | Unit | None) -> Unit | None:
    if value is None:
        return None
    return parse_unit(value)


def _reject_nulls(data: Any, fields: tuple[str, ...]) -> Any:
    if isinstance(data, dict):
        for key in fields:
            if key in data and data[key] is None:
                msg = f"{key} may not be null"
                raise ValueError(msg)
    return data


class IngredientCreate(BaseModel):
    """Payload for creating an ingredient."""

    name: str = Field(min_length=1)
    brand: str | None = None
    calories: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    sugar: float | None = Field(default=None, ge=0)
    serving_size: float = Field(default=1.0, gt=0)
    serving_unit: Unit = Unit.UNIT
    allergens: list[str] = Field(default_factory=list)

    @field_validator("serving_unit", mode="before")
    @classmethod
    def parse_serving_unit(cls, value: str | Unit | None) -> Unit | None:
        return _validate_unit(value)


class IngredientUpdate(BaseModel):
    """Payload for updating an ingredient; unset fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1)
    brand: str | None = None
    calories: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    sugar: float | None = Field(default=None, ge=0)
    serving_size: float | None = Field(default=None, gt=0)
    serving_unit: Unit | None = None
    allergens: list[str] | None = None

    @model_validator(mode="before")
    @classmethod
    def reject_required_nulls(cls, data: Any) -> Any:
        return _reject_nulls(data, ("name", "serving_size", "serving_unit"))

    @field_validator("serving_unit", mode="before")
    @classmethod
    def parse_serving_unit(cls, value: str | Unit | None) -> Unit | None:
        return _validate_unit(value)


class RecipeLinePayload(BaseModel):
    """One ingredient line of a recipe payload."""

    ingredient_id: UUID
    quantity: float = Field(gt=0)
    unit: Unit = Unit.UNIT

    @field_validator("unit", mode="before")
    @classmethod
    def parse_line_unit(cls, value: str | Unit | None) -> Unit | None:
        return _validate_unit(value)


class RecipeCreate(BaseModel):
    """Payload for creating a recipe."""

    name: str = Field(min_length=1)
    description: str | None = None
    servings: int = Field(default=1, ge=1)
    ingredients: list[RecipeLinePayload] = Field(default_factory=list)
    allergens: list[str] = Field(default_factory=list)


class RecipeUpdate(BaseModel):
    """Payload for updating a recipe; lines and allergens are replaced when set."""

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    servings: int | None = Field(default=None, ge=1)
    ingredients: list[RecipeLinePayload] | None = None
    allergens: list[str] | None = None

    @model_validator(mode="before")
    @classmethod
    def reject_required_nulls(cls, data: Any) -> Any:
        return _reject_nulls(data, ("name", "servings"))
