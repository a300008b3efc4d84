"""Conversion of recipe quantities into ingredient serving units."""

from dataclasses import dataclass

from recipe_tracker.domain.units import Unit, base_magnitude, unit_group


@dataclass(frozen=True)
class Conversion:
    """Outcome of converting a quantity into a target unit.

    When the units belong to different groups, ``compatible`` is False and
    ``value`` carries the unconverted quantity.
    """

    value: float
    compatible: bool

    @classmethod
    def converted(cls, value: float) -> "Conversion":
        return cls(value=value, compatible=True)

    @classmethod
    def incompatible(cls, quantity: float) -> "Conversion":
        return cls(value=quantity, compatible=False)


def convert(target_unit: Unit, quantity: float, quantity_unit: Unit) -> Conversion:
    """Express ``quantity`` of ``quantity_unit`` as a count of ``target_unit``."""
    if target_unit == quantity_unit:
        return Conversion.converted(quantity)
    if unit_group(target_unit) is not unit_group(quantity_unit):
        return Conversion.incompatible(quantity)
    in_base_units = quantity * base_magnitude(quantity_unit)
    return Conversion.converted(in_base_units / base_magnitude(target_unit))


def conversion_multiplier(
    target_unit: Unit, quantity: float, quantity_unit: Unit
) -> float:
    """Return how many target units the quantity represents.

    Incompatible units fall back to the quantity unchanged.
    """
    return convert(target_unit, quantity, quantity_unit).value


def is_compatible(first: Unit, second: Unit) -> bool:
    """Return True when two units can be converted into each other."""
    return unit_group(first) is unit_group(second)
