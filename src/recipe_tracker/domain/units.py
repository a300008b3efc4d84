"""Measurement units and their conversion groups."""

from enum import StrEnum


class Unit(StrEnum):
    """Supported measurement units, keyed by their short UI names."""

    GRAM = "g"
    OUNCE = "oz"
    POUND = "lb"
    MILLILITER = "ml"
    TEASPOON = "tsp"
    TABLESPOON = "tbsp"
    CUP = "cup"
    UNIT = "unit"


class UnitGroup(StrEnum):
    """Compatibility groups; conversion only happens inside a group."""

    WEIGHT = "weight"
    VOLUME = "volume"
    COUNT = "count"


_UNIT_GROUPS: dict[Unit, UnitGroup] = {
    Unit.GRAM: UnitGroup.WEIGHT,
    Unit.OUNCE: UnitGroup.WEIGHT,
    Unit.POUND: UnitGroup.WEIGHT,
    Unit.MILLILITER: UnitGroup.VOLUME,
    Unit.TEASPOON: UnitGroup.VOLUME,
    Unit.TABLESPOON: UnitGroup.VOLUME,
    Unit.CUP: UnitGroup.VOLUME,
    Unit.UNIT: UnitGroup.COUNT,
}

# Grams per unit for weight, milliliters per unit for volume.
_BASE_MAGNITUDES: dict[Unit, float] = {
    Unit.GRAM: 1.0,
    Unit.OUNCE: 28.3495,
    Unit.POUND: 453.592,
    Unit.MILLILITER: 1.0,
    Unit.TEASPOON: 4.92892,
    Unit.TABLESPOON: 14.7868,
    Unit.CUP: 236.588,
    Unit.UNIT: 1.0,
}

_STORAGE_NAMES: dict[Unit, str] = {
    Unit.GRAM: "GRAM",
    Unit.OUNCE: "OUNCE",
    Unit.POUND: "POUND",
    Unit.MILLILITER: "MILLILITER",
    Unit.TEASPOON: "TEASPOON",
    Unit.TABLESPOON: "TABLESPOON",
    Unit.CUP: "CUP",
    Unit.UNIT: "UNIT",
}

# Legacy rows were written with a misspelled milliliter name.
_STORAGE_ALIASES: dict[str, Unit] = {
    **{name: unit for unit, name in _STORAGE_NAMES.items()},
    "MILLIILITER": Unit.MILLILITER,
}


def unit_group(unit: Unit) -> UnitGroup:
    """Return the compatibility group of a unit."""
    return _UNIT_GROUPS[unit]


def base_magnitude(unit: Unit) -> float:
    """Return how many base units (grams, milliliters or items) one unit equals."""
    return _BASE_MAGNITUDES[unit]


def units_in_group(group: UnitGroup) -> list[Unit]:
    """Return the units of a group in declaration order."""
    return [unit for unit in Unit if _UNIT_GROUPS[unit] is group]


def storage_name(unit: Unit) -> str:
    """Return the enum name used for a unit in persisted rows."""
    return _STORAGE_NAMES[unit]


def parse_unit(raw: str | Unit) -> Unit:
    """Parse a UI abbreviation or stored enum name into a unit.

    Raises ValueError for unknown names so bad input is rejected at ingestion
    instead of reaching the conversion code.
    """
    if isinstance(raw, Unit):
        return raw
    cleaned = str(raw).strip()
    try:
        return Unit(cleaned.lower())
    except ValueError:
        pass
    unit = _STORAGE_ALIASES.get(cleaned.upper())
    if unit is None:
        raise ValueError(f"Unknown unit: {raw!r}")
    return unit
