"""Tests for the conversion engine."""

import pytest

from recipe_tracker.domain.conversion import (
    Conversion,
    conversion_multiplier,
    convert,
    is_compatible,
)
from recipe_tracker.domain.units import Unit, UnitGroup, unit_group, units_in_group


@pytest.mark.parametrize("unit", list(Unit))
def test_identity_conversion(unit: Unit) -> None:
    assert conversion_multiplier(unit, 3.7, unit) == 3.7


def test_converts_within_volume_group() -> None:
    assert conversion_multiplier(Unit.MILLILITER, 2, Unit.CUP) == pytest.approx(
        2 * 236.588
    )
    assert conversion_multiplier(Unit.TABLESPOON, 1, Unit.CUP) == pytest.approx(
        236.588 / 14.7868
    )


def test_converts_within_weight_group() -> None:
    assert conversion_multiplier(Unit.GRAM, 1, Unit.POUND) == pytest.approx(453.592)
    assert conversion_multiplier(Unit.OUNCE, 56.699, Unit.GRAM) == pytest.approx(2)


@pytest.mark.parametrize("group", list(UnitGroup))
def test_round_trip_within_group(group: UnitGroup) -> None:
    units = units_in_group(group)
    for first in units:
        for second in units:
            there = conversion_multiplier(first, 5, second)
            assert conversion_multiplier(second, there, first) == pytest.approx(5)


def test_cross_group_falls_back_to_quantity() -> None:
    assert conversion_multiplier(Unit.GRAM, 5, Unit.UNIT) == 5
    assert conversion_multiplier(Unit.GRAM, 2, Unit.CUP) == 2


def test_convert_tags_incompatible_units() -> None:
    assert convert(Unit.GRAM, 5, Unit.CUP) == Conversion(value=5, compatible=False)
    assert convert(Unit.CUP, 1, Unit.CUP) == Conversion.converted(1)
    assert convert(Unit.GRAM, 1, Unit.OUNCE).compatible


def test_is_compatible_matches_groups() -> None:
    for first in Unit:
        for second in Unit:
            expected = unit_group(first) is unit_group(second)
            assert is_compatible(first, second) is expected
