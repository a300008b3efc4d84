"""Tests for the unit model."""

import pytest

from recipe_tracker.domain.units import (
    Unit,
    UnitGroup,
    base_magnitude,
    parse_unit,
    storage_name,
    unit_group,
    units_in_group,
)


def test_every_unit_belongs_to_one_group() -> None:
    grouped = [unit for group in UnitGroup for unit in units_in_group(group)]

    assert sorted(grouped) == sorted(Unit)
    assert len(grouped) == len(set(grouped))


def test_unit_groups() -> None:
    assert unit_group(Unit.OUNCE) is UnitGroup.WEIGHT
    assert unit_group(Unit.TABLESPOON) is UnitGroup.VOLUME
    assert unit_group(Unit.UNIT) is UnitGroup.COUNT


def test_base_magnitudes() -> None:
    assert base_magnitude(Unit.GRAM) == 1
    assert base_magnitude(Unit.POUND) == pytest.approx(453.592)
    assert base_magnitude(Unit.CUP) == pytest.approx(236.588)
    assert base_magnitude(Unit.UNIT) == 1
    assert all(base_magnitude(unit) > 0 for unit in Unit)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("g", Unit.GRAM),
        (" TBSP ", Unit.TABLESPOON),
        ("TABLESPOON", Unit.TABLESPOON),
        ("milliiliter", Unit.MILLILITER),
        ("MILLILITER", Unit.MILLILITER),
        (Unit.CUP, Unit.CUP),
    ],
)
def test_parse_unit_accepts_ui_and_storage_names(raw, expected) -> None:
    assert parse_unit(raw) is expected


def test_parse_unit_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="Unknown unit"):
        parse_unit("pinch")


def test_storage_name_round_trips_through_parse() -> None:
    assert storage_name(Unit.TEASPOON) == "TEASPOON"
    assert all(parse_unit(storage_name(unit)) is unit for unit in Unit)
