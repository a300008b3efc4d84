"""Whole-plus-fraction quantity entry for volume units."""

import math

from recipe_tracker.domain.units import Unit, UnitGroup, unit_group

COMMON_FRACTIONS: tuple[tuple[str, float], ...] = (
    ("1/8", 0.125),
    ("1/4", 0.25),
    ("1/3", 0.333333),
    ("3/8", 0.375),
    ("1/2", 0.5),
    ("5/8", 0.625),
    ("2/3", 0.666667),
    ("3/4", 0.75),
    ("7/8", 0.875),
)

SNAP_TOLERANCE = 0.01
_LABEL_TOLERANCE = 0.0001


def is_fractionable(unit: Unit) -> bool:
    """Return True when quantities in this unit may be entered as fractions."""
    return unit_group(unit) is UnitGroup.VOLUME


def compose(whole: int, fraction: float) -> float:
    """Combine a whole number and a fraction decimal into one quantity."""
    return whole + fraction


def decompose(decimal: float) -> tuple[int, float]:
    """Split a quantity into its whole part and the nearest common fraction.

    The remainder is snapped to the closest table entry; when nothing is within
    the snap tolerance the fraction is 0 and the remainder is dropped.
    """
    whole = math.floor(decimal)
    remainder = decimal - whole
    closest = 0.0
    closest_diff = 1.0
    for _, value in COMMON_FRACTIONS:
        diff = abs(remainder - value)
        if diff < closest_diff:
            closest_diff = diff
            closest = value
    fraction = closest if closest_diff < SNAP_TOLERANCE else 0.0
    return whole, fraction


def display_label(fraction: float) -> str | None:
    """Return the label for a fraction decimal, e.g. "1/2", or None."""
    for label, value in COMMON_FRACTIONS:
        if abs(value - fraction) < _LABEL_TOLERANCE:
            return label
    return None


def format_quantity(quantity: float, unit: Unit) -> str:
    """Format a quantity for display, using fractions for volume units."""
    if is_fractionable(unit):
        whole, fraction = decompose(quantity)
        label = display_label(fraction) if fraction else None
        if label is not None:
            return label if whole == 0 else f"{whole} {label}"
    return f"{quantity:.2f}".rstrip("0").rstrip(".")
