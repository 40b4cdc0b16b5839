"""
Input validation for refractometer reading pairs.
"""

import math

from refractometer_core.exceptions import (
    OrderingViolation,
    RangeViolation,
    ValidationError,
)
from refractometer_core.models import RefractometerReading
from refractometer_core.units import GravityUnit, gravity_range, parse_unit


def find_violation(
    original: float,
    final: float,
    unit: GravityUnit | str = GravityUnit.SG,
) -> ValidationError | None:
    """
    Check a reading pair without raising.

    Checks run in order: finiteness, unit range, then ordering.

    Args:
        original: Original gravity reading
        final: Final gravity reading
        unit: Scale both readings are expressed in

    Returns:
        The first violation found, or None if the pair is valid
    """
    unit = parse_unit(unit)
    low, high = gravity_range(unit)

    for label, value in (("original", original), ("final", final)):
        if not math.isfinite(value):
            return RangeViolation(f"{label} gravity must be a finite number, got {value}")
        if not low <= value <= high:
            return RangeViolation(
                f"{label} gravity {value} is outside the {unit.value} range "
                f"[{low}, {high}]"
            )

    if original <= final:
        return OrderingViolation(
            f"original gravity ({original}) must be greater than "
            f"final gravity ({final})"
        )
    return None


def validate_readings(
    original: float,
    final: float,
    unit: GravityUnit | str = GravityUnit.SG,
) -> RefractometerReading:
    """
    Validate a reading pair.

    Args:
        original: Original gravity reading
        final: Final gravity reading
        unit: Scale both readings are expressed in

    Returns:
        RefractometerReading for the validated pair

    Raises:
        RangeViolation: If a value is non-finite or outside the unit range
        OrderingViolation: If original is not greater than final
    """
    error = find_violation(original, final, unit)
    if error is not None:
        raise error
    return RefractometerReading(
        original_gravity=original,
        final_gravity=final,
        unit=unit,
    )
