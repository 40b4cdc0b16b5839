"""
Gravity unit conversion for refractometer readings.

Supports specific gravity (SG) and degrees Brix. Both directions use
empirical fits that are not exact inverses of each other:
- SG to Brix: cubic polynomial, rounded to 2 decimal places
- Brix to SG: rational fit, rounded to 3 decimal places
"""

from enum import Enum

from refractometer_core.exceptions import UnitConversionError


class GravityUnit(str, Enum):
    """Density scales a refractometer can report."""

    SG = "sg"
    BRIX = "brix"


# Valid reading ranges per unit
SG_MIN = 0.0
SG_MAX = 1.200
BRIX_MIN = 0.0
BRIX_MAX = 44.1

GRAVITY_RANGES: dict[GravityUnit, tuple[float, float]] = {
    GravityUnit.SG: (SG_MIN, SG_MAX),
    GravityUnit.BRIX: (BRIX_MIN, BRIX_MAX),
}


def parse_unit(unit: GravityUnit | str) -> GravityUnit:
    """
    Coerce a unit name to a GravityUnit.

    Args:
        unit: Unit enum member or case-insensitive name ("sg", "brix")

    Returns:
        Matching GravityUnit

    Raises:
        UnitConversionError: If the name is not a known unit
    """
    if isinstance(unit, GravityUnit):
        return unit
    try:
        return GravityUnit(str(unit).strip().lower())
    except ValueError as e:
        raise UnitConversionError(f"Unknown gravity unit: {unit}") from e


def sg_to_brix(sg: float) -> float:
    """
    Convert specific gravity to Brix.

    Note: Only accurate for unfermented wort.

    Args:
        sg: Specific gravity (e.g., 1.050)

    Returns:
        Degrees Brix, rounded to 2 decimal places
    """
    brix = ((182.4601 * sg - 775.6821) * sg + 1262.7794) * sg - 669.5622
    return round(brix, 2)


def brix_to_sg(brix: float) -> float:
    """
    Convert Brix to specific gravity.

    Note: Only accurate for unfermented wort.

    Args:
        brix: Degrees Brix

    Returns:
        Specific gravity, rounded to 3 decimal places
    """
    return round((brix / (258.6 - ((brix / 258.2) * 227.1))) + 1, 3)


def convert_gravity(
    value: float,
    from_unit: GravityUnit | str,
    to_unit: GravityUnit | str,
) -> float:
    """
    Convert a gravity reading between SG and Brix.

    Args:
        value: The value to convert
        from_unit: Source unit
        to_unit: Target unit

    Returns:
        Converted value (unchanged when the units match)

    Raises:
        UnitConversionError: If units are invalid
    """
    from_unit = parse_unit(from_unit)
    to_unit = parse_unit(to_unit)

    if from_unit == to_unit:
        return value
    if from_unit == GravityUnit.SG:
        return sg_to_brix(value)
    return brix_to_sg(value)


def gravity_range(unit: GravityUnit | str) -> tuple[float, float]:
    """Get the (minimum, maximum) valid reading for a unit."""
    return GRAVITY_RANGES[parse_unit(unit)]
