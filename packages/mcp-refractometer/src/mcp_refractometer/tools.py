"""MCP tool definitions for refractometer corrections."""

from fastmcp import FastMCP

from refractometer_core.calculator import compute
from refractometer_core.config import get_config
from refractometer_core.exceptions import (
    ConfigurationError,
    DegenerateInputError,
    UnitConversionError,
    ValidationError,
)
from refractometer_core.units import GRAVITY_RANGES, GravityUnit, convert_gravity, parse_unit


def _resolve_unit(unit: str | None) -> GravityUnit:
    """Use the configured default when the caller does not pick a unit."""
    if unit is None:
        return get_config().default_unit
    return parse_unit(unit)


def _correct_reading(
    original_gravity: float,
    final_gravity: float,
    unit: str | None = None,
) -> dict:
    try:
        gravity_unit = _resolve_unit(unit)
    except UnitConversionError as e:
        return {"error": str(e), "kind": "unit"}
    except ConfigurationError as e:
        return {"error": str(e), "kind": "configuration"}

    try:
        result = compute(
            original_gravity,
            final_gravity,
            as_brix=gravity_unit == GravityUnit.BRIX,
        )
    except (ValidationError, DegenerateInputError) as e:
        return {"error": str(e), "kind": e.kind.value}

    return result.to_dict()


def _convert_gravity(value: float, from_unit: str, to_unit: str) -> dict:
    try:
        converted = convert_gravity(value, from_unit, to_unit)
    except UnitConversionError as e:
        return {"error": str(e), "kind": "unit"}

    return {
        "value": value,
        "from_unit": parse_unit(from_unit).value,
        "converted": converted,
        "to_unit": parse_unit(to_unit).value,
    }


def _gravity_ranges() -> dict:
    return {
        unit.value: {"min": low, "max": high}
        for unit, (low, high) in GRAVITY_RANGES.items()
    }


def register_tools(mcp: FastMCP) -> None:
    """Register all refractometer MCP tools."""

    @mcp.tool()
    def correct_reading(
        original_gravity: float,
        final_gravity: float,
        unit: str | None = None,
    ) -> dict:
        """
        Correct a refractometer reading for alcohol and estimate ABV.

        Args:
            original_gravity: Reading taken before fermentation
            final_gravity: Current refractometer reading
            unit: "sg" or "brix" (defaults to REFRACTOMETER_DEFAULT_UNIT)

        Returns:
            Original, final and adjusted final gravity in SG and Brix,
            plus ABV %, apparent attenuation % and calories per 12 oz.
            Rejected input returns {"error", "kind"} instead.
        """
        return _correct_reading(original_gravity, final_gravity, unit)

    @mcp.tool()
    def convert_gravity_reading(value: float, from_unit: str, to_unit: str) -> dict:
        """
        Convert a gravity reading between specific gravity and Brix.

        Args:
            value: Reading to convert
            from_unit: "sg" or "brix"
            to_unit: "sg" or "brix"
        """
        return _convert_gravity(value, from_unit, to_unit)

    @mcp.tool()
    def gravity_ranges() -> dict:
        """Valid reading range for each supported unit."""
        return _gravity_ranges()
