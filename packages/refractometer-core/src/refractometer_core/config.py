"""
Configuration management for refractometer tools.
"""

import os
from dataclasses import dataclass

from refractometer_core.exceptions import ConfigurationError, UnitConversionError
from refractometer_core.units import GravityUnit, parse_unit

OUTPUT_FORMATS = ("text", "json")


@dataclass
class RefractometerConfig:
    """Defaults shared by the CLI and the MCP server."""

    default_unit: GravityUnit = GravityUnit.SG
    output_format: str = "text"

    @property
    def default_as_brix(self) -> bool:
        """True when readings default to Brix."""
        return self.default_unit == GravityUnit.BRIX


def get_config() -> RefractometerConfig:
    """
    Get refractometer configuration from environment.

    Environment variables:
        REFRACTOMETER_DEFAULT_UNIT: "sg" (default) or "brix"
        REFRACTOMETER_OUTPUT: "text" (default) or "json"

    Returns:
        RefractometerConfig instance

    Raises:
        ConfigurationError: If a variable holds an unsupported value
    """
    unit_name = os.environ.get("REFRACTOMETER_DEFAULT_UNIT", GravityUnit.SG.value)
    try:
        default_unit = parse_unit(unit_name)
    except UnitConversionError as e:
        raise ConfigurationError(
            f"REFRACTOMETER_DEFAULT_UNIT must be 'sg' or 'brix', got {unit_name!r}"
        ) from e

    output_format = os.environ.get("REFRACTOMETER_OUTPUT", "text").strip().lower()
    if output_format not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"REFRACTOMETER_OUTPUT must be one of {', '.join(OUTPUT_FORMATS)}, "
            f"got {output_format!r}"
        )

    return RefractometerConfig(default_unit=default_unit, output_format=output_format)
