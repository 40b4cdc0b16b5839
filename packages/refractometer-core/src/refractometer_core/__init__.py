"""
refractometer-core: Alcohol correction for refractometer readings.

Converts between specific gravity and Brix, corrects final readings for
dissolved ethanol, and derives ABV, attenuation and calories.
"""

from refractometer_core.models import (
    RefractometerReading,
    GravityPair,
    CorrectionResult,
    to_pair,
)
from refractometer_core.units import (
    GravityUnit,
    sg_to_brix,
    brix_to_sg,
    convert_gravity,
    gravity_range,
)
from refractometer_core.correction import adjusted_final_gravity, correct_reading
from refractometer_core.metrics import abv, attenuation, calories
from refractometer_core.validation import find_violation, validate_readings
from refractometer_core.calculator import calculate, compute
from refractometer_core.exceptions import (
    ErrorKind,
    RefractometerError,
    ValidationError,
    OrderingViolation,
    RangeViolation,
    DegenerateInputError,
    UnitConversionError,
    ConfigurationError,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "RefractometerReading",
    "GravityPair",
    "CorrectionResult",
    "to_pair",
    # Units
    "GravityUnit",
    "sg_to_brix",
    "brix_to_sg",
    "convert_gravity",
    "gravity_range",
    # Correction and metrics
    "adjusted_final_gravity",
    "correct_reading",
    "abv",
    "attenuation",
    "calories",
    # Validation
    "find_violation",
    "validate_readings",
    # Entry points
    "calculate",
    "compute",
    # Exceptions
    "ErrorKind",
    "RefractometerError",
    "ValidationError",
    "OrderingViolation",
    "RangeViolation",
    "DegenerateInputError",
    "UnitConversionError",
    "ConfigurationError",
]
