"""
Single entry point tying validation, correction and metrics together.
"""

from refractometer_core.correction import correct_reading
from refractometer_core.metrics import abv, attenuation, calories
from refractometer_core.models import CorrectionResult, RefractometerReading, to_pair
from refractometer_core.units import GravityUnit
from refractometer_core.validation import find_violation


def calculate(reading: RefractometerReading) -> CorrectionResult:
    """
    Validate a reading pair, correct it and derive metrics.

    Metrics are computed from the SG original gravity and the SG
    adjusted final gravity.

    Raises:
        RangeViolation: If a reading is outside its unit range or not finite
        OrderingViolation: If original is not greater than final
        DegenerateInputError: If a metric formula is undefined for the input
    """
    error = find_violation(reading.original_gravity, reading.final_gravity, reading.unit)
    if error is not None:
        raise error

    adjusted_sg = correct_reading(reading)

    original = to_pair(reading.original_gravity, reading.unit)
    final = to_pair(reading.final_gravity, reading.unit)
    adjusted_final = to_pair(adjusted_sg, GravityUnit.SG)

    return CorrectionResult(
        unit=reading.unit,
        original=original,
        final=final,
        adjusted_final=adjusted_final,
        abv=abv(original.sg, adjusted_final.sg),
        attenuation=attenuation(original.sg, adjusted_final.sg),
        calories=calories(original.sg, adjusted_final.sg),
    )


def compute(
    original_gravity: float,
    final_gravity: float,
    as_brix: bool = False,
) -> CorrectionResult:
    """
    Validate two readings and compute the corrected gravity and metrics.

    Args:
        original_gravity: Reading before fermentation
        final_gravity: Current refractometer reading
        as_brix: True if both readings are in Brix, False for SG

    Returns:
        CorrectionResult with all nine output values

    Raises:
        RangeViolation: If a reading is outside its unit range or not finite
        OrderingViolation: If original is not greater than final
        DegenerateInputError: If a metric formula is undefined for the input
    """
    reading = RefractometerReading(
        original_gravity=original_gravity,
        final_gravity=final_gravity,
        unit=GravityUnit.BRIX if as_brix else GravityUnit.SG,
    )
    return calculate(reading)
