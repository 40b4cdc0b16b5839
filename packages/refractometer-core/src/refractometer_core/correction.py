"""
Refractometer correction for dissolved alcohol.

Ethanol raises the refractive index of fermenting wort, so a refractometer
reads higher than a hydrometer once fermentation starts. The correction here
is Sean Terrill's linear fit, which maps the original and current Brix
readings to a true (hydrometer-equivalent) specific gravity.
"""

from refractometer_core.models import RefractometerReading

# Terrill linear correction coefficients
TERRILL_INTERCEPT = 1.0000
TERRILL_OG_COEFFICIENT = 0.00085683
TERRILL_FG_COEFFICIENT = 0.0034941


def adjusted_final_gravity(og_brix: float, fg_brix: float) -> float:
    """
    Compute the alcohol-corrected final gravity.

    Args:
        og_brix: Original reading in Brix
        fg_brix: Current refractometer reading in Brix

    Returns:
        Corrected final gravity in SG, rounded to 3 decimal places
    """
    sg = (
        TERRILL_INTERCEPT
        - TERRILL_OG_COEFFICIENT * og_brix
        + TERRILL_FG_COEFFICIENT * fg_brix
    )
    return round(sg, 3)


def correct_reading(reading: RefractometerReading) -> float:
    """Corrected final gravity (SG) for a reading pair in either unit."""
    og_brix, fg_brix = reading.brix_values()
    return adjusted_final_gravity(og_brix, fg_brix)
