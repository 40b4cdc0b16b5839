"""
Derived brewing metrics from original and corrected final gravity.

All functions take specific gravity values. Results are rounded to
2 decimal places.
"""

from refractometer_core.exceptions import DegenerateInputError

ABV_FACTOR = 131.25

# Calorie model constants (kcal per 12 US fl oz)
ALCOHOL_CALORIE_FACTOR = 1881.22
CARB_CALORIE_FACTOR = 3550.0
CALORIE_POLE_SG = 1.775


def abv(og: float, fg: float) -> float:
    """
    Alcohol by volume.

    ABV = (OG - FG) × 131.25

    Args:
        og: Original gravity (SG)
        fg: Final gravity (SG)

    Returns:
        ABV percentage
    """
    return round((og - fg) * ABV_FACTOR, 2)


def attenuation(og: float, fg: float) -> float:
    """
    Apparent attenuation: share of original gravity points consumed.

    Args:
        og: Original gravity (SG)
        fg: Final gravity (SG)

    Returns:
        Attenuation percentage

    Raises:
        DegenerateInputError: If og is exactly 1.000 (no gravity points)
    """
    if og == 1:
        raise DegenerateInputError(
            "Original gravity of 1.000 has no gravity points to attenuate"
        )
    og_points = (og - 1) * 1000
    fg_points = (fg - 1) * 1000
    return round((og_points - fg_points) / ((og - 1) * 10), 2)


def calories(og: float, fg: float) -> float:
    """
    Calories per 12 oz serving, alcohol plus residual carbohydrate.

    Args:
        og: Original gravity (SG)
        fg: Final gravity (SG)

    Returns:
        kcal per 12 US fl oz

    Raises:
        DegenerateInputError: If og is exactly 1.775
    """
    if og == CALORIE_POLE_SG:
        raise DegenerateInputError(
            f"Calorie model is undefined at an original gravity of {CALORIE_POLE_SG}"
        )
    from_alcohol = ALCOHOL_CALORIE_FACTOR * fg * (og - fg) / (CALORIE_POLE_SG - og)
    from_carbs = CARB_CALORIE_FACTOR * fg * (0.1808 * og + 0.8192 * fg - 1.0004)
    return round(from_alcohol + from_carbs, 2)
