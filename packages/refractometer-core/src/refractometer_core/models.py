"""
Data models for refractometer corrections.

All models use Pydantic v2 for validation and serialisation.
Gravity values are carried on both scales (SG and Brix) once normalised.
"""

from typing import Any

from pydantic import BaseModel, Field, ConfigDict, field_validator

from refractometer_core.units import GravityUnit, parse_unit, sg_to_brix, brix_to_sg


class RefractometerReading(BaseModel):
    """
    A pair of refractometer readings taken before and during/after fermentation.

    Both readings are expressed in the same unit.
    """

    model_config = ConfigDict(frozen=True)

    original_gravity: float = Field(..., description="Reading before fermentation")
    final_gravity: float = Field(..., description="Current or final reading")
    unit: GravityUnit = Field(
        default=GravityUnit.SG,
        description="Scale both readings are expressed in",
    )

    @field_validator("unit", mode="before")
    @classmethod
    def coerce_unit(cls, value: Any) -> GravityUnit:
        return parse_unit(value)

    @property
    def as_brix(self) -> bool:
        """True when the readings are in degrees Brix."""
        return self.unit == GravityUnit.BRIX

    def brix_values(self) -> tuple[float, float]:
        """Get (original, final) in Brix, converting from SG if needed."""
        if self.as_brix:
            return self.original_gravity, self.final_gravity
        return sg_to_brix(self.original_gravity), sg_to_brix(self.final_gravity)

    def sg_values(self) -> tuple[float, float]:
        """Get (original, final) in SG, converting from Brix if needed."""
        if self.as_brix:
            return brix_to_sg(self.original_gravity), brix_to_sg(self.final_gravity)
        return self.original_gravity, self.final_gravity


class GravityPair(BaseModel):
    """One gravity value expressed on both scales."""

    model_config = ConfigDict(frozen=True)

    sg: float = Field(..., description="Specific gravity")
    brix: float = Field(..., description="Degrees Brix")


def to_pair(value: float, unit: GravityUnit | str) -> GravityPair:
    """
    Normalise a single reading to both scales.

    The scale the value was supplied in keeps the value as given.

    Args:
        value: Gravity reading
        unit: Scale of the reading

    Returns:
        GravityPair with both SG and Brix populated
    """
    if parse_unit(unit) == GravityUnit.BRIX:
        return GravityPair(sg=brix_to_sg(value), brix=value)
    return GravityPair(sg=value, brix=sg_to_brix(value))


class CorrectionResult(BaseModel):
    """
    Alcohol-corrected gravity and derived metrics for one reading pair.

    ABV and attenuation are percentages; calories are kcal per
    12 US fl oz serving.
    """

    model_config = ConfigDict(frozen=True)

    unit: GravityUnit = Field(..., description="Scale of the supplied readings")
    original: GravityPair = Field(..., description="Original gravity")
    final: GravityPair = Field(..., description="Uncorrected final gravity")
    adjusted_final: GravityPair = Field(
        ...,
        description="Final gravity corrected for dissolved alcohol",
    )
    abv: float = Field(..., description="Alcohol by volume percentage")
    attenuation: float = Field(..., description="Apparent attenuation percentage")
    calories: float = Field(..., description="kcal per 12 oz serving")

    @property
    def original_sg(self) -> float:
        return self.original.sg

    @property
    def original_brix(self) -> float:
        return self.original.brix

    @property
    def final_sg(self) -> float:
        return self.final.sg

    @property
    def final_brix(self) -> float:
        return self.final.brix

    @property
    def adjusted_final_sg(self) -> float:
        return self.adjusted_final.sg

    @property
    def adjusted_final_brix(self) -> float:
        return self.adjusted_final.brix

    def to_dict(self) -> dict[str, Any]:
        """Flatten to a single-level mapping for display or JSON output."""
        return {
            "unit": self.unit.value,
            "original_sg": self.original_sg,
            "original_brix": self.original_brix,
            "final_sg": self.final_sg,
            "final_brix": self.final_brix,
            "adjusted_final_sg": self.adjusted_final_sg,
            "adjusted_final_brix": self.adjusted_final_brix,
            "abv": self.abv,
            "attenuation": self.attenuation,
            "calories": self.calories,
        }
