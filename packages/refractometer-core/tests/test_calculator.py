"""
End-to-end tests for the refractometer calculator.
"""

import pytest
from refractometer_core.calculator import calculate, compute
from refractometer_core.exceptions import (
    DegenerateInputError,
    OrderingViolation,
    RangeViolation,
)
from refractometer_core.models import RefractometerReading
from refractometer_core.units import GravityUnit


@pytest.fixture
def sg_result():
    return compute(1.067, 1.033, as_brix=False)


@pytest.fixture
def brix_result():
    return compute(16.36, 8.29, as_brix=True)


class TestSpecificGravityInput:
    """Documented example entered as specific gravity."""

    def test_original(self, sg_result):
        assert sg_result.original_sg == 1.067
        assert sg_result.original_brix == 16.36

    def test_final(self, sg_result):
        assert sg_result.final_sg == 1.033
        assert sg_result.final_brix == 8.29

    def test_adjusted_final(self, sg_result):
        assert sg_result.adjusted_final_sg == 1.015
        assert sg_result.adjusted_final_brix == 3.83

    def test_metrics(self, sg_result):
        assert sg_result.abv == 6.83
        assert sg_result.attenuation == 77.61
        assert abs(sg_result.calories - 226.72) < 0.011

    def test_unit_recorded(self, sg_result):
        assert sg_result.unit == GravityUnit.SG


class TestBrixInput:
    """Equivalent readings entered in Brix give the same results."""

    def test_original(self, brix_result):
        assert brix_result.original_brix == 16.36
        assert brix_result.original_sg == 1.067

    def test_final(self, brix_result):
        assert brix_result.final_brix == 8.29
        assert brix_result.final_sg == 1.033

    def test_matches_sg_path(self, sg_result, brix_result):
        assert brix_result.adjusted_final == sg_result.adjusted_final
        assert brix_result.abv == sg_result.abv
        assert brix_result.attenuation == sg_result.attenuation
        assert brix_result.calories == pytest.approx(sg_result.calories, abs=0.01)


class TestRejectedInput:
    """Validation errors surface before any computation."""

    @pytest.mark.parametrize("as_brix", [False, True])
    def test_ordering(self, as_brix):
        with pytest.raises(OrderingViolation):
            compute(1.030, 1.050, as_brix=as_brix)

    def test_range(self):
        with pytest.raises(RangeViolation):
            compute(50, 10, as_brix=True)

    def test_degenerate_original_gravity(self):
        with pytest.raises(DegenerateInputError):
            compute(1.000, 0.990, as_brix=False)

    def test_degenerate_brix_rounding_to_water(self):
        # 0.1 Brix converts to 1.000 SG after rounding
        with pytest.raises(DegenerateInputError):
            compute(0.1, 0.05, as_brix=True)


class TestCalculate:
    """Tests for the model-based entry point."""

    def test_reading_model(self):
        reading = RefractometerReading(original_gravity=1.067, final_gravity=1.033)
        assert calculate(reading).adjusted_final_sg == 1.015

    def test_reading_model_ordering_checked(self):
        reading = RefractometerReading(original_gravity=1.030, final_gravity=1.050)
        with pytest.raises(OrderingViolation):
            calculate(reading)

    def test_reading_model_range_checked(self):
        reading = RefractometerReading(
            original_gravity=50, final_gravity=10, unit=GravityUnit.BRIX
        )
        with pytest.raises(RangeViolation):
            calculate(reading)

    def test_to_dict_has_all_outputs(self, sg_result):
        data = sg_result.to_dict()
        assert set(data) == {
            "unit",
            "original_sg",
            "original_brix",
            "final_sg",
            "final_brix",
            "adjusted_final_sg",
            "adjusted_final_brix",
            "abv",
            "attenuation",
            "calories",
        }
        assert data["unit"] == "sg"
        assert data["abv"] == 6.83
