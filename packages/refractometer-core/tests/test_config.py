"""
Tests for environment configuration.
"""

import pytest
from refractometer_core.config import get_config
from refractometer_core.exceptions import ConfigurationError
from refractometer_core.units import GravityUnit


class TestGetConfig:
    """Tests for get_config."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("REFRACTOMETER_DEFAULT_UNIT", raising=False)
        monkeypatch.delenv("REFRACTOMETER_OUTPUT", raising=False)
        config = get_config()
        assert config.default_unit == GravityUnit.SG
        assert config.output_format == "text"
        assert not config.default_as_brix

    def test_brix_default(self, monkeypatch):
        monkeypatch.setenv("REFRACTOMETER_DEFAULT_UNIT", "Brix")
        monkeypatch.delenv("REFRACTOMETER_OUTPUT", raising=False)
        config = get_config()
        assert config.default_unit == GravityUnit.BRIX
        assert config.default_as_brix

    def test_invalid_unit(self, monkeypatch):
        monkeypatch.setenv("REFRACTOMETER_DEFAULT_UNIT", "plato")
        with pytest.raises(ConfigurationError):
            get_config()

    def test_invalid_output(self, monkeypatch):
        monkeypatch.delenv("REFRACTOMETER_DEFAULT_UNIT", raising=False)
        monkeypatch.setenv("REFRACTOMETER_OUTPUT", "yaml")
        with pytest.raises(ConfigurationError):
            get_config()
