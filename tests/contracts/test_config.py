"""Contract tests for CalculationConfig."""

from __future__ import annotations

import pytest

from simm_calc.contracts.config import CalculationConfig
from simm_calc.contracts.errors import (
    ERROR_INVALID_CONFIG,
    ERROR_UNSUPPORTED_VERSION,
    ConfigurationError,
)
from simm_calc.domain.enums import SimmVersion


class TestFactories:
    @pytest.mark.parametrize(
        ("factory", "version"),
        [
            (CalculationConfig.v2_5, SimmVersion.V2_5),
            (CalculationConfig.v2_6, SimmVersion.V2_6),
            (CalculationConfig.v2_7, SimmVersion.V2_7),
        ],
    )
    def test_version_factories(self, factory, version):
        config = factory()

        assert config.simm_version == version
        assert config.is_usd
        assert config.max_workers is None

    @pytest.mark.parametrize("spelling", ["2.6", "2_6", "v2_6", " V2.6 "])
    def test_for_version_spellings(self, spelling):
        assert CalculationConfig.for_version(spelling).simm_version == SimmVersion.V2_6

    def test_for_version_unsupported(self):
        with pytest.raises(ConfigurationError) as exc_info:
            CalculationConfig.for_version("2.4")

        assert exc_info.value.errors[0].code == ERROR_UNSUPPORTED_VERSION

    def test_version_label(self):
        assert CalculationConfig.v2_7().version_label == "2.7"


class TestValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"calculation_currency": "usd"},
            {"calculation_currency": "EURO"},
            {"exchange_rate": 0.0},
            {"exchange_rate": -1.0},
            {"exchange_rate": float("nan")},
            {"exchange_rate": True},
            {"max_workers": 0},
            {"simm_version": "2.6"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigurationError) as exc_info:
            CalculationConfig(**kwargs)

        assert exc_info.value.errors[0].code == ERROR_INVALID_CONFIG

    def test_non_usd(self):
        config = CalculationConfig.v2_6("EUR", 0.92)

        assert not config.is_usd
        assert config.exchange_rate == 0.92

    def test_frozen(self):
        config = CalculationConfig()

        with pytest.raises(AttributeError):
            config.exchange_rate = 2.0
