"""Unit tests for the concentration risk factor."""

from __future__ import annotations

import math

import pytest

from simm_calc.contracts.errors import ConfigurationError
from simm_calc.engine.concentration import (
    concentration_factor,
    concentration_input,
    concentration_ratio,
)


class TestConcentrationFactor:
    """CR = max(1, sqrt(G / T))."""

    def test_below_threshold_is_exactly_one(self):
        assert concentration_factor(1e6, 230e6) == 1.0

    def test_at_threshold_is_one(self):
        assert concentration_factor(230e6, 230e6) == 1.0

    def test_above_threshold(self):
        assert concentration_factor(40e6, 10e6) == pytest.approx(2.0)

    def test_zero_exposure(self):
        assert concentration_factor(0.0, 10e6) == 1.0

    @pytest.mark.parametrize("threshold", [0.0, -1.0, math.inf, math.nan])
    def test_invalid_threshold_raises(self, threshold: float):
        with pytest.raises(ConfigurationError):
            concentration_factor(1.0, threshold)


class TestConcentrationInput:
    """G is the sum of absolute net sensitivities."""

    def test_uses_absolute_values(self):
        assert concentration_input([10.0, -20.0, 5.0]) == 35.0

    def test_empty(self):
        assert concentration_input([]) == 0.0

    def test_order_independent(self):
        amounts = [0.1, 1e16, -0.2, 3.3, -1e16]

        assert concentration_input(amounts) == concentration_input(list(reversed(amounts)))


class TestConcentrationRatio:
    """g_bc = min(CR_b, CR_c) / max(CR_b, CR_c)."""

    def test_equal_factors(self):
        assert concentration_ratio(1.0, 1.0) == 1.0

    def test_symmetric(self):
        assert concentration_ratio(2.0, 1.0) == concentration_ratio(1.0, 2.0) == 0.5
