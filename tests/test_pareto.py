"""
Tests for growth projection and Pareto interpolation.

Tests cover:
- Compound growth projection
- Wealth thresholds
- Inverted Pareto coefficients and boundary correction
- Degenerate band detection
"""

import pytest
import sys
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from wealth_tax_model.projection import project
from wealth_tax_model.pareto import (
    corrected_shape_parameter,
    fit_band,
    is_degenerate,
    shape_parameter,
    wealth_threshold,
)


class TestProjection:
    """Test compound growth projection."""

    def test_zero_years(self):
        assert project(100.0, 0.05, 0) == 100.0

    def test_missing_growth_is_zero_growth(self):
        assert project(100.0, None, 10) == 100.0

    def test_compound_growth(self):
        assert project(100.0, 0.1, 2) == pytest.approx(121.0)

    def test_negative_growth(self):
        assert project(100.0, -0.5, 1) == pytest.approx(50.0)


class TestWealthThreshold:
    """Test conversion of income boundaries into wealth boundaries."""

    def test_concrete_scenario(self, top_band):
        """1M income at a 10% income/wealth ratio is 10M of wealth."""
        assert wealth_threshold(top_band, 0) == pytest.approx(10.0)

    def test_threshold_growth(self, top_band):
        band = replace(top_band, growth_threshold=0.1)
        assert wealth_threshold(band, 2) == pytest.approx(12.1)

    def test_avg_income_growth_does_not_move_threshold(self, top_band):
        band = replace(top_band, growth_avg_income=0.5)
        assert wealth_threshold(band, 3) == pytest.approx(10.0)

    def test_missing_ratio(self, top_band):
        assert wealth_threshold(replace(top_band, income_wealth_ratio=None), 0) is None

    def test_zero_ratio(self, top_band):
        assert wealth_threshold(replace(top_band, income_wealth_ratio=0.0), 0) is None

    def test_missing_or_zero_income_threshold(self, top_band):
        assert wealth_threshold(replace(top_band, income_threshold=None), 0) is None
        assert wealth_threshold(replace(top_band, income_threshold=0.0), 0) is None

    def test_negative_income_threshold(self, top_band):
        assert wealth_threshold(replace(top_band, income_threshold=-5000.0), 0) is None


class TestShapeParameter:
    """Test inverted Pareto coefficients."""

    def test_concrete_scenario(self, top_band):
        """alpha = 2M / (2M - 1M) = 2."""
        assert shape_parameter(top_band, 0) == pytest.approx(2.0)

    def test_independent_growth(self, top_band):
        band = replace(top_band, growth_avg_income=0.1, growth_threshold=0.0)
        avg = 2_000_000 * 1.1
        assert shape_parameter(band, 1) == pytest.approx(avg / (avg - 1_000_000))

    def test_degenerate_band(self, degenerate_band):
        assert shape_parameter(degenerate_band, 0) is None
        assert is_degenerate(degenerate_band, 0)

    def test_growth_can_make_band_degenerate(self, top_band):
        """Threshold growing much faster than the average closes the gap."""
        band = replace(top_band, growth_threshold=0.5)
        assert shape_parameter(band, 0) is not None
        assert shape_parameter(band, 2) is None

    def test_band_without_threshold_is_not_degenerate(self, bottom_band):
        assert shape_parameter(bottom_band, 0) is None
        assert not is_degenerate(bottom_band, 0)

    def test_alpha_above_one(self, lower_band, upper_band):
        for band in (lower_band, upper_band):
            assert shape_parameter(band, 0) > 1


class TestCorrectedShapeParameter:
    """Test the upper-boundary correction."""

    def test_value(self, lower_band, upper_band):
        """2 * (1 - (10 / 50) ** (2 - 1)) = 1.6."""
        assert corrected_shape_parameter(lower_band, upper_band, 0) == pytest.approx(1.6)

    def test_no_successor(self, top_band):
        assert corrected_shape_parameter(top_band, None, 0) is None

    def test_successor_without_threshold(self, lower_band, upper_band):
        successor = replace(upper_band, income_wealth_ratio=None)
        assert corrected_shape_parameter(lower_band, successor, 0) is None

    def test_degenerate_band(self, degenerate_band, upper_band):
        assert corrected_shape_parameter(degenerate_band, upper_band, 0) is None

    def test_correction_shrinks_alpha(self, lower_band, upper_band):
        corrected = corrected_shape_parameter(lower_band, upper_band, 0)
        assert 0 < corrected < shape_parameter(lower_band, 0)


class TestBandFit:
    """Test the bundled band fit."""

    def test_bounded_fit(self, lower_band, upper_band):
        fit = fit_band(lower_band, upper_band, 0)

        assert fit.wealth_threshold == pytest.approx(10.0)
        assert fit.wealth_threshold_next == pytest.approx(50.0)
        assert fit.is_bounded

    def test_open_fit(self, top_band):
        fit = fit_band(top_band, None, 0)

        assert fit.wealth_threshold_next is None
        assert fit.corrected_alpha is None
        assert not fit.is_bounded

    def test_straddles(self, lower_band, upper_band):
        fit = fit_band(lower_band, upper_band, 0)

        assert not fit.straddles(10.0)
        assert fit.straddles(30.0)
        assert not fit.straddles(50.0)

    def test_open_tail_straddles_everything_above_floor(self, top_band):
        fit = fit_band(top_band, None, 0)

        assert not fit.straddles(5.0)
        assert fit.straddles(1e6)
