"""
Tests for reform effective tax rates and band revenue.
"""

import logging
import pytest
import numpy as np
import sys
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from wealth_tax_model.reform import extra_revenue, reform_rate, revenue_from_rate, wealth_tax_top_up


class TestTopUp:
    """Test the income-equivalent wealth tax top-up."""

    def test_top_up(self, top_band):
        """2% / 10% - 5% = 15 points."""
        assert wealth_tax_top_up(top_band, 0.02) == pytest.approx(0.15)

    def test_floor_never_reduces_liability(self, top_band):
        band = replace(top_band, indiv_rate=0.5)
        assert wealth_tax_top_up(band, 0.02) == 0.0

    def test_missing_inputs(self, top_band):
        assert wealth_tax_top_up(replace(top_band, indiv_rate=None), 0.02) is None
        assert wealth_tax_top_up(replace(top_band, income_wealth_ratio=None), 0.02) is None


class TestReformRate:
    """Test post-reform effective tax rates."""

    def test_whole_band_exposed(self, top_band):
        assert reform_rate(top_band, None, 0.02, 5, 0) == pytest.approx(0.30 + 0.15)

    def test_open_tail(self, top_band):
        """Share above 100M is 0.1, so the rate rises by 1.5 points."""
        assert reform_rate(top_band, None, 0.02, 100, 0) == pytest.approx(0.315)

    def test_threshold_above_band(self, lower_band, upper_band):
        assert reform_rate(lower_band, upper_band, 0.02, 80, 0) == pytest.approx(0.35)

    def test_missing_total_rate(self, top_band):
        assert reform_rate(replace(top_band, total_rate=None), None, 0.02, 5, 0) is None

    def test_missing_wealth_inputs_keep_current_rate(self, bottom_band, lower_band):
        assert reform_rate(bottom_band, lower_band, 0.02, 1, 0) == pytest.approx(0.40)

    def test_zero_tax_rate(self, lower_band, upper_band):
        assert reform_rate(lower_band, upper_band, 0.0, 20, 0) == pytest.approx(0.35)

    def test_degenerate_band_inside(self, degenerate_band, caplog):
        """A threshold cutting through an unfittable band has no rate."""
        with caplog.at_level(logging.WARNING):
            assert reform_rate(degenerate_band, None, 0.02, 100, 0) is None
        assert "Flat" in caplog.text

    def test_degenerate_band_fully_exposed(self, degenerate_band):
        assert reform_rate(degenerate_band, None, 0.02, 5, 0) == pytest.approx(0.45)

    def test_missing_avg_income_keeps_current_rate(self, top_band, caplog):
        """No average income means no fit, not an unfittable band."""
        band = replace(top_band, avg_income=None)
        with caplog.at_level(logging.WARNING):
            assert reform_rate(band, None, 0.02, 100, 0) == pytest.approx(0.30)
        assert caplog.records == []

    def test_missing_avg_income_bounded(self, lower_band, upper_band):
        band = replace(lower_band, avg_income=None)
        assert reform_rate(band, upper_band, 0.02, 30, 0) == pytest.approx(0.35)

    @pytest.mark.parametrize("tax_rate", [0.0, 0.01, 0.02, 0.05])
    def test_never_below_current_rate(self, tax_rate, lower_band, upper_band, top_band):
        for band, next_band in ((lower_band, upper_band), (upper_band, None), (top_band, None)):
            for threshold in np.geomspace(1, 2000, 60):
                rate = reform_rate(band, next_band, tax_rate, threshold, 0)
                assert rate >= band.total_rate


class TestExtraRevenue:
    """Test band-level revenue (billions)."""

    def test_whole_band(self, top_band):
        """0.15 * 2M * 1000 / 1e9 = 0.3B."""
        assert extra_revenue(top_band, None, 0.02, 5, 0) == pytest.approx(0.3)

    def test_open_tail(self, top_band):
        assert extra_revenue(top_band, None, 0.02, 100, 0) == pytest.approx(0.03)

    def test_projected_income_and_headcount(self, top_band):
        band = replace(top_band, growth_avg_income=0.1, population_growth=0.1)
        rate_gain = reform_rate(band, None, 0.02, 5, 1) - band.total_rate
        expected = rate_gain * 2_200_000 * 1100 / 1e9
        assert extra_revenue(band, None, 0.02, 5, 1) == pytest.approx(expected)

    def test_missing_inputs(self, top_band):
        assert extra_revenue(replace(top_band, avg_income=None), None, 0.02, 5, 0) == 0.0
        assert extra_revenue(replace(top_band, headcount=None), None, 0.02, 5, 0) == 0.0
        assert extra_revenue(replace(top_band, total_rate=None), None, 0.02, 5, 0) == 0.0

    def test_degenerate_band_inside(self, degenerate_band):
        assert extra_revenue(degenerate_band, None, 0.02, 100, 0) == 0.0

    def test_revenue_from_known_rate(self, top_band):
        assert revenue_from_rate(top_band, 0.315, 0) == pytest.approx(0.03)
        assert revenue_from_rate(top_band, None, 0) == 0.0
