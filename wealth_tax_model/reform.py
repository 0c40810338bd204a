"""
Reform Rate Module

Applies a minimum wealth tax to one income band:

- The tax is a floor: units whose current liability, converted to an
  equivalent wealth-tax rate, is below the minimum pay the difference
- Only the share of the band's wealth above the reform threshold is topped up

Extra revenue is expressed in billions of the dataset's currency.
"""

import logging
from typing import Optional

from .bands import Band
from .exposure import wealth_share_above
from .pareto import fit_band, is_degenerate

logger = logging.getLogger(__name__)

# Revenues are reported in billions of currency
REVENUE_SCALE = 1e9


def wealth_tax_top_up(band: Band, tax_rate: float) -> Optional[float]:
    """
    Additional income-tax-equivalent rate needed to reach the wealth tax floor.

    top_up = max(0, tax_rate / income_wealth_ratio - indiv_rate)

    Returns None when the band's wealth cannot be modeled.
    """
    if band.indiv_rate is None or not band.income_wealth_ratio:
        return None
    return max(0.0, tax_rate / band.income_wealth_ratio - band.indiv_rate)


def reform_rate(
    band: Band,
    next_band: Optional[Band],
    tax_rate: float,
    reform_threshold: float,
    years_elapsed: int,
) -> Optional[float]:
    """
    Effective tax rate of the band once the minimum wealth tax applies.

    Args:
        band: Band being evaluated
        next_band: Successor band (None for the top band)
        tax_rate: Minimum tax as a fraction of wealth
        reform_threshold: Wealth threshold (millions)
        years_elapsed: Years between data year and simulation year

    Returns:
        Reform effective tax rate (0-1), or None if the band has no current
        rate or if the threshold cuts through a band whose wealth
        distribution cannot be fitted.
    """
    if band.total_rate is None:
        return None

    top_up = wealth_tax_top_up(band, tax_rate)
    if top_up is None:
        return band.total_rate

    fit = fit_band(band, next_band, years_elapsed)
    if is_degenerate(band, years_elapsed) and fit.straddles(reform_threshold):
        logger.warning(
            f"Band {band.label}: average income does not exceed threshold, "
            f"cannot place reform threshold {reform_threshold:g}M inside the band"
        )
        return None

    share = wealth_share_above(band, next_band, reform_threshold, years_elapsed)
    return band.total_rate + top_up * share


def extra_revenue(
    band: Band,
    next_band: Optional[Band],
    tax_rate: float,
    reform_threshold: float,
    years_elapsed: int,
) -> float:
    """
    Additional revenue raised from the band (billions).

    (reform_rate - total_rate) * projected average income * projected headcount
    """
    rate = reform_rate(band, next_band, tax_rate, reform_threshold, years_elapsed)
    return revenue_from_rate(band, rate, years_elapsed)


def revenue_from_rate(band: Band, rate: Optional[float], years_elapsed: int) -> float:
    """Extra revenue (billions) of a band whose reform rate is already known."""
    if rate is None or not band.avg_income or not band.headcount or band.total_rate is None:
        return 0.0

    avg_income_present = band.projected_avg_income(years_elapsed)
    n_present = band.projected_headcount(years_elapsed)

    return (rate - band.total_rate) * avg_income_present * n_present / REVENUE_SCALE
