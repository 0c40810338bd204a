"""
Exposure Module

Estimates how much of a band lies above a reform wealth threshold that need
not coincide with band boundaries. Two notions of exposure are computed
from the same fitted power law:

- Wealth share above the threshold (drives the tax rate change)
- Number of tax units above the threshold (drives the headcount affected)

Wealth and headcount integrate different moments of the density, so their
exponents differ by one. Both use the same case structure:

1. Band has no wealth threshold         -> nothing exposed
2. Threshold at or below band floor     -> whole band exposed
3. Threshold at or above next band floor -> nothing exposed
4. Open top tail (or no correction)     -> unbounded Pareto tail formula
5. Bounded band                         -> truncated Pareto formula
"""

import math
from typing import Optional

from .bands import Band
from .pareto import BandFit, fit_band


def open_tail_fraction(lower: float, reform_threshold: float, exponent: float) -> float:
    """Fraction above ``reform_threshold`` of an unbounded Pareto tail starting at ``lower``."""
    return (lower / reform_threshold) ** exponent


def bounded_fraction(
    reform_threshold: float,
    lower: float,
    upper: float,
    exponent: float,
) -> float:
    """
    Fraction above ``reform_threshold`` of a power law truncated to [lower, upper].

    fraction = (r^e - upper^e) / (lower^e - upper^e), clamped to [0, 1].
    A zero exponent uses the logarithmic limit of the same ratio.
    """
    if exponent == 0:
        result = math.log(upper / reform_threshold) / math.log(upper / lower)
    else:
        numerator = reform_threshold ** exponent - upper ** exponent
        denominator = lower ** exponent - upper ** exponent
        result = numerator / denominator
    return max(0.0, min(1.0, result))


def _exposed_fraction(fit: BandFit, reform_threshold: float, moment: int) -> float:
    """
    Shared case analysis for wealth (moment=1) and headcount (moment=0).
    """
    if not fit.wealth_threshold:
        return 0.0
    if reform_threshold <= fit.wealth_threshold:
        return 1.0
    if fit.wealth_threshold_next and reform_threshold >= fit.wealth_threshold_next:
        return 0.0

    if not fit.is_bounded:
        if not fit.alpha:
            return 0.0
        # Wealth: 1 / (alpha - 1); headcount: alpha / (alpha - 1)
        exponent = (fit.alpha if moment == 0 else 1.0) / (fit.alpha - 1)
        return open_tail_fraction(fit.wealth_threshold, reform_threshold, exponent)

    exponent = moment - fit.corrected_alpha
    return bounded_fraction(
        reform_threshold,
        fit.wealth_threshold,
        fit.wealth_threshold_next,
        exponent,
    )


def wealth_share_above(
    band: Band,
    next_band: Optional[Band],
    reform_threshold: float,
    years_elapsed: int,
) -> float:
    """
    Fraction (0-1) of the band's wealth held above the reform threshold.

    Args:
        band: Band being evaluated
        next_band: Successor band (None for the top band)
        reform_threshold: Wealth threshold of the reform (millions)
        years_elapsed: Years between data year and simulation year
    """
    fit = fit_band(band, next_band, years_elapsed)
    return _exposed_fraction(fit, reform_threshold, moment=1)


def headcount_above(
    band: Band,
    next_band: Optional[Band],
    reform_threshold: float,
    years_elapsed: int,
) -> float:
    """
    Number of the band's tax units with wealth above the reform threshold.

    Scaled by the band's projected headcount; 0 when the headcount is unknown.
    """
    n_present = band.projected_headcount(years_elapsed)
    if not n_present:
        return 0.0

    fit = fit_band(band, next_band, years_elapsed)
    fraction = _exposed_fraction(fit, reform_threshold, moment=0)
    return max(0.0, min(1.0, fraction)) * n_present
