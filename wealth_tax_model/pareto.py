"""
Pareto Interpolation Module

Describes how wealth is distributed inside each income band using an
inverted-Pareto (power-law) model:

- Wealth threshold: the band's income boundary divided by the assumed
  income-to-wealth ratio, in millions of currency
- Shape parameter (inverted Pareto coefficient): alpha = mean / (mean - threshold)
- Corrected shape parameter: alpha rescaled so that the band's curve carries
  no mass beyond the next band's threshold

All functions return None when a quantity cannot be computed from the
available inputs.
"""

from dataclasses import dataclass
from typing import Optional

from .bands import Band

# Wealth thresholds are expressed in millions of currency
WEALTH_SCALE = 1e6


def wealth_threshold(band: Band, years_elapsed: int) -> Optional[float]:
    """
    Wealth level (millions) corresponding to the band's lower income boundary.

    Returns None if the income threshold is missing or not positive, or if
    the income/wealth ratio is missing or zero.
    """
    if band.income_threshold is None or band.income_threshold <= 0 or not band.income_wealth_ratio:
        return None
    threshold_present = band.projected_income_threshold(years_elapsed)
    return threshold_present / band.income_wealth_ratio / WEALTH_SCALE


def shape_parameter(band: Band, years_elapsed: int) -> Optional[float]:
    """
    Inverted Pareto coefficient of the band at the simulation year.

    Average income and threshold are projected with their own growth rates.
    Returns None when either is missing or when the projected average does
    not exceed the projected threshold (no power law fits the band).
    """
    if not band.avg_income or not band.income_threshold:
        return None

    avg_present = band.projected_avg_income(years_elapsed)
    threshold_present = band.projected_income_threshold(years_elapsed)

    if avg_present <= threshold_present:
        return None

    return avg_present / (avg_present - threshold_present)


def is_degenerate(band: Band, years_elapsed: int) -> bool:
    """True if the band has income data but no fittable shape parameter."""
    if not band.avg_income or not band.income_threshold:
        return False
    return shape_parameter(band, years_elapsed) is None


def corrected_shape_parameter(
    band: Band,
    next_band: Optional[Band],
    years_elapsed: int,
) -> Optional[float]:
    """
    Shape parameter corrected for the upper boundary of the band.

    corrected = alpha * (1 - (threshold / threshold_next) ** (alpha - 1))

    Only defined for bounded bands whose own and successor's wealth
    thresholds are known.
    """
    if next_band is None:
        return None

    alpha = shape_parameter(band, years_elapsed)
    threshold = wealth_threshold(band, years_elapsed)
    threshold_next = wealth_threshold(next_band, years_elapsed)

    if not alpha or not threshold or not threshold_next:
        return None

    return alpha * (1 - (threshold / threshold_next) ** (alpha - 1))


@dataclass(frozen=True)
class BandFit:
    """
    Fitted within-band model for one band and its successor.

    Attributes:
        wealth_threshold: Band's own wealth threshold (millions)
        wealth_threshold_next: Successor's wealth threshold (None for open tail)
        alpha: Inverted Pareto coefficient
        corrected_alpha: Boundary-corrected coefficient (None for open tail)
    """
    wealth_threshold: Optional[float]
    wealth_threshold_next: Optional[float]
    alpha: Optional[float]
    corrected_alpha: Optional[float]

    @property
    def is_bounded(self) -> bool:
        """True if the band's upper boundary is known and the correction applies."""
        return bool(self.wealth_threshold_next) and self.corrected_alpha is not None

    def straddles(self, reform_threshold: float) -> bool:
        """
        True if the reform threshold falls strictly inside the band, so the
        share above it depends on the within-band model.
        """
        if not self.wealth_threshold:
            return False
        if reform_threshold <= self.wealth_threshold:
            return False
        if self.wealth_threshold_next and reform_threshold >= self.wealth_threshold_next:
            return False
        return True


def fit_band(band: Band, next_band: Optional[Band], years_elapsed: int) -> BandFit:
    """Fit the inverted-Pareto model for a band against its successor."""
    return BandFit(
        wealth_threshold=wealth_threshold(band, years_elapsed),
        wealth_threshold_next=(
            wealth_threshold(next_band, years_elapsed) if next_band is not None else None
        ),
        alpha=shape_parameter(band, years_elapsed),
        corrected_alpha=corrected_shape_parameter(band, next_band, years_elapsed),
    )
