"""
Minimum Wealth Tax Simulation Model

Estimates how a minimum tax on wealth above a chosen threshold changes the
effective tax rate of each income group, and the revenue it raises.
"""

from .projection import project
from .bands import Band, CountryDataset, ReformParameters
from .pareto import (
    BandFit,
    corrected_shape_parameter,
    fit_band,
    is_degenerate,
    shape_parameter,
    wealth_threshold,
)
from .exposure import headcount_above, wealth_share_above
from .reform import extra_revenue, reform_rate
from .simulation import (
    BandOutcome,
    RatePoint,
    SimulationResult,
    comparison_table,
    rates_series,
    simulate,
    total_headcount_affected,
    total_revenue,
)

__version__ = "1.0.0"
__all__ = [
    "project",
    "Band",
    "CountryDataset",
    "ReformParameters",
    "BandFit",
    "wealth_threshold",
    "shape_parameter",
    "corrected_shape_parameter",
    "is_degenerate",
    "fit_band",
    "wealth_share_above",
    "headcount_above",
    "reform_rate",
    "extra_revenue",
    "BandOutcome",
    "RatePoint",
    "SimulationResult",
    "simulate",
    "rates_series",
    "total_revenue",
    "total_headcount_affected",
    "comparison_table",
]
