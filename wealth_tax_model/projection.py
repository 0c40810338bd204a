"""
Growth projection utilities.

Tabulations are published for a past data year; every dated quantity
(average income, band threshold, headcount) is carried forward to the
simulation year with compound annual growth.
"""

from typing import Optional


def project(value: float, growth_rate: Optional[float], years_elapsed: int) -> float:
    """
    Project a dated value forward by compound growth.

    Args:
        value: Quantity observed at the data year
        growth_rate: Annual growth rate (0.03 = 3%). None means zero growth.
        years_elapsed: Simulation year minus data year (may be zero)

    Returns:
        value * (1 + growth_rate) ** years_elapsed
    """
    if growth_rate is None:
        return value
    return value * (1 + growth_rate) ** years_elapsed
