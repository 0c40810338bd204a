"""
Simulation Module

Aggregates band-level effects of a minimum wealth tax into country totals:

- Effective tax rate by band, before and after the reform
- Total extra revenue (billions of currency)
- Total number of tax units affected
- Cross-country comparison of current effective tax rates
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from .bands import CountryDataset, ReformParameters
from .exposure import headcount_above, wealth_share_above
from .pareto import fit_band, is_degenerate
from .reform import extra_revenue, reform_rate, revenue_from_rate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RatePoint:
    """One point of the rate chart; rates in percent, None when undefined."""
    label: str
    current_rate_percent: Optional[float]
    reform_rate_percent: Optional[float]


@dataclass
class BandOutcome:
    """
    Effect of the reform on one band.

    Attributes:
        label: Band name
        wealth_threshold: Band's wealth threshold (millions)
        alpha: Inverted Pareto coefficient
        corrected_alpha: Boundary-corrected coefficient
        wealth_share_above: Share of band wealth above the reform threshold (0-1)
        headcount_above: Tax units above the reform threshold
        current_rate: Current effective tax rate (0-1)
        reform_rate: Effective tax rate with the reform (0-1)
        extra_revenue: Additional revenue (billions)
    """
    label: str
    wealth_threshold: Optional[float] = None
    alpha: Optional[float] = None
    corrected_alpha: Optional[float] = None
    wealth_share_above: float = 0.0
    headcount_above: float = 0.0
    current_rate: Optional[float] = None
    reform_rate: Optional[float] = None
    extra_revenue: float = 0.0


@dataclass
class SimulationResult:
    """
    Complete simulation of a minimum wealth tax for one country.

    Attributes:
        dataset: Country tabulation simulated
        params: Reform parameters
        outcomes: Per-band results in ascending income order
        total_revenue: Extra revenue across bands (billions)
        total_headcount_affected: Tax units above the threshold
        degenerate_bands: Labels of bands with no fittable wealth distribution
    """
    dataset: CountryDataset
    params: ReformParameters
    outcomes: List[BandOutcome] = field(default_factory=list)
    total_revenue: float = 0.0
    total_headcount_affected: float = 0.0
    degenerate_bands: List[str] = field(default_factory=list)

    @property
    def revenue_pct_gdp(self) -> Optional[float]:
        """Extra revenue as a percent of GDP."""
        if not self.dataset.gdp:
            return None
        return self.total_revenue / self.dataset.gdp * 100

    @property
    def revenue_pct_deficit(self) -> Optional[float]:
        """Extra revenue as a percent of the public deficit."""
        if not self.dataset.deficit:
            return None
        return self.total_revenue / self.dataset.deficit * 100

    @property
    def series(self) -> List[RatePoint]:
        return [
            RatePoint(o.label, _to_percent(o.current_rate), _to_percent(o.reform_rate))
            for o in self.outcomes
        ]

    def to_dataframe(self) -> pd.DataFrame:
        """Convert per-band results to a pandas DataFrame for display."""
        rows = []
        for o in self.outcomes:
            rows.append({
                "Income Group": o.label,
                "Wealth Threshold (M)": o.wealth_threshold,
                "Alpha": o.alpha,
                "Wealth Share Above": o.wealth_share_above * 100,
                "Tax Units Affected": o.headcount_above,
                "Current Rate (%)": _to_percent(o.current_rate),
                "Reform Rate (%)": _to_percent(o.reform_rate),
                "Extra Revenue (B)": o.extra_revenue,
            })
        return pd.DataFrame(rows)

    def summary(self) -> str:
        """Generate text summary of the simulation."""
        currency = self.dataset.currency
        lines = [
            f"Minimum Wealth Tax: {self.dataset.country}",
            f"Simulation year: {self.dataset.simulation_year}",
            f"Tax rate: {self.params.tax_rate*100:.1f}% above {self.params.threshold:g}M{currency}",
            f"Extra revenue: {self.total_revenue:,.1f}B{currency}",
            f"Tax units affected: {self.total_headcount_affected:,.0f}",
            "",
            "By Income Group:",
            "-" * 60,
        ]

        for o in self.outcomes:
            current = f"{o.current_rate*100:.1f}%" if o.current_rate is not None else "n/a"
            reform = f"{o.reform_rate*100:.1f}%" if o.reform_rate is not None else "n/a"
            lines.append(f"  {o.label:20s}: {current:>7s} -> {reform:>7s}")

        if self.degenerate_bands:
            lines.append("")
            lines.append(f"Unfittable bands: {', '.join(self.degenerate_bands)}")

        return "\n".join(lines)

    def display_summary(self):
        """Print a formatted summary of results."""
        from rich.console import Console
        from rich.table import Table
        from rich.panel import Panel

        console = Console()
        currency = self.dataset.currency

        # Header
        console.print(Panel(
            f"[bold blue]{self.dataset.country}[/bold blue]\n"
            f"{self.params.tax_rate*100:.1f}% minimum tax above {self.params.threshold:g}M{currency}, "
            f"simulated for {self.dataset.simulation_year}",
            title="Minimum Wealth Tax"
        ))

        console.print(f"\n[bold]Extra revenue:[/bold] {self.total_revenue:,.1f}B{currency}")
        if self.revenue_pct_gdp is not None:
            console.print(f"  {self.revenue_pct_gdp:.2f}% of GDP")
        console.print(f"[bold]Tax units affected:[/bold] {self.total_headcount_affected:,.0f}")

        table = Table(title="\nEffective Tax Rate by Income Group (%)")
        table.add_column("Income Group", style="cyan")
        table.add_column("Current", justify="right")
        table.add_column("With Reform", justify="right", style="bold")
        table.add_column(f"Revenue (B{currency})", justify="right")

        for o in self.outcomes:
            current = f"{o.current_rate*100:.1f}" if o.current_rate is not None else "n/a"
            reform = f"{o.reform_rate*100:.1f}" if o.reform_rate is not None else "n/a"
            table.add_row(o.label, current, reform, f"{o.extra_revenue:,.2f}")

        console.print(table)

        if self.degenerate_bands:
            console.print(
                f"\n[yellow]No Pareto fit for: {', '.join(self.degenerate_bands)}[/yellow]"
            )


def _to_percent(rate: Optional[float]) -> Optional[float]:
    return rate * 100 if rate is not None else None


def total_revenue(dataset: CountryDataset, tax_rate: float, reform_threshold: float) -> float:
    """Extra revenue summed over all bands (billions)."""
    years = dataset.years_elapsed
    return float(sum(
        extra_revenue(band, next_band, tax_rate, reform_threshold, years)
        for band, next_band in dataset.band_pairs()
    ))


def total_headcount_affected(dataset: CountryDataset, reform_threshold: float) -> float:
    """Number of tax units with wealth above the reform threshold."""
    years = dataset.years_elapsed
    return float(sum(
        headcount_above(band, next_band, reform_threshold, years)
        for band, next_band in dataset.band_pairs()
    ))


def rates_series(
    dataset: CountryDataset,
    tax_rate: float,
    reform_threshold: float,
) -> List[RatePoint]:
    """Current and reform effective tax rates by band, in percent."""
    years = dataset.years_elapsed
    points = []
    for band, next_band in dataset.band_pairs():
        rate = reform_rate(band, next_band, tax_rate, reform_threshold, years)
        points.append(RatePoint(
            label=band.label,
            current_rate_percent=_to_percent(band.total_rate),
            reform_rate_percent=_to_percent(rate),
        ))
    return points


def simulate(dataset: CountryDataset, params: ReformParameters) -> SimulationResult:
    """
    Run the full minimum wealth tax simulation for one country.

    Args:
        dataset: Country tabulation
        params: Tax rate and wealth threshold

    Returns:
        SimulationResult with per-band outcomes and country totals
    """
    years = dataset.years_elapsed
    result = SimulationResult(dataset=dataset, params=params)

    for band, next_band in dataset.band_pairs():
        fit = fit_band(band, next_band, years)
        rate = reform_rate(band, next_band, params.tax_rate, params.threshold, years)
        result.outcomes.append(BandOutcome(
            label=band.label,
            wealth_threshold=fit.wealth_threshold,
            alpha=fit.alpha,
            corrected_alpha=fit.corrected_alpha,
            wealth_share_above=wealth_share_above(band, next_band, params.threshold, years),
            headcount_above=headcount_above(band, next_band, params.threshold, years),
            current_rate=band.total_rate,
            reform_rate=rate,
            extra_revenue=revenue_from_rate(band, rate, years),
        ))
        if is_degenerate(band, years):
            result.degenerate_bands.append(band.label)

    result.total_revenue = float(sum(o.extra_revenue for o in result.outcomes))
    result.total_headcount_affected = float(sum(o.headcount_above for o in result.outcomes))

    logger.info(
        f"Simulated {dataset.country}: {params.tax_rate*100:.1f}% above "
        f"{params.threshold:g}M -> {result.total_revenue:,.1f}B extra revenue"
    )
    return result


def comparison_table(datasets: Iterable[CountryDataset]) -> pd.DataFrame:
    """
    Current effective tax rates (percent) by band across countries.

    Bands are matched by position; labels come from the first dataset.
    """
    datasets = list(datasets)
    if not datasets:
        return pd.DataFrame(columns=["Income Group"])

    labels = datasets[0].labels
    table = pd.DataFrame({"Income Group": labels})
    for dataset in datasets:
        rates = []
        for i in range(len(labels)):
            band = dataset.bands[i] if i < len(dataset.bands) else None
            rate = band.total_rate if band is not None else None
            rates.append(rate * 100 if rate is not None else np.nan)
        table[dataset.country] = rates
    return table
