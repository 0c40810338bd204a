"""
Income band data model.

A country's tabulation is an ordered sequence of income bands, from the
bottom of the distribution to the billionaires. Bands are immutable; every
quantity derived from them is recomputed on demand.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from .projection import project


@dataclass(frozen=True)
class Band:
    """
    One row of a country's income tabulation.

    Attributes:
        label: Band name (e.g., "P90-P99", "Billionaires")
        headcount: Number of tax units in the band at the data year
        avg_income: Mean pre-tax income at the data year
        income_threshold: Income at the band's lower boundary at the data year
        income_wealth_ratio: Assumed income-to-wealth ratio (0-1)
        total_rate: Current effective tax rate, all taxes combined (0-1)
        indiv_rate: Current effective rate excluding wealth-tax-like levies (0-1)
        growth_avg_income: Annual growth of avg_income (None = no growth)
        growth_threshold: Annual growth of income_threshold (None = no growth)
        population_growth: Annual growth of headcount (None = no growth)
    """
    label: str
    headcount: Optional[float] = None
    avg_income: Optional[float] = None
    income_threshold: Optional[float] = None
    income_wealth_ratio: Optional[float] = None
    total_rate: Optional[float] = None
    indiv_rate: Optional[float] = None
    growth_avg_income: Optional[float] = None
    growth_threshold: Optional[float] = None
    population_growth: Optional[float] = None

    def projected_headcount(self, years_elapsed: int) -> Optional[float]:
        """Headcount at the simulation year."""
        if self.headcount is None:
            return None
        return project(self.headcount, self.population_growth, years_elapsed)

    def projected_avg_income(self, years_elapsed: int) -> Optional[float]:
        """Average income at the simulation year."""
        if self.avg_income is None:
            return None
        return project(self.avg_income, self.growth_avg_income, years_elapsed)

    def projected_income_threshold(self, years_elapsed: int) -> Optional[float]:
        """Lower income boundary at the simulation year."""
        if self.income_threshold is None:
            return None
        return project(self.income_threshold, self.growth_threshold, years_elapsed)

    def __str__(self) -> str:
        rate_str = f"{self.total_rate*100:.1f}%" if self.total_rate is not None else "n/a"
        return f"{self.label}: effective tax rate {rate_str}"


@dataclass(frozen=True)
class CountryDataset:
    """
    Income tabulation for one country.

    Attributes:
        country: Country name
        currency: Currency symbol or code used for display
        data_year: Year the tabulation describes
        simulation_year: Year the reform is simulated for (>= data_year)
        bands: Bands in ascending income order
        gdp: Nominal GDP (billions of currency), display only
        deficit: Public deficit (billions of currency), display only
        color: Chart color, display only
    """
    country: str
    currency: str
    data_year: int
    simulation_year: int
    bands: Tuple[Band, ...] = field(default_factory=tuple)
    gdp: Optional[float] = None
    deficit: Optional[float] = None
    color: Optional[str] = None

    @property
    def years_elapsed(self) -> int:
        """Years of growth between the data year and the simulation year."""
        return self.simulation_year - self.data_year

    @property
    def labels(self) -> list:
        return [b.label for b in self.bands]

    def next_band(self, index: int) -> Optional[Band]:
        """Successor of the band at ``index``; None for the top band."""
        if index + 1 < len(self.bands):
            return self.bands[index + 1]
        return None

    def band_pairs(self) -> Iterator[Tuple[Band, Optional[Band]]]:
        """Yield each band with its successor (None for the open top tail)."""
        for i, band in enumerate(self.bands):
            yield band, self.next_band(i)

    def __len__(self) -> int:
        return len(self.bands)


@dataclass(frozen=True)
class ReformParameters:
    """
    Minimum wealth tax parameters.

    Attributes:
        tax_rate: Minimum tax as a fraction of wealth (0.02 = 2%)
        threshold: Wealth threshold in millions of the dataset's currency
    """
    tax_rate: float
    threshold: float

    @classmethod
    def from_percent(cls, tax_rate_percent: float, threshold: float) -> "ReformParameters":
        """Build parameters from a tax rate given in percent, as the UI collects it."""
        return cls(tax_rate=tax_rate_percent / 100, threshold=threshold)
