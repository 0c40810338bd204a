"""
Pytest fixtures for wealth tax simulator tests.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from wealth_tax_model.bands import Band, CountryDataset, ReformParameters


# =============================================================================
# BAND FIXTURES
# =============================================================================

@pytest.fixture
def top_band():
    """Open-tail band: wealth threshold 10M, alpha 2, no growth."""
    return Band(
        label="Top",
        headcount=1000,
        avg_income=2_000_000,
        income_threshold=1_000_000,
        income_wealth_ratio=0.1,
        total_rate=0.30,
        indiv_rate=0.05,
    )


@pytest.fixture
def lower_band():
    """Bounded band: wealth threshold 10M, alpha 2."""
    return Band(
        label="P99.9-P99.99",
        headcount=10_000,
        avg_income=2_000_000,
        income_threshold=1_000_000,
        income_wealth_ratio=0.1,
        total_rate=0.35,
        indiv_rate=0.10,
    )


@pytest.fixture
def upper_band():
    """Successor of lower_band: wealth threshold 50M, alpha 12/7."""
    return Band(
        label="P99.99-Top",
        headcount=1000,
        avg_income=12_000_000,
        income_threshold=5_000_000,
        income_wealth_ratio=0.1,
        total_rate=0.25,
        indiv_rate=0.03,
    )


@pytest.fixture
def degenerate_band():
    """Band whose average income equals its threshold."""
    return Band(
        label="Flat",
        headcount=100,
        avg_income=1_000_000,
        income_threshold=1_000_000,
        income_wealth_ratio=0.1,
        total_rate=0.30,
        indiv_rate=0.05,
    )


@pytest.fixture
def bottom_band():
    """Bottom band without threshold or wealth data."""
    return Band(
        label="P0-P99.9",
        headcount=900_000,
        avg_income=30_000,
        total_rate=0.40,
    )


# =============================================================================
# DATASET FIXTURES
# =============================================================================

@pytest.fixture
def sample_dataset(bottom_band, lower_band, upper_band):
    """Three-band country with no growth between data and simulation year."""
    return CountryDataset(
        country="Testland",
        currency="€",
        data_year=2022,
        simulation_year=2022,
        bands=(bottom_band, lower_band, upper_band),
        gdp=100.0,
        deficit=5.0,
    )


@pytest.fixture
def reform_params():
    """2% minimum tax above 100M."""
    return ReformParameters(tax_rate=0.02, threshold=100)


@pytest.fixture
def country_payload():
    """JSON payload in the published simulator file layout."""
    return {
        "country": "Testland",
        "currency": "$",
        "dataYear": 2020,
        "simulationYear": 2024,
        "gdp": 500,
        "groups": [
            {"group": "P0-P90", "n": 900000, "avgIncome": 40000, "incomeThreshold": None,
             "totalRate": 0.35},
            {"group": "P90-P99", "n": 90000, "avgIncome": 300000, "incomeThreshold": 150000,
             "incomeWealthRatio": 0.13, "totalRate": 0.4, "indivRate": 0.25,
             "nominalGrowthAvg": 0.03, "nominalGrowthThreshold": 0.03, "populationGrowth": 0.005},
            {"group": "Top", "n": 10000, "avgIncome": 3000000, "incomeThreshold": 1000000,
             "incomeWealthRatio": 0.1, "totalRate": 0.3, "indivRate": 0.05,
             "nominalGrowthAvg": 0.05, "nominalGrowthThreshold": 0.05, "extraField": "ignored"},
        ],
    }
