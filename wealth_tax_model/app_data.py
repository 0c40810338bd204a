"""
Application data for the Wealth Tax Simulator.

Contains:
- PAPERS: Academic studies providing effective tax rates by income group
- Citation helpers used by the Papers tab and chart captions
"""

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class Paper:
    """One reference study."""
    country: str
    authors: str
    year: int
    short_ref: str
    title: str
    url: str


# =============================================================================
# REFERENCE PAPERS - Sources of effective tax rates by income group
# =============================================================================
PAPERS = [
    Paper(
        country="France",
        authors="Bozio, Garbinti, Goupille-Lebret, Guillot, Piketty",
        year=2020,
        short_ref="Bozio et al. (2020)",
        title="Predistribution vs. Redistribution: Evidence from France and the U.S.",
        url="https://wid.world/www-site/uploads/2020/11/WorldInequalityLab_WP2020_22_PredistributionvsRedistribution.pdf",
    ),
    Paper(
        country="France",
        authors="Bach, Bozio, Guillouzouic, Malgouyres",
        year=2025,
        short_ref="Bach et al. (2025)",
        title="Do Billionaires Pay Taxes?",
        url="https://www.ipp.eu/wp-content/uploads/2025/09/BBGM_2025.pdf",
    ),
    Paper(
        country="United States",
        authors="Piketty, Saez, Zucman",
        year=2018,
        short_ref="Piketty et al. (2018)",
        title="Distributional National Accounts: Methods and Estimates for the United States",
        url="https://gabriel-zucman.eu/usdina/",
    ),
    Paper(
        country="United States",
        authors="Balkir, Saez, Yagan, Zucman",
        year=2025,
        short_ref="Balkir et al. (2025)",
        title="How Much Tax Do US Billionaires Pay? Evidence From Administrative Data",
        url="https://gabriel-zucman.eu/files/BSYZ2025NBER.pdf",
    ),
    Paper(
        country="Brazil",
        authors="Palomo, Bhering, Scot, Bachas et al.",
        year=2025,
        short_ref="Palomo et al. (2025)",
        title="Tax Progressivity and Inequality in Brazil",
        url="https://gabriel-zucman.eu/files/PalomoEtal2025.pdf",
    ),
    Paper(
        country="Netherlands",
        authors="Bruil, van Essen, Leenders, Lejour, Möhlmann, Rabaté",
        year=2025,
        short_ref="Bruil et al. (2025)",
        title="Inequality and Redistribution in the Netherlands",
        url="https://wouterleenders.eu/Bruiletal2025WP.pdf",
    ),
    Paper(
        country="Italy",
        authors="Guzzardi, Palagi, Roventini, Santoro",
        year=2024,
        short_ref="Guzzardi et al. (2024)",
        title="Reconstructing Income Inequality in Italy",
        url="https://wid.world/document/reconstructing-income-inequality-in-italy-new-evidence-and-tax-policy-implications-from-dina-world-inequality-lab-working-paper-2022-02/",
    ),
]


def get_country_papers(country: str) -> List[Paper]:
    """Papers covering one country."""
    return [p for p in PAPERS if p.country == country]


def get_multiple_countries_papers(countries: Iterable[str]) -> List[Paper]:
    """Papers covering any of the countries, without duplicates, in listing order."""
    countries = set(countries)
    unique = {}
    for paper in PAPERS:
        if paper.country in countries:
            unique.setdefault((paper.authors, paper.year), paper)
    return list(unique.values())


def format_citations(papers: Iterable[Paper]) -> str:
    """Short in-text citations, e.g. "Bozio et al. (2020), Bach et al. (2025)"."""
    return ", ".join(p.short_ref for p in papers)


def format_full_authors(papers: Iterable[Paper]) -> str:
    """Full author lists with years, separated by semicolons."""
    return "; ".join(f"{p.authors} ({p.year})" for p in papers)
