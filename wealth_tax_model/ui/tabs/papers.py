"""
Reference papers tab renderer.
"""

from __future__ import annotations

from typing import Any


def render_papers_tab(st_module: Any, papers: list[Any]) -> None:
    """
    Render the list of studies providing effective tax rates by country.
    """
    st_module.header("📚 Papers")

    by_country: dict[str, list[Any]] = {}
    for paper in papers:
        by_country.setdefault(paper.country, []).append(paper)

    for country, country_papers in by_country.items():
        st_module.subheader(country)
        for paper in country_papers:
            st_module.markdown(f"- {paper.authors} ({paper.year}). [{paper.title}]({paper.url})")
