"""
Dependency assembly for Streamlit app bootstrap.
"""

from __future__ import annotations

from types import SimpleNamespace

from wealth_tax_model import ReformParameters, comparison_table, simulate
from wealth_tax_model.app_data import (
    PAPERS,
    format_citations,
    format_full_authors,
    get_country_papers,
    get_multiple_countries_papers,
)

from .app_controller import run_main_app
from .styles import apply_app_styles
from .tabs import (
    render_comparison_tab,
    render_methodology_tab,
    render_papers_tab,
    render_simulator_tab,
)


def build_app_dependencies() -> SimpleNamespace:
    """
    Build all runtime dependencies needed by the app controller.
    """
    return SimpleNamespace(
        PAPERS=PAPERS,
        ReformParameters=ReformParameters,
        simulate=simulate,
        comparison_table=comparison_table,
        get_country_papers=get_country_papers,
        format_citations=format_citations,
        get_multiple_countries_papers=get_multiple_countries_papers,
        format_full_authors=format_full_authors,
        render_simulator_tab=render_simulator_tab,
        render_comparison_tab=render_comparison_tab,
        render_methodology_tab=render_methodology_tab,
        render_papers_tab=render_papers_tab,
        apply_app_styles=apply_app_styles,
        run_main_app=run_main_app,
    )
