"""
Settings panel rendering helpers.
"""

from __future__ import annotations

from typing import Any


def render_settings_tab(st_module: Any, settings_tab: Any) -> dict[str, Any]:
    """
    Render settings panel and return selected configuration values.
    """
    with settings_tab:
        show_band_detail = st_module.checkbox(
            "Show band detail",
            value=False,
            help="Wealth thresholds, Pareto coefficients and revenue by income group",
        )
        show_headcount = st_module.checkbox(
            "Show tax units affected",
            value=True,
            help="Estimated number of tax units with wealth above the threshold",
        )

        st_module.caption("Built with Streamlit • Illustrative synthetic data")

        if st_module.button("🗑️ Reset All", help="Clear cached results and settings"):
            st_module.session_state.clear()
            st_module.rerun()

    return {
        "show_band_detail": show_band_detail,
        "show_headcount": show_headcount,
    }
