"""
Top-level Streamlit app orchestration.
"""

from __future__ import annotations

import logging
from typing import Any

from .calculation_controller import render_sidebar_inputs, run_simulation
from .controller_utils import compute_run_id
from .settings_controller import render_settings_tab
from .tabs_controller import build_main_tabs, render_footer, render_result_tabs

logger = logging.getLogger(__name__)


def run_main_app(st_module: Any, deps: Any, datasets: list[Any]) -> None:
    """
    Render and orchestrate the full Streamlit app flow.
    """
    st_module.title("Wealth Tax Simulator")
    st_module.caption(
        "Explore how a minimum wealth tax would change effective tax rates and raise revenue."
    )

    if not datasets:
        st_module.error("⚠️ No country data found. Check the WEALTH_TAX_DATA_DIR setting.")
        return

    # Sidebar Inputs
    with st_module.sidebar:
        st_module.header("⚙️ Reform Parameters")
        calc_context = render_sidebar_inputs(st_module=st_module, datasets=datasets)

        st_module.markdown("---")
        settings = render_settings_tab(
            st_module=st_module,
            settings_tab=st_module.expander("⚙️ Display Settings"),
        )

    calc_context["run_id"] = compute_run_id(calc_context=calc_context)
    st_module.session_state.current_run_id = calc_context["run_id"]

    result = None
    try:
        result = run_simulation(st_module=st_module, deps=deps, calc_context=calc_context)
    except Exception as e:
        logger.exception(f"Simulation failed for {calc_context['country']}")
        st_module.error(f"❌ Error running simulation: {e}")

    tabs = build_main_tabs(st_module=st_module)
    render_result_tabs(
        st_module=st_module,
        deps=deps,
        tabs=tabs,
        settings=settings,
        result=result,
        datasets=datasets,
    )
    render_footer(st_module=st_module)
