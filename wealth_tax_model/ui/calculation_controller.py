"""
Calculation workflow helpers.
"""

from __future__ import annotations

from typing import Any

from .controller_utils import get_or_compute
from .helpers import (
    DEFAULT_TAX_RATE_PERCENT,
    DEFAULT_THRESHOLD,
    TAX_RATE_MAX_PERCENT,
    TAX_RATE_STEP_PERCENT,
    slider_to_threshold,
    threshold_to_slider,
)


def render_sidebar_inputs(st_module: Any, datasets: list[Any]) -> dict[str, Any]:
    """
    Render country and reform parameter controls and return interaction context.
    """
    countries = [d.country for d in datasets]
    country = st_module.radio(
        "Country",
        countries,
        help="Income tabulation used for the simulation",
    )
    dataset = datasets[countries.index(country)]

    position = st_module.slider(
        "Wealth threshold",
        min_value=0.0,
        max_value=100.0,
        value=threshold_to_slider(DEFAULT_THRESHOLD),
        step=0.1,
        format="%.1f",
        help="Log scale from 1M to 1,000M",
    )
    threshold = max(1, slider_to_threshold(position))
    st_module.caption(f"Threshold: **{threshold} M{dataset.currency}**")

    tax_rate_percent = st_module.slider(
        "Tax rate (% of wealth)",
        min_value=0.0,
        max_value=TAX_RATE_MAX_PERCENT,
        value=DEFAULT_TAX_RATE_PERCENT,
        step=TAX_RATE_STEP_PERCENT,
        format="%.1f%%",
    )

    return {
        "country": country,
        "dataset": dataset,
        "threshold": threshold,
        "tax_rate_percent": tax_rate_percent,
    }


def run_simulation(st_module: Any, deps: Any, calc_context: dict[str, Any]) -> Any:
    """
    Simulate the selected reform, reusing the session result for unchanged inputs.
    """
    params = deps.ReformParameters.from_percent(
        calc_context["tax_rate_percent"],
        calc_context["threshold"],
    )
    cache_key = f"sim:{calc_context['run_id']}"
    return get_or_compute(
        st_module,
        cache_key,
        lambda: deps.simulate(calc_context["dataset"], params),
    )
