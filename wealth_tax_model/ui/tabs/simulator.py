"""
Simulator tab renderer.
"""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go

from ..helpers import build_rates_frame, format_revenue


def render_simulator_tab(
    st_module: Any,
    result: Any,
    settings: dict[str, Any],
    citations: str = "",
) -> None:
    """
    Render revenue metrics, the rates chart and band detail for one simulation.
    """
    dataset = result.dataset
    currency = dataset.currency

    st_module.header(f"🏛️ Minimum Wealth Tax: {dataset.country}")
    st_module.markdown(
        f"""
        <div class="info-box">
        💡 A <strong>{result.params.tax_rate*100:.1f}%</strong> minimum tax on wealth above
        <strong>{result.params.threshold:g} M{currency}</strong>, simulated for {dataset.simulation_year}.
        </div>
        """,
        unsafe_allow_html=True,
    )

    cols = st_module.columns(3)
    with cols[0]:
        st_module.metric(
            "Extra fiscal revenues (each year)",
            format_revenue(result.total_revenue, currency),
        )
    with cols[1]:
        if settings.get("show_headcount", True):
            st_module.metric("Tax units affected", f"{result.total_headcount_affected:,.0f}")
    with cols[2]:
        if result.revenue_pct_gdp is not None:
            st_module.metric("Share of GDP", f"{result.revenue_pct_gdp:.2f}%")
        if result.revenue_pct_deficit is not None:
            st_module.caption(f"{result.revenue_pct_deficit:.1f}% of the public deficit")

    if result.degenerate_bands:
        st_module.warning(
            "No wealth distribution could be fitted for: "
            + ", ".join(result.degenerate_bands)
            + ". Their reform rate is not shown when the threshold falls inside the group."
        )

    st_module.subheader("Effective tax rate by income group")
    frame = build_rates_frame(result.series)
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=frame["Income Group"],
            y=frame["Current tax rate"],
            mode="lines+markers",
            name="Current tax rate",
            line=dict(color="#999999", width=2),
        )
    )
    fig.add_trace(
        go.Scatter(
            x=frame["Income Group"],
            y=frame["Tax rate with a wealth tax"],
            mode="lines+markers",
            name="Tax rate with a wealth tax",
            line=dict(color=dataset.color or "#1f77b4", width=3),
            connectgaps=False,
        )
    )
    fig.update_layout(
        xaxis_title="Income Group",
        yaxis_title="Effective tax rate (% of pre-tax income)",
        yaxis=dict(ticksuffix="%", rangemode="tozero"),
        height=450,
        hovermode="x unified",
    )
    st_module.plotly_chart(fig, use_container_width=True)

    if citations:
        st_module.caption(f"Sources: {citations}")

    if settings.get("show_band_detail"):
        st_module.subheader("Detail by income group")
        st_module.dataframe(
            result.to_dataframe().style.format(
                {
                    "Wealth Threshold (M)": "{:,.1f}",
                    "Alpha": "{:.2f}",
                    "Wealth Share Above": "{:.1f}%",
                    "Tax Units Affected": "{:,.0f}",
                    "Current Rate (%)": "{:.1f}",
                    "Reform Rate (%)": "{:.1f}",
                    "Extra Revenue (B)": "{:,.2f}",
                },
                na_rep="–",
            ),
            use_container_width=True,
            hide_index=True,
        )
