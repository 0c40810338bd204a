"""
Cross-country comparison tab renderer.
"""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go


def render_comparison_tab(
    st_module: Any,
    datasets: list[Any],
    comparison_table_fn: Any,
    citations: str = "",
) -> None:
    """
    Render current effective tax rates along the income distribution for all countries.
    """
    st_module.header("🌍 Effective Tax Rates Across Countries")
    st_module.markdown(
        """
        <div class="info-box">
        💡 Effective tax rate (all taxes combined) by pre-tax income group, under current legislation.
        </div>
        """,
        unsafe_allow_html=True,
    )

    if not datasets:
        st_module.info("No country data available")
        return

    table = comparison_table_fn(datasets)

    fig = go.Figure()
    for dataset in datasets:
        fig.add_trace(
            go.Scatter(
                x=table["Income Group"],
                y=table[dataset.country],
                mode="lines+markers",
                name=dataset.country,
                line=dict(color=dataset.color, width=2),
            )
        )
    fig.update_layout(
        xaxis_title="Income Group",
        yaxis_title="Effective tax rate (%)",
        yaxis=dict(ticksuffix="%", range=[0, 60]),
        height=450,
    )
    st_module.plotly_chart(fig, use_container_width=True)

    st_module.dataframe(
        table.style.format({d.country: "{:.1f}%" for d in datasets}, na_rep="–"),
        use_container_width=True,
        hide_index=True,
    )

    if citations:
        st_module.caption(f"Sources: {citations}")
