"""
Tab wiring and render orchestration helpers.
"""

from __future__ import annotations

from typing import Any


def build_main_tabs(st_module: Any) -> dict[str, Any]:
    """
    Create main tabs layout and return named tab references.
    """
    ordered = ["🏛️ Simulator", "🌍 Comparison", "ℹ️ Methodology", "📚 Papers"]
    tabs = st_module.tabs(ordered)
    tab_map = dict(zip(ordered, tabs))

    return {
        "tab_simulator": tab_map["🏛️ Simulator"],
        "tab_comparison": tab_map["🌍 Comparison"],
        "tab_methodology": tab_map["ℹ️ Methodology"],
        "tab_papers": tab_map["📚 Papers"],
    }


def render_result_tabs(
    st_module: Any,
    deps: Any,
    tabs: dict[str, Any],
    settings: dict[str, Any],
    result: Any,
    datasets: list[Any],
) -> None:
    """
    Render simulator, comparison and reference tabs.
    """
    with tabs["tab_simulator"]:
        if result is None:
            st_module.info("👈 Select a country in the sidebar to run the simulation.")
        else:
            papers = deps.get_country_papers(result.dataset.country)
            deps.render_simulator_tab(
                st_module=st_module,
                result=result,
                settings=settings,
                citations=deps.format_citations(papers),
            )

    with tabs["tab_comparison"]:
        compared = deps.get_multiple_countries_papers([d.country for d in datasets])
        deps.render_comparison_tab(
            st_module=st_module,
            datasets=datasets,
            comparison_table_fn=deps.comparison_table,
            citations=deps.format_full_authors(compared),
        )

    with tabs["tab_methodology"]:
        deps.render_methodology_tab(st_module=st_module)

    with tabs["tab_papers"]:
        deps.render_papers_tab(st_module=st_module, papers=deps.PAPERS)


def render_footer(st_module: Any) -> None:
    """
    Render app footer.
    """
    st_module.markdown("---")
    st_module.caption(
        """
**Wealth Tax Simulator** | Built with Streamlit |
Effective tax rates: distributional national accounts studies |
Methodology: inverted Pareto interpolation by income group
"""
    )
