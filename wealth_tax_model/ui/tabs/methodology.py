"""
Methodology tab renderer.
"""

from __future__ import annotations

from typing import Any


def render_methodology_tab(st_module: Any) -> None:
    """
    Render methodology/reference tab content.
    """
    st_module.header("ℹ️ Methodology")
    st_module.markdown(
        """
        ## Economic Concepts

        **Pre-tax income** is total economic income before taxes: wages, dividends,
        and profits retained in firms owned by wealthy individuals. Ranking individuals
        by pre-tax income splits the population into groups, from the bottom 50% to
        the billionaires.

        The **effective tax rate** is the share of pre-tax income actually paid in taxes,
        all taxes combined: income, payroll, consumption, corporate (attributed to
        shareholders), wealth and estate taxes.

        The **minimum wealth tax** is a floor: it guarantees that the wealthiest pay at
        least a given percentage of their net wealth each year. If their existing taxes
        already exceed this floor, they owe nothing more; otherwise they pay the difference.

        ## Simulation Method

        1. Each group's income threshold is projected to the simulation year with its
           growth rate and converted into a **wealth threshold** using an income-to-wealth
           ratio assumed uniform within the group.
        2. Wealth inside a group follows a Pareto law with coefficient
           `alpha = mean / (mean - threshold)`, corrected so that the group carries no
           mass above the next group's threshold.
        3. The share of the group's wealth above the reform threshold receives the
           top-up `max(0, tax rate / income-to-wealth ratio - current rate)`.
        4. Extra revenues are the rate increase times projected average income and
           projected number of tax units, summed over groups.
        """
    )
