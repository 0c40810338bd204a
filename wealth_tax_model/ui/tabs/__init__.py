"""
Tab renderer modules for Streamlit app.
"""

from .comparison import render_comparison_tab
from .methodology import render_methodology_tab
from .papers import render_papers_tab
from .simulator import render_simulator_tab

__all__ = [
    "render_comparison_tab",
    "render_methodology_tab",
    "render_papers_tab",
    "render_simulator_tab",
]
