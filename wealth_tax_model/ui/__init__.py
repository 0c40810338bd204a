"""
UI helper utilities for Streamlit app composition.
"""

from .styles import APP_STYLES, apply_app_styles
from .helpers import build_rates_frame, slider_to_threshold, smart_round, threshold_to_slider
from .calculation_controller import render_sidebar_inputs, run_simulation
from .app_controller import run_main_app
from .dependencies import build_app_dependencies

__all__ = [
    "APP_STYLES",
    "apply_app_styles",
    "build_rates_frame",
    "slider_to_threshold",
    "smart_round",
    "threshold_to_slider",
    "render_sidebar_inputs",
    "run_simulation",
    "run_main_app",
    "build_app_dependencies",
]
