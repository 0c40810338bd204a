"""
Reusable UI-facing helpers that keep app.py focused on rendering.
"""

from __future__ import annotations

import math
from typing import Any

import pandas as pd

# Threshold slider spans 1M to 1000M on a log scale
THRESHOLD_LOG_MIN = 0
THRESHOLD_LOG_MAX = 3
DEFAULT_THRESHOLD = 100
DEFAULT_TAX_RATE_PERCENT = 2.0
TAX_RATE_MAX_PERCENT = 5.0
TAX_RATE_STEP_PERCENT = 0.5


def smart_round(value: float) -> int:
    """
    Round a threshold to a readable value for its magnitude.

    Below 10: integer. Below 100: nearest 5. Otherwise: nearest 50.
    """
    if value < 10:
        return int(math.floor(value + 0.5))
    if value < 100:
        return int(math.floor(value / 5 + 0.5) * 5)
    return int(math.floor(value / 50 + 0.5) * 50)


def threshold_to_slider(threshold: float) -> float:
    """Slider position (0-100) of a threshold in millions."""
    span = THRESHOLD_LOG_MAX - THRESHOLD_LOG_MIN
    return (math.log10(threshold) - THRESHOLD_LOG_MIN) * 100 / span


def slider_to_threshold(position: float) -> int:
    """Threshold in millions for a slider position (0-100), smart-rounded."""
    span = THRESHOLD_LOG_MAX - THRESHOLD_LOG_MIN
    raw = 10 ** (THRESHOLD_LOG_MIN + position * span / 100)
    return smart_round(raw)


def build_rates_frame(series: list[Any]) -> pd.DataFrame:
    """
    Rates chart data as a DataFrame with one row per band.
    """
    return pd.DataFrame(
        {
            "Income Group": [p.label for p in series],
            "Current tax rate": [p.current_rate_percent for p in series],
            "Tax rate with a wealth tax": [p.reform_rate_percent for p in series],
        }
    )


def format_revenue(total_revenue: float, currency: str) -> str:
    """Revenue box text, e.g. "48 B€"."""
    return f"{round(total_revenue):,} B{currency}"
