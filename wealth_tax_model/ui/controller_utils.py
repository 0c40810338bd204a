"""
Shared utilities for UI controller modules.
"""

from __future__ import annotations

from typing import Any, Callable

import hashlib
import json


def compute_run_id(calc_context: dict[str, Any]) -> str:
    """
    Produce a stable identifier for the current inputs (country, rate, threshold).
    """

    def _default(o: Any) -> str:
        return str(o)

    payload = {
        "country": calc_context.get("country"),
        "tax_rate_percent": calc_context.get("tax_rate_percent"),
        "threshold": calc_context.get("threshold"),
    }

    raw = json.dumps(payload, sort_keys=True, default=_default).encode("utf-8")
    return hashlib.sha256(raw).hexdigest()[:12]


def get_or_compute(st_module: Any, cache_key: str, compute_fn: Callable[[], Any]) -> Any:
    """
    Return a session-cached value, computing and storing it on first use.
    """
    value = st_module.session_state.get(cache_key)
    if value is None:
        value = compute_fn()
        st_module.session_state[cache_key] = value
    return value
