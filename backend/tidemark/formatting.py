"""Formatting helpers for recommendation and prompt text.

Flood elevations and scores are quoted to one decimal place, the way
floodplain managers read them off a FIRM panel (e.g. '8.5 feet').
"""

from __future__ import annotations

from collections.abc import Iterable


def format_feet(value: float) -> str:
    """Format an elevation in feet, e.g. ``9.0 feet``."""
    return f"{value:.1f} feet"


def format_score(score: float) -> str:
    """Format a resilience score to one decimal place, e.g. ``16.6``."""
    return f"{score:.1f}"


def format_yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_enum_list(values: Iterable[str]) -> str:
    """Join enum values with commas, or ``None`` for an empty collection."""
    joined = ", ".join(str(v) for v in values)
    return joined or "None"
