"""
thresholds.py - Three-tier web-vitals grading (good / needs improvement / poor).

Usage:
    grade = classify(raw.first_contentful_paint, *ceilings_for("fcp", mode))
"""

import math
from typing import Dict, Mapping, Optional, Tuple

from measurement import normalize_mode

GOOD = 100
NEEDS_IMPROVEMENT = 50
POOR = 0

# (good ceiling, needs-improvement ceiling)
CEILINGS: Dict[str, Tuple[float, float]] = {
    "fcp": (1800, 3000),
    "lcp": (2500, 4000),
    "ttfb": (800, 1800),
    "cls": (0.10, 0.25),
    "load_desktop": (3000, 5000),
    "load_mobile": (5000, 8000),
}


def or_worst_case(value: Optional[float]) -> float:
    """An unmeasured metric grades as if it were infinitely slow."""
    return math.inf if value is None else value


def classify(value: Optional[float], good_ceiling: float, acceptable_ceiling: float) -> int:
    v = or_worst_case(value)
    if v <= good_ceiling:
        return GOOD
    if v <= acceptable_ceiling:
        return NEEDS_IMPROVEMENT
    return POOR


def ceilings_for(
    metric: str,
    mode: Optional[str] = None,
    overrides: Optional[Mapping[str, Tuple[float, float]]] = None,
) -> Tuple[float, float]:
    """
    Ceiling pair for a metric key ("fcp", "lcp", "ttfb", "cls" or "load").
    "load" resolves to the desktop or mobile pair for the given mode; an
    override keyed "load_<mode>" wins over one keyed "load".
    """
    key = metric
    if metric == "load":
        key = f"load_{normalize_mode(mode)}"
    if overrides:
        if key in overrides:
            return overrides[key]
        if metric in overrides:
            return overrides[metric]
    if key not in CEILINGS:
        raise KeyError(f"Unknown metric: {metric}")
    return CEILINGS[key]
