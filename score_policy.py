"""
score_policy.py - Reduces graded checks to one 0-100 score and a display band.

Two policies exist; a run uses exactly one of them:
    weighted-metric  one classifier grade (0/50/100) per performance metric
                     (FCP, LCP, TTFB, CLS, total load; unmeasured grades 0)
                     plus 100/0 per functional, usability and security check,
                     averaged with equal weight per sub-score.
    uniform-check    share of passing checks across all four categories.

Both round half-up on the final mean.
"""

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import config
from measurement import RawMeasurement
from run_result import Check
from thresholds import ceilings_for, classify

logger = logging.getLogger(__name__)

WEIGHTED_METRIC = "weighted-metric"
UNIFORM_CHECK = "uniform-check"

# performance metrics graded into the weighted-metric score
SCORED_METRICS = (
    ("fcp", "first_contentful_paint"),
    ("lcp", "largest_contentful_paint"),
    ("ttfb", "time_to_first_byte"),
    ("cls", "cumulative_layout_shift"),
    ("load", "total_elapsed"),
)
BOOLEAN_CATEGORIES = ("functional", "usability", "security")

BAND_PASS = 90
BAND_WARN = 50


def mean_half_up(values: Sequence[int]) -> int:
    """Integer mean rounded half-up; an empty sequence scores 0."""
    if not values:
        return 0
    total, count = sum(values), len(values)
    return (2 * total + count) // (2 * count)


def _check_points(checks: Iterable[Check]) -> List[int]:
    return [100 if c.passed else 0 for c in checks]


def weighted_metric_score(
    raw: RawMeasurement,
    categories: Mapping[str, Sequence[Check]],
    mode: Optional[str],
    overrides: Optional[Mapping[str, Tuple[float, float]]] = None,
) -> int:
    scores = [
        classify(getattr(raw, attr), *ceilings_for(key, mode, overrides))
        for key, attr in SCORED_METRICS
    ]
    for name in BOOLEAN_CATEGORIES:
        scores.extend(_check_points(categories.get(name, ())))
    return mean_half_up(scores)


def uniform_check_score(
    raw: RawMeasurement,
    categories: Mapping[str, Sequence[Check]],
    mode: Optional[str],
    overrides: Optional[Mapping[str, Tuple[float, float]]] = None,
) -> int:
    points: List[int] = []
    for checks in categories.values():
        points.extend(_check_points(checks))
    return mean_half_up(points)


POLICIES: Dict[str, Callable[..., int]] = {
    WEIGHTED_METRIC: weighted_metric_score,
    UNIFORM_CHECK: uniform_check_score,
}


def resolve_policy(policy: Optional[str] = None) -> str:
    name = (policy or config.SCORE_POLICY).strip().lower()
    if name not in POLICIES:
        raise ValueError(f"Unknown score policy: {name!r} (expected one of {', '.join(POLICIES)})")
    return name


def aggregate(
    raw: RawMeasurement,
    categories: Mapping[str, Sequence[Check]],
    mode: Optional[str],
    policy: Optional[str] = None,
    overrides: Optional[Mapping[str, Tuple[float, float]]] = None,
) -> int:
    name = resolve_policy(policy)
    score = POLICIES[name](raw, categories, mode, overrides)
    logger.debug(f"Aggregated score {score} with policy {name}")
    return score


def score_band(score: int) -> str:
    if score >= BAND_PASS:
        return "pass"
    if score >= BAND_WARN:
        return "warn"
    return "fail"
