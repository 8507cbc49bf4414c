"""
check_evaluator.py - Turns a raw page measurement into labeled pass/fail checks.

Usage:
    categories = evaluate(raw, "mobile")
    # {"functional": [Check(...), ...], "usability": [...], ...}

Pure and deterministic: never raises on missing metrics, an unmeasured
timing becomes a failing check.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Mapping, Optional, Tuple

import config
from measurement import RawMeasurement
from run_result import Check
from thresholds import NEEDS_IMPROVEMENT, ceilings_for, classify, or_worst_case

NOT_MEASURED = "not measured"

# (metric key, label prefix, attribute)
GRADED_TIMINGS = (
    ("fcp", "FCP", "first_contentful_paint"),
    ("lcp", "LCP", "largest_contentful_paint"),
    ("ttfb", "TTFB", "time_to_first_byte"),
)


def round_half_up(value: float) -> int:
    return int((value * 2 + 1) // 2)


def _measured(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def ms_label(prefix: str, value: Optional[float]) -> str:
    if not _measured(value):
        return f"{prefix}: {NOT_MEASURED}"
    return f"{prefix}: {round_half_up(value)} ms"


def cls_label(value: Optional[float]) -> str:
    if not _measured(value):
        return f"CLS: {NOT_MEASURED}"
    rounded = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"CLS: {rounded}"


def functional_checks(raw: RawMeasurement) -> List[Check]:
    return [
        Check.of("Links present", raw.link_count > 0),
        Check.of("Forms present", raw.form_count > 0),
        Check.of("Buttons present", raw.button_count > 0),
    ]


def usability_checks(raw: RawMeasurement) -> List[Check]:
    return [
        Check.of("Page has title", bool(raw.has_title)),
        Check.of("Images present", raw.image_count > 0),
    ]


def security_checks(raw: RawMeasurement) -> List[Check]:
    return [Check.of("HTTPS enabled", bool(raw.is_secure_scheme))]


def performance_checks(
    raw: RawMeasurement,
    mode: Optional[str],
    overrides: Optional[Mapping[str, Tuple[float, float]]] = None,
) -> List[Check]:
    checks = []
    for key, prefix, attr in GRADED_TIMINGS:
        value = getattr(raw, attr)
        grade = classify(value, *ceilings_for(key, mode, overrides))
        checks.append(Check.of(ms_label(prefix, value), grade >= NEEDS_IMPROVEMENT))

    # Same bands for label and score: grade >= 50 is exactly CLS <= 0.25.
    cls = raw.cumulative_layout_shift
    cls_grade = classify(cls, *ceilings_for("cls", mode, overrides))
    checks.append(Check.of(cls_label(cls), cls_grade >= NEEDS_IMPROVEMENT))

    dcl = raw.dom_content_loaded_at
    checks.append(Check.of(
        ms_label("DOM Content Loaded", dcl),
        or_worst_case(dcl) < config.DCL_CEILING_MS,
    ))

    load_grade = classify(raw.total_elapsed, *ceilings_for("load", mode, overrides))
    checks.append(Check.of(
        ms_label("Total Load Time", raw.total_elapsed),
        load_grade >= NEEDS_IMPROVEMENT,
    ))
    return checks


def evaluate(
    raw: RawMeasurement,
    mode: Optional[str],
    overrides: Optional[Mapping[str, Tuple[float, float]]] = None,
) -> Dict[str, List[Check]]:
    return {
        "functional": functional_checks(raw),
        "usability": usability_checks(raw),
        "security": security_checks(raw),
        "performance": performance_checks(raw, mode, overrides),
    }
