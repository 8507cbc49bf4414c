"""
engine.py - Single-pass audit pipeline: measurement -> checks -> score -> result.

Usage:
    result = run_audit(raw, "mobile")
    payload = result.to_dict()
"""

import logging
from typing import Mapping, Optional, Tuple

from check_evaluator import evaluate
from measurement import RawMeasurement
from run_result import RunResult, assemble
from score_policy import aggregate

logger = logging.getLogger(__name__)


def run_audit(
    raw: RawMeasurement,
    mode: Optional[str],
    policy: Optional[str] = None,
    overrides: Optional[Mapping[str, Tuple[float, float]]] = None,
) -> RunResult:
    categories = evaluate(raw, mode, overrides)
    score = aggregate(raw, categories, mode, policy=policy, overrides=overrides)
    result = assemble(categories, score, mode)
    logger.debug(f"Audit scored {result.score} ({result.band}), {result.passed}/{result.total} checks passed")
    return result
