"""
measurement.py - Raw page measurement bundle handed to the scoring engine.

Usage:
    raw = RawMeasurement.from_dict(json.load(f))
    mode = normalize_mode("tablet")   # -> "desktop"
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

MODES = ("desktop", "mobile")

# attribute name -> wire (camelCase) name
WIRE_NAMES = {
    "first_contentful_paint": "firstContentfulPaint",
    "largest_contentful_paint": "largestContentfulPaint",
    "time_to_first_byte": "timeToFirstByte",
    "cumulative_layout_shift": "cumulativeLayoutShift",
    "dom_content_loaded_at": "domContentLoadedAt",
    "page_load_at": "pageLoadAt",
    "total_elapsed": "totalElapsed",
    "link_count": "linkCount",
    "form_count": "formCount",
    "button_count": "buttonCount",
    "has_title": "hasTitle",
    "image_count": "imageCount",
    "is_secure_scheme": "isSecureScheme",
}

TIMING_FIELDS = (
    "first_contentful_paint",
    "largest_contentful_paint",
    "time_to_first_byte",
    "cumulative_layout_shift",
    "dom_content_loaded_at",
    "page_load_at",
)
COUNT_FIELDS = ("link_count", "form_count", "button_count", "image_count")
FLAG_FIELDS = ("has_title", "is_secure_scheme")


class MeasurementError(ValueError):
    def __init__(self, field_name: str, reason: str):
        super().__init__(f"{field_name}: {reason}")
        self.field_name = field_name
        self.reason = reason


def normalize_mode(mode: Optional[str]) -> str:
    """Anything other than the exact string "mobile" selects desktop thresholds."""
    return "mobile" if mode == "mobile" else "desktop"


@dataclass(frozen=True)
class RawMeasurement:
    total_elapsed: float
    link_count: int = 0
    form_count: int = 0
    button_count: int = 0
    has_title: bool = False
    image_count: int = 0
    is_secure_scheme: bool = False
    first_contentful_paint: Optional[float] = None
    largest_contentful_paint: Optional[float] = None
    time_to_first_byte: Optional[float] = None
    cumulative_layout_shift: Optional[float] = None
    dom_content_loaded_at: Optional[float] = None
    page_load_at: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RawMeasurement":
        """
        Build from the driver's wire form. Keys may be camelCase or the
        attribute names; missing timings stay None.
        """
        if not isinstance(data, Mapping):
            raise MeasurementError("(measurement)", "expected an object")

        def pick(name: str) -> Any:
            wire = WIRE_NAMES[name]
            if wire in data:
                return data[wire]
            return data.get(name)

        kwargs: Dict[str, Any] = {}

        elapsed = pick("total_elapsed")
        if elapsed is None:
            raise MeasurementError("totalElapsed", "missing")
        kwargs["total_elapsed"] = _number("totalElapsed", elapsed)

        for name in TIMING_FIELDS:
            value = pick(name)
            kwargs[name] = None if value is None else _number(WIRE_NAMES[name], value)

        for name in COUNT_FIELDS:
            value = pick(name)
            kwargs[name] = 0 if value is None else _count(WIRE_NAMES[name], value)

        for name in FLAG_FIELDS:
            kwargs[name] = bool(pick(name))

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {WIRE_NAMES[f.name]: getattr(self, f.name) for f in fields(self)}


def _number(name: str, value: Any) -> float:
    # bool is an int subclass; a flag in a timing slot is a driver bug
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MeasurementError(name, f"expected a number, got {value!r}")
    if not math.isfinite(value):
        raise MeasurementError(name, f"expected a finite number, got {value!r}")
    return value


def _count(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MeasurementError(name, f"expected an integer, got {value!r}")
    if value < 0:
        raise MeasurementError(name, "must not be negative")
    return value
