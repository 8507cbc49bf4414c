"""
web_vitals.py - Web Vitals extraction (FCP, LCP, CLS, TTFB, navigation timing).

Usage:
    # Before navigation, on a Playwright page
    page.add_init_script(VITALS_INIT_SCRIPT)
    page.goto(url)
    vitals = measure_vitals(page)
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Installed before the document loads so buffered entries are observed.
# Layout shifts caused by recent user input are excluded from CLS.
VITALS_INIT_SCRIPT = r"""
window.__perfMetrics = {};
try {
    new PerformanceObserver((list) => {
        for (const entry of list.getEntries()) {
            if (entry.name === "first-contentful-paint") {
                window.__perfMetrics.fcp = entry.startTime;
            }
        }
    }).observe({type: "paint", buffered: true});
} catch (e) {}
try {
    new PerformanceObserver((list) => {
        const entries = list.getEntries();
        const last = entries[entries.length - 1];
        window.__perfMetrics.lcp = last.renderTime || last.loadTime || last.startTime;
    }).observe({type: "largest-contentful-paint", buffered: true});
} catch (e) {}
try {
    let clsValue = 0;
    new PerformanceObserver((list) => {
        for (const entry of list.getEntries()) {
            if (!entry.hadRecentInput) {
                clsValue += entry.value;
            }
        }
        window.__perfMetrics.cls = clsValue;
    }).observe({type: "layout-shift", buffered: true});
} catch (e) {}
"""

NAVIGATION_SNAPSHOT = r"""
() => {
    const vitals = window.__perfMetrics || {};
    const nav = performance.getEntriesByType("navigation")[0];
    const out = {fcp: vitals.fcp, lcp: vitals.lcp, cls: vitals.cls};
    if (nav) {
        out.ttfb = nav.responseStart - nav.requestStart;
        out.dcl = nav.domContentLoadedEventEnd - nav.startTime;
        out.load = nav.loadEventEnd - nav.startTime;
    } else {
        const pt = performance.timing;
        out.ttfb = pt.responseStart - pt.requestStart;
        out.dcl = pt.domContentLoadedEventEnd - pt.navigationStart;
        out.load = pt.loadEventEnd - pt.navigationStart;
    }
    return out;
}
"""

VITAL_KEYS = ("fcp", "lcp", "cls", "ttfb", "dcl", "load")


def _clean(key: str, value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    # CLS of 0 is a real reading; a zero or negative timing means the event never fired
    if key == "cls":
        return float(value) if value >= 0 else None
    return float(value) if value > 0 else None


def normalize_vitals(snapshot: Optional[Dict[str, Any]]) -> Dict[str, Optional[float]]:
    snapshot = snapshot or {}
    return {key: _clean(key, snapshot.get(key)) for key in VITAL_KEYS}


def measure_vitals(page) -> Dict[str, Optional[float]]:
    """
    Reads the observed vitals and navigation timing from a loaded page.
    Requires VITALS_INIT_SCRIPT to have been installed before navigation.
    """
    snapshot = page.evaluate(NAVIGATION_SNAPSHOT)
    if not isinstance(snapshot, dict):
        logger.warning(f"Unexpected vitals snapshot: {snapshot!r}")
        snapshot = {}
    return normalize_vitals(snapshot)
