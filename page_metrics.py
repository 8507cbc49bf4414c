"""Page-level measurement on a browser page owned by the caller, using Playwright."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

import config
from dom_signals import count_elements
from measurement import RawMeasurement, normalize_mode
from run_result import error_report
from web_vitals import VITALS_INIT_SCRIPT, measure_vitals

logger = logging.getLogger(__name__)

VIEWPORTS = {
    "desktop": {"width": 1366, "height": 768},
    "mobile": {"width": 375, "height": 667},
}


def context_options(mode: Optional[str]) -> Dict[str, Any]:
    """Keyword arguments for `browser.new_context(...)` matching the audit mode."""
    mode = normalize_mode(mode)
    is_mobile = mode == "mobile"
    return {
        "viewport": dict(VIEWPORTS[mode]),
        "is_mobile": is_mobile,
        "has_touch": is_mobile,
    }


def measure_page(
    page: Page,
    url: str,
    mode: Optional[str] = None,
    timeout_ms: Optional[int] = None,
) -> RawMeasurement:
    """
    Navigate `page` to `url` and collect one RawMeasurement.
    Navigation errors propagate to the caller.
    """
    page.set_viewport_size(VIEWPORTS[normalize_mode(mode)])
    page.add_init_script(VITALS_INIT_SCRIPT)

    started = time.monotonic()
    page.goto(url, wait_until="load", timeout=timeout_ms or config.NAV_TIMEOUT_MS)
    total_elapsed = round((time.monotonic() - started) * 1000)

    vitals = measure_vitals(page)
    counts = count_elements(page.content())
    final_url = page.url or url

    return RawMeasurement(
        total_elapsed=total_elapsed,
        link_count=counts["links"],
        form_count=counts["forms"],
        button_count=counts["buttons"],
        has_title=counts["has_title"],
        image_count=counts["images"],
        is_secure_scheme=urlparse(final_url).scheme == "https",
        first_contentful_paint=vitals["fcp"],
        largest_contentful_paint=vitals["lcp"],
        time_to_first_byte=vitals["ttfb"],
        cumulative_layout_shift=vitals["cls"],
        dom_content_loaded_at=vitals["dcl"],
        page_load_at=vitals["load"],
    )


def capture(page: Page, url: str, mode: Optional[str] = None, timeout_ms: Optional[int] = None) -> Dict[str, Any]:
    """
    Measure a page into the record format the CLI reads:
    {"url", "mode", "measurement"} on success, {"error", "details"} otherwise.
    """
    try:
        raw = measure_page(page, url, mode, timeout_ms)
    except PlaywrightError as e:
        logger.error(f"Page measurement failed for {url}: {e}")
        return error_report("Test failed", str(e))
    return {"url": url, "mode": mode, "measurement": raw.to_dict()}
