"""Browser-level utilities: storage, viewport, failure screenshots, timing."""

from __future__ import annotations

import re
import time
from pathlib import Path
from typing import Any

import structlog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from storefront_e2e.config.settings import Settings, get_settings

log = structlog.get_logger(__name__)

VIEWPORTS: dict[str, dict[str, int]] = {
    "mobile": {"width": 375, "height": 667},
    "tablet": {"width": 768, "height": 1024},
    "desktop": {"width": 1920, "height": 1080},
}

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def clear_browser_storage(page: Page) -> None:
    """Empty localStorage and sessionStorage of the current origin."""
    page.evaluate("() => { localStorage.clear(); sessionStorage.clear(); }")


def set_viewport(page: Page, width: int, height: int) -> None:
    page.set_viewport_size({"width": width, "height": height})


def capture_failure_screenshot(
    page: Page, test_name: str, settings: Settings | None = None
) -> Path | None:
    """Save a full-page screenshot under ``<test_results_dir>/screenshots``.

    The file is named ``failure-<test_name>-<epoch ms>.png``. Capture errors
    are logged and swallowed so the original failure stays the reported one.

    Returns:
        The written path, or None if the capture failed.
    """
    settings = settings or get_settings()
    directory = Path(settings.test_results_dir) / "screenshots"
    safe_name = _UNSAFE_FILENAME_CHARS.sub("-", test_name).strip("-") or "test"
    path = directory / f"failure-{safe_name}-{int(time.time() * 1000)}.png"
    try:
        directory.mkdir(parents=True, exist_ok=True)
        page.screenshot(path=str(path), full_page=True)
    except (PlaywrightError, OSError) as e:
        log.error("failure_screenshot_failed", test=test_name, error=str(e))
        return None
    log.info("failure_screenshot_saved", test=test_name, path=str(path))
    return path


def measure_page_load_time(page: Page) -> float:
    """Milliseconds until the network goes idle, measured from now."""
    start = time.perf_counter()
    page.wait_for_load_state("networkidle")
    return (time.perf_counter() - start) * 1000


def get_memory_usage(page: Page) -> dict[str, Any] | None:
    """JS heap figures from ``performance.memory`` (Chromium only), else None."""
    return page.evaluate(
        """() => {
            if (!('memory' in performance)) return null;
            const m = performance.memory;
            return {
                usedJSHeapSize: m.usedJSHeapSize,
                totalJSHeapSize: m.totalJSHeapSize,
                jsHeapSizeLimit: m.jsHeapSizeLimit,
            };
        }"""
    )
