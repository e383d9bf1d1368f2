"""Interaction primitives shared by every page object.

Pages do not inherit from a base class. Each one holds a PageActions
instance, built once per scenario around the Playwright page and the run's
settings, and composes its own behaviour from these primitives:

- navigation and the page-load wait
- element interactions (click, fill, select, read)
- hard assertions through Playwright's ``expect``
- named screenshots

Actionability failures (element missing, hidden or disabled past the
driver timeout) propagate unchanged. Nothing here retries.
"""

from __future__ import annotations

import re
from pathlib import Path

import structlog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from storefront_e2e.config.settings import Settings
from storefront_e2e.core.exceptions import PageLoadTimeoutError

log = structlog.get_logger(__name__)

UrlPattern = str | re.Pattern[str]

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class PageActions:
    """Navigation, interaction and assertion capability for page objects.

    Attributes:
        page: Playwright page of the current scenario.
        settings: Run configuration (base URL, timeouts, output paths).

    Example:
        actions = PageActions(page, settings)
        home = HomePage(actions)
        home.navigate_to_home()
    """

    def __init__(self, page: Page, settings: Settings) -> None:
        self.page = page
        self.settings = settings

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def url_for(self, path: str) -> str:
        """Resolve a site path against the configured base URL."""
        if path.startswith(("http://", "https://")):
            return path
        base = self.settings.base_url.rstrip("/")
        return f"{base}/{path.lstrip('/')}"

    def navigate_to(self, path: str = "/") -> None:
        """Open ``base_url + path`` and wait for the page to settle."""
        url = self.url_for(path)
        log.debug("navigate", url=url)
        self.page.goto(url)
        self.wait_for_page_load()

    def navigate_to_home(self) -> None:
        self.navigate_to("/")

    def wait_for_page_load(self) -> None:
        """Wait for DOM-ready, then give the network a bounded chance to go idle.

        The DOM-ready wait is a hard precondition. The network-idle wait is
        governed by ``settings.wait_policy``: ``best_effort`` logs the timeout
        and carries on, ``strict`` raises PageLoadTimeoutError.
        """
        timeouts = self.settings.timeouts
        self.page.wait_for_load_state("domcontentloaded", timeout=timeouts.dom_ready)
        try:
            self.page.wait_for_load_state("networkidle", timeout=timeouts.network_idle)
        except PlaywrightTimeoutError as e:
            if self.settings.wait_policy == "strict":
                raise PageLoadTimeoutError(
                    f"Network did not go idle within {timeouts.network_idle}ms",
                    url=self.page.url,
                    timeout_ms=timeouts.network_idle,
                ) from e
            log.warning(
                "network_idle_timeout",
                url=self.page.url,
                timeout_ms=timeouts.network_idle,
            )

    def wait_for_url(self, url: UrlPattern) -> None:
        self.page.wait_for_url(url)

    # -------------------------------------------------------------------------
    # Element interactions
    # -------------------------------------------------------------------------

    def click_element(self, locator: Locator, force: bool = False) -> None:
        locator.click(force=force)

    def fill_input(self, locator: Locator, value: str) -> None:
        locator.fill(value)

    def clear_input(self, locator: Locator) -> None:
        locator.clear()

    def check_element(self, locator: Locator) -> None:
        locator.check()

    def select_option(self, locator: Locator, value: str) -> None:
        locator.select_option(value)

    def get_text(self, locator: Locator) -> str:
        """Text content of the element, or "" if it has none."""
        return locator.text_content() or ""

    def get_attribute(self, locator: Locator, name: str) -> str | None:
        return locator.get_attribute(name)

    def get_input_value(self, locator: Locator) -> str:
        return locator.input_value()

    def count(self, locator: Locator) -> int:
        return locator.count()

    def is_element_visible(self, locator: Locator) -> bool:
        """Visibility probe. Driver errors read as "not visible"."""
        try:
            return locator.is_visible()
        except PlaywrightError as e:
            log.debug("visibility_probe_failed", error=str(e))
            return False

    # -------------------------------------------------------------------------
    # Assertions
    # -------------------------------------------------------------------------

    def assert_element_visible(self, locator: Locator) -> None:
        expect(locator).to_be_visible()

    def assert_element_hidden(self, locator: Locator) -> None:
        expect(locator).to_be_hidden()

    def assert_text_content(self, locator: Locator, expected_text: str) -> None:
        """Assert the element's text contains ``expected_text``."""
        expect(locator).to_contain_text(expected_text)

    def assert_value(self, locator: Locator, value: UrlPattern) -> None:
        expect(locator).to_have_value(value)

    def assert_attribute(self, locator: Locator, name: str, value: UrlPattern) -> None:
        expect(locator).to_have_attribute(name, value)

    def assert_url(self, expected_url: UrlPattern) -> None:
        expect(self.page).to_have_url(expected_url)

    def assert_title(self, expected_title: UrlPattern) -> None:
        expect(self.page).to_have_title(expected_title)

    # -------------------------------------------------------------------------
    # Artifacts
    # -------------------------------------------------------------------------

    def take_screenshot(self, name: str) -> Path | None:
        """Save ``<screenshot_dir>/<name>.png``.

        Returns:
            The written path, or None if the capture failed. A failed capture
            is logged and never fails the scenario.
        """
        directory = Path(self.settings.screenshot_dir)
        safe_name = _UNSAFE_FILENAME_CHARS.sub("-", name).strip("-") or "screenshot"
        path = directory / f"{safe_name}.png"
        try:
            directory.mkdir(parents=True, exist_ok=True)
            self.page.screenshot(path=str(path))
        except (PlaywrightError, OSError) as e:
            log.error("screenshot_failed", name=name, error=str(e))
            return None
        log.info("screenshot_saved", path=str(path))
        return path
