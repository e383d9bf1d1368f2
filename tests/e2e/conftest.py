"""Playwright E2E fixtures for the storefront and form-widget site.

This module provides fixtures for:
- Browser launch and context configuration from Settings
- Page timeouts and the ``expect`` assertion timeout
- Page objects sharing one PageActions per scenario
- Screenshot capture on failure

Usage:
    def test_home_loads(home_page):
        home_page.navigate_to_home()
        home_page.verify_home_page_loaded()
"""

from collections.abc import Generator
from typing import Any

import pytest
from playwright.sync_api import Page, expect

from storefront_e2e.config import Settings, get_settings
from storefront_e2e.helpers import VIEWPORTS, capture_failure_screenshot
from storefront_e2e.pages import (
    AlertsPage,
    CartPage,
    CheckBoxPage,
    DatePickerPage,
    HomePage,
    LoginPage,
    PageActions,
    PracticeFormPage,
    ProductPage,
    RadioButtonPage,
    RegisterPage,
    SelectMenuPage,
    TextBoxPage,
)

# =============================================================================
# pytest-playwright Configuration
# =============================================================================


@pytest.fixture(scope="session")
def e2e_settings() -> Settings:
    """Settings for the whole browser session."""
    return get_settings()


@pytest.fixture(scope="session")
def browser_type_launch_args(
    browser_type_launch_args: dict[str, Any], e2e_settings: Settings
) -> dict[str, Any]:
    """Configure browser launch arguments."""
    return {
        **browser_type_launch_args,
        "headless": e2e_settings.browser.headless,
        "slow_mo": e2e_settings.browser.slow_mo,
    }


@pytest.fixture(scope="session")
def browser_context_args(
    browser_context_args: dict[str, Any], e2e_settings: Settings
) -> dict[str, Any]:
    """Configure browser context for the site under test."""
    return {
        **browser_context_args,
        "base_url": e2e_settings.base_url,
        "viewport": VIEWPORTS["desktop"],
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="session", autouse=True)
def configure_expect_timeout(e2e_settings: Settings) -> None:
    """Web-first assertions retry up to the default timeout."""
    expect.set_options(timeout=e2e_settings.timeouts.default)


# =============================================================================
# Page Object Fixtures
# =============================================================================


@pytest.fixture
def actions(page: Page, e2e_settings: Settings) -> PageActions:
    """PageActions for the scenario's page, with timeouts applied."""
    timeouts = e2e_settings.timeouts
    page.set_default_timeout(timeouts.action)
    page.set_default_navigation_timeout(timeouts.navigation)
    return PageActions(page, e2e_settings)


@pytest.fixture
def home_page(actions: PageActions) -> HomePage:
    return HomePage(actions)


@pytest.fixture
def login_page(actions: PageActions) -> LoginPage:
    return LoginPage(actions)


@pytest.fixture
def register_page(actions: PageActions) -> RegisterPage:
    return RegisterPage(actions)


@pytest.fixture
def product_page(actions: PageActions) -> ProductPage:
    return ProductPage(actions)


@pytest.fixture
def cart_page(actions: PageActions) -> CartPage:
    return CartPage(actions)


@pytest.fixture
def text_box_page(actions: PageActions) -> TextBoxPage:
    return TextBoxPage(actions)


@pytest.fixture
def check_box_page(actions: PageActions) -> CheckBoxPage:
    return CheckBoxPage(actions)


@pytest.fixture
def radio_button_page(actions: PageActions) -> RadioButtonPage:
    return RadioButtonPage(actions)


@pytest.fixture
def practice_form_page(actions: PageActions) -> PracticeFormPage:
    return PracticeFormPage(actions)


@pytest.fixture
def date_picker_page(actions: PageActions) -> DatePickerPage:
    return DatePickerPage(actions)


@pytest.fixture
def select_menu_page(actions: PageActions) -> SelectMenuPage:
    return SelectMenuPage(actions)


@pytest.fixture
def alerts_page(actions: PageActions) -> AlertsPage:
    return AlertsPage(actions)


# =============================================================================
# Failure Artifacts
# =============================================================================


@pytest.fixture(autouse=True)
def screenshot_on_failure(
    request: pytest.FixtureRequest, page: Page, e2e_settings: Settings
) -> Generator[None, None, None]:
    """Capture a full-page screenshot when the test body failed."""
    yield

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        capture_failure_screenshot(page, request.node.name, e2e_settings)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results for use in fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)
