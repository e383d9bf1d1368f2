"""Fixtures for browser-free unit tests of page objects and helpers."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest

from storefront_e2e.pages.actions import PageActions
from tests.support.fixtures.playwright_mocks import make_mock_page


@pytest.fixture
def mock_page() -> MagicMock:
    """Page mock with a locator per selector, see playwright_mocks."""
    return make_mock_page()


@pytest.fixture
def mock_expect() -> Generator[MagicMock, None, None]:
    """Replace Playwright's expect inside PageActions."""
    with patch("storefront_e2e.pages.actions.expect") as mock:
        yield mock


@pytest.fixture
def actions(mock_page: MagicMock, settings, mock_expect: MagicMock) -> PageActions:
    """Real PageActions over the mock page, with assertions captured."""
    return PageActions(mock_page, settings)
