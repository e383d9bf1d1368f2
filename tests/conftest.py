"""Shared pytest fixtures for the storefront E2E suite.

This module provides fixtures for:
- Environment setup (.env loading) and logging configuration
- Settings instances with the process cache reset around each use
- Test data factories and a seeded data generator

Usage:
    @pytest.mark.unit
    def test_something(registration_factory):
        details = registration_factory()
        assert details["password"] == details["confirm_password"]
"""

import os
from collections.abc import Generator

import pytest

from tests.support.factories import (
    AddressFactory,
    CartItemFactory,
    CredentialsFactory,
    RegistrationFactory,
)

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables and logging.

    Loads .env file first, then sets defaults for any missing variables.
    """
    from dotenv import load_dotenv

    from storefront_e2e.config import get_settings
    from storefront_e2e.config.logging import configure_logging

    original_env = os.environ.copy()

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()

    os.environ.setdefault("LOG_LEVEL", "WARNING")

    get_settings.cache_clear()
    configure_logging(get_settings())

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)
    get_settings.cache_clear()


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def fresh_settings() -> Generator[None, None, None]:
    """Clear the cached settings before and after the test.

    Use together with ``monkeypatch.setenv`` to observe a changed environment
    through ``get_settings()``.
    """
    from storefront_e2e.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings(tmp_path):
    """Defaults-only settings writing artifacts under tmp_path."""
    from storefront_e2e.config import Settings

    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        base_url="https://shop.example.com",
        screenshot_dir=tmp_path / "screenshots",
        test_results_dir=tmp_path / "test-results",
    )


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def credentials_factory() -> type[CredentialsFactory]:
    """Provide credentials factory for login input."""
    return CredentialsFactory


@pytest.fixture
def address_factory() -> type[AddressFactory]:
    """Provide address factory for synthetic postal addresses."""
    return AddressFactory


@pytest.fixture
def registration_factory() -> type[RegistrationFactory]:
    """Provide registration factory for account sign-up input."""
    return RegistrationFactory


@pytest.fixture
def cart_item_factory() -> type[CartItemFactory]:
    """Provide cart item factory for cart rows."""
    return CartItemFactory


@pytest.fixture
def data_generator():
    """Seeded generator, identical sequence on every run."""
    from storefront_e2e.helpers import DataGenerator

    return DataGenerator(seed=1234)


# =============================================================================
# Markers for Test Selection
# =============================================================================

# Usage:
# pytest                  # Unit tests only (e2e deselected by default)
# pytest -m e2e           # Browser scenarios against BASE_URL
# pytest -m smoke         # Quick browser checks
# pytest -m "not slow"    # Skip slow tests
