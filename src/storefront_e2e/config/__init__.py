"""Configuration module for the E2E suite.

Usage:
    from storefront_e2e.config import get_settings

    settings = get_settings()  # Cached, process-wide
    print(settings.base_url)

Page objects never call get_settings() themselves; the settings value is
handed to PageActions when a scenario builds its pages.
"""

from storefront_e2e.config.settings import (
    AdminCredentials,
    BrowserOptions,
    Credentials,
    ReportingPaths,
    SeedData,
    Settings,
    Timeouts,
    get_settings,
)

__all__ = [
    "AdminCredentials",
    "BrowserOptions",
    "Credentials",
    "ReportingPaths",
    "SeedData",
    "Settings",
    "Timeouts",
    "get_settings",
]
