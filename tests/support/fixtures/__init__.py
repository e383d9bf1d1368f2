"""
Test Fixtures Package

Reusable building blocks for unit tests:
- playwright_mocks.py: Page and Locator stand-ins for page-object tests

Usage:
    from tests.support.fixtures.playwright_mocks import make_mock_page

Pattern:
    1. Pure functions for logic (testable without Playwright)
    2. Fixtures for dependency injection
    3. Composition via pytest fixture dependencies
"""
