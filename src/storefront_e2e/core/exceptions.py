"""Exception hierarchy for the E2E suite.

Element actionability failures are Playwright's own errors and assertion
failures are plain AssertionError; neither is wrapped. The classes below
cover the failures the suite itself decides on.
"""


class StorefrontE2EError(Exception):
    """Base exception for all suite errors."""

    pass


class ConfigurationError(StorefrontE2EError):
    """Raised when configuration is invalid.

    Example:
        raise ConfigurationError("Base URL must start with http:// or https://")
    """

    pass


class PageLoadTimeoutError(StorefrontE2EError):
    """Raised when the network never went idle under the strict wait policy.

    Attributes:
        url: Page URL at the time of the timeout.
        timeout_ms: The network-idle bound that was exceeded.
    """

    def __init__(self, message: str, url: str | None = None, timeout_ms: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.timeout_ms = timeout_ms
