"""Suite settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront_e2e.core.exceptions import ConfigurationError

log = structlog.get_logger(__name__)

NUMERIC_FIELDS = (
    "slow_mo",
    "default_timeout",
    "navigation_timeout",
    "action_timeout",
    "dom_ready_timeout",
    "network_idle_timeout",
)


# =============================================================================
# Read-only section views
# =============================================================================


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True)


class Credentials(_Section):
    """Storefront customer account used by login scenarios."""

    email: str
    password: str


class AdminCredentials(_Section):
    """Back-office account."""

    username: str
    password: str


class SeedData(_Section):
    """Default product and category scenarios search for."""

    product_name: str
    category: str


class BrowserOptions(_Section):
    headless: bool
    slow_mo: int


class Timeouts(_Section):
    """Timeouts in milliseconds."""

    default: int
    navigation: int
    action: int
    dom_ready: int
    network_idle: int


class ReportingPaths(_Section):
    allure_results_dir: Path
    test_results_dir: Path
    screenshot_dir: Path


# =============================================================================
# Settings
# =============================================================================


class Settings(BaseSettings):
    """E2E suite configuration from environment variables.

    Every field is optional; unset variables resolve to the defaults below.
    The instance is frozen, so one value can be shared by every page object
    of a test run.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Target site
    base_url: str = Field(default="https://demoqa.com", description="Site under test")

    # Accounts
    test_user_email: str = Field(default="test@example.com")
    test_user_password: SecretStr = Field(default=SecretStr("testpassword123"))
    admin_username: str = Field(default="admin")
    admin_password: SecretStr = Field(default=SecretStr("admin123"))

    # Seed data
    test_product_name: str = Field(default="iPhone")
    test_category: str = Field(default="Phones & PDAs")

    # Browser launch
    headless: bool = Field(default=True, description="Run the browser without a window")
    slow_mo: int = Field(default=0, ge=0, description="Delay between driver operations (ms)")

    # Timeouts (milliseconds)
    default_timeout: int = Field(default=30_000, ge=0, description="Assertion timeout")
    navigation_timeout: int = Field(default=30_000, ge=0)
    action_timeout: int = Field(default=10_000, ge=0)
    dom_ready_timeout: int = Field(default=10_000, ge=0)
    network_idle_timeout: int = Field(default=5_000, ge=0)
    wait_policy: Literal["best_effort", "strict"] = Field(
        default="best_effort",
        description="What a network-idle timeout does: log and continue, or fail",
    )

    # Reporting
    allure_results_dir: Path = Field(default=Path("allure-results"))
    test_results_dir: Path = Field(default=Path("test-results"))
    screenshot_dir: Path = Field(default=Path("screenshots"))

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def fall_back_on_malformed_number(cls, value: Any, info: ValidationInfo) -> Any:
        """Replace a value that is not an integer with the field default."""
        if isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except ValueError:
            default = cls.model_fields[info.field_name].default
            log.warning(
                "malformed_numeric_setting",
                field=info.field_name,
                value=value,
                fallback=default,
            )
            return default

    @field_validator("headless", mode="before")
    @classmethod
    def parse_headless(cls, value: Any) -> Any:
        """Accept the usual truthy spellings; anything else means headed."""
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "yes", "on")
        return value

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    # -------------------------------------------------------------------------
    # Section views
    # -------------------------------------------------------------------------

    @property
    def test_user(self) -> Credentials:
        return Credentials(
            email=self.test_user_email,
            password=self.test_user_password.get_secret_value(),
        )

    @property
    def admin_user(self) -> AdminCredentials:
        return AdminCredentials(
            username=self.admin_username,
            password=self.admin_password.get_secret_value(),
        )

    @property
    def seed_data(self) -> SeedData:
        return SeedData(product_name=self.test_product_name, category=self.test_category)

    @property
    def browser(self) -> BrowserOptions:
        return BrowserOptions(headless=self.headless, slow_mo=self.slow_mo)

    @property
    def timeouts(self) -> Timeouts:
        return Timeouts(
            default=self.default_timeout,
            navigation=self.navigation_timeout,
            action=self.action_timeout,
            dom_ready=self.dom_ready_timeout,
            network_idle=self.network_idle_timeout,
        )

    @property
    def reporting(self) -> ReportingPaths:
        return ReportingPaths(
            allure_results_dir=self.allure_results_dir,
            test_results_dir=self.test_results_dir,
            screenshot_dir=self.screenshot_dir,
        )


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance for this process.

    Raises:
        ConfigurationError: If an environment value cannot be used.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid E2E configuration: {e}") from e
