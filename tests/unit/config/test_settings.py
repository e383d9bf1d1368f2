"""Unit tests for suite settings."""

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from storefront_e2e.config.settings import Settings, get_settings
from storefront_e2e.core.exceptions import ConfigurationError

SETTINGS_ENV_VARS = [name.upper() for name in Settings.model_fields]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every variable Settings reads, so defaults apply."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
@pytest.mark.usefixtures("clean_env")
class TestSettingsDefaults:
    """Tests for values used when nothing is configured."""

    def test_default_settings_are_valid(self) -> None:
        """Default settings should pass all validation."""
        # Use _env_file=None to ignore .env and test true defaults
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.base_url == "https://demoqa.com"
        assert settings.headless is True
        assert settings.slow_mo == 0
        assert settings.wait_policy == "best_effort"
        assert settings.log_level == "INFO"
        assert settings.debug is False

    def test_default_timeouts(self) -> None:
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        timeouts = settings.timeouts
        assert timeouts.default == 30_000
        assert timeouts.navigation == 30_000
        assert timeouts.action == 10_000
        assert timeouts.dom_ready == 10_000
        assert timeouts.network_idle == 5_000

    def test_default_accounts_and_seed_data(self) -> None:
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.test_user.email == "test@example.com"
        assert settings.test_user.password == "testpassword123"
        assert settings.admin_user.username == "admin"
        assert settings.admin_user.password == "admin123"
        assert settings.seed_data.product_name == "iPhone"
        assert settings.seed_data.category == "Phones & PDAs"

    def test_default_reporting_paths(self) -> None:
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.reporting.allure_results_dir == Path("allure-results")
        assert settings.reporting.test_results_dir == Path("test-results")
        assert settings.reporting.screenshot_dir == Path("screenshots")

    def test_passwords_are_not_rendered(self) -> None:
        """Secrets stay masked in the settings repr."""
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert "testpassword123" not in repr(settings)
        assert "admin123" not in repr(settings)


@pytest.mark.unit
@pytest.mark.usefixtures("clean_env")
class TestSettingsFromEnvironment:
    """Tests for values read from environment variables."""

    def test_environment_overrides_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BASE_URL", "https://staging.example.com")
        monkeypatch.setenv("TEST_USER_EMAIL", "qa@example.com")
        monkeypatch.setenv("NETWORK_IDLE_TIMEOUT", "2500")
        monkeypatch.setenv("WAIT_POLICY", "strict")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.base_url == "https://staging.example.com"
        assert settings.test_user.email == "qa@example.com"
        assert settings.timeouts.network_idle == 2_500
        assert settings.wait_policy == "strict"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", True), ("TRUE", True), ("1", True), ("yes", True), ("false", False), ("0", False), ("", False)],
    )
    def test_headless_spellings(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
    ) -> None:
        monkeypatch.setenv("HEADLESS", raw)

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.browser.headless is expected

    def test_numeric_values_are_parsed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SLOW_MO", " 250 ")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.browser.slow_mo == 250


@pytest.mark.unit
@pytest.mark.usefixtures("clean_env")
class TestSettingsValidation:
    """Tests for Settings validation."""

    def test_malformed_number_falls_back_to_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """
        GIVEN a timeout variable that is not an integer
        WHEN settings are loaded
        THEN the field default is used
        AND a warning names the field
        """
        monkeypatch.setenv("NAVIGATION_TIMEOUT", "soon")

        with patch("storefront_e2e.config.settings.log") as mock_log:
            settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.navigation_timeout == 30_000
        mock_log.warning.assert_called_once()
        args, kwargs = mock_log.warning.call_args
        assert args == ("malformed_numeric_setting",)
        assert kwargs["field"] == "navigation_timeout"
        assert kwargs["fallback"] == 30_000

    def test_fractional_number_falls_back_to_default(self) -> None:
        settings = Settings(_env_file=None, slow_mo="1.5")  # type: ignore[call-arg]
        assert settings.slow_mo == 0

    def test_negative_timeout_is_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, action_timeout=-1)  # type: ignore[call-arg]
        assert "greater than or equal to 0" in str(exc_info.value)

    def test_base_url_must_use_http(self) -> None:
        """Base URL must use HTTP(S) protocol."""
        Settings(_env_file=None, base_url="http://localhost:8080")  # type: ignore[call-arg]

        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, base_url="ftp://example.com")  # type: ignore[call-arg]
        assert "Base URL must start with" in str(exc_info.value)

    def test_base_url_trailing_slash_is_removed(self) -> None:
        settings = Settings(_env_file=None, base_url="https://demoqa.com/")  # type: ignore[call-arg]
        assert settings.base_url == "https://demoqa.com"

    def test_wait_policy_must_be_known(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, wait_policy="eventually")  # type: ignore[call-arg]

    def test_log_level_must_be_valid(self) -> None:
        """Log level must be one of the allowed values."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR"]:
            settings = Settings(_env_file=None, log_level=level)  # type: ignore[call-arg]
            assert settings.log_level == level

        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="INVALID")  # type: ignore[call-arg]

    def test_settings_are_frozen(self) -> None:
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        with pytest.raises(ValidationError):
            settings.base_url = "https://other.example.com"  # type: ignore[misc]


@pytest.mark.unit
@pytest.mark.usefixtures("clean_env", "fresh_settings")
class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_returns_same_instance(self) -> None:
        assert get_settings() is get_settings()

    def test_invalid_environment_raises_configuration_error(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """
        GIVEN a base URL without an HTTP scheme
        WHEN settings are requested
        THEN ConfigurationError is raised
        """
        monkeypatch.setenv("BASE_URL", "demoqa.com")

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_cache_clear_picks_up_new_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_PRODUCT_NAME", "MacBook Pro")
        first = get_settings()

        monkeypatch.setenv("TEST_PRODUCT_NAME", "iPad")
        get_settings.cache_clear()

        assert first.seed_data.product_name == "MacBook Pro"
        assert get_settings().seed_data.product_name == "iPad"
