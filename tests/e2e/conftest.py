"""Playwright E2E test fixtures for the Citilink storefront.

This module provides fixtures for:
- Browser launch and context configuration from Settings
- Logging setup for the run
- Step reporter wired to Allure (screenshots, page source, console logs)

Usage:
    @pytest.mark.e2e
    def test_listing(page, settings, step_reporter):
        run_brand_filter_scenario(page, settings, case, step_reporter)
"""

from collections.abc import Generator
from typing import Any

import pytest
from playwright.sync_api import Page

from catalogqa.config.logging import configure_logging
from catalogqa.config.settings import Settings, get_settings
from catalogqa.reporting import AllureStepListener, BrowserConsoleLog, StepReporter

# =============================================================================
# Settings & Logging
# =============================================================================


@pytest.fixture(scope="session")
def e2e_settings() -> Settings:
    """Settings for the live run, read from the environment / .env once."""
    settings = get_settings()
    configure_logging(settings)
    return settings


# =============================================================================
# pytest-playwright Configuration
# =============================================================================


@pytest.fixture(scope="session")
def browser_type_launch_args(
    browser_type_launch_args: dict[str, Any], e2e_settings: Settings
) -> dict[str, Any]:
    """Configure browser launch arguments."""
    return {
        **browser_type_launch_args,
        "headless": not e2e_settings.headed,
        "slow_mo": e2e_settings.slow_mo_ms,
        "args": [*browser_type_launch_args.get("args", []), *e2e_settings.browser_args],
    }


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser context: window-sized viewport, Russian locale."""
    return {
        **browser_context_args,
        "no_viewport": True,
        "locale": "ru-RU",
        "ignore_https_errors": True,
    }


# =============================================================================
# Storefront Fixtures
# =============================================================================


@pytest.fixture
def storefront_page(page: Page, e2e_settings: Settings) -> Generator[Page, None, None]:
    """Browser page with the suite's default timeouts applied."""
    page.set_default_timeout(e2e_settings.default_timeout_ms)
    page.set_default_navigation_timeout(e2e_settings.default_timeout_ms)
    yield page


@pytest.fixture
def step_reporter(storefront_page: Page, e2e_settings: Settings) -> StepReporter:
    """Reporter whose steps land in the Allure report with attachments."""
    console_log = BrowserConsoleLog(storefront_page, types=e2e_settings.browser_log_types)
    reporter = StepReporter()
    reporter.subscribe(AllureStepListener(storefront_page, e2e_settings, console_log))
    return reporter
