"""Shared pytest fixtures for catalogqa tests.

This module provides fixtures for:
- Environment defaults so settings can be built without a .env file
- Settings instances with short waits for fast unit tests
- Step reporter with a recording listener

Usage:
    @pytest.mark.unit
    def test_something(settings, step_spy):
        listing = SmartphonesPage(page, settings, step_spy.reporter)
"""

import os
from collections.abc import Callable, Generator
from typing import Any

import pytest

from catalogqa.config.settings import Settings
from catalogqa.reporting.events import StepEvent, StepReporter

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first, then sets defaults for any missing variables.
    """
    from dotenv import load_dotenv

    from catalogqa.config.settings import get_settings

    original_env = os.environ.copy()

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()

    os.environ.setdefault("SITE_URL", "https://www.citilink.ru/")
    get_settings.cache_clear()

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)
    get_settings.cache_clear()


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Build settings with short waits, ignoring .env.

    Usage:
        def test_collect(make_settings):
            settings = make_settings(filter_check_mode="collect_all")
    """

    def _make(**overrides: Any) -> Settings:
        values: dict[str, Any] = {
            "site_url": "https://www.citilink.ru/",
            "default_timeout_ms": 300,
            "product_wait_timeout_ms": 50,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)  # type: ignore[call-arg]

    return _make


@pytest.fixture
def settings(make_settings: Callable[..., Settings]) -> Settings:
    """Settings with short waits."""
    return make_settings()


# =============================================================================
# Reporting Fixtures
# =============================================================================


class StepSpy:
    """Records every step event published by a reporter."""

    def __init__(self) -> None:
        self.reporter = StepReporter()
        self.reporter.subscribe(self)
        self.events: list[StepEvent] = []

    def on_step_started(self, event: StepEvent) -> None:
        self.events.append(event)

    def on_step_finished(self, event: StepEvent) -> None:
        self.events.append(event)

    @property
    def finished(self) -> list[StepEvent]:
        return [event for event in self.events if event.finished]

    @property
    def titles(self) -> list[str]:
        return [event.title for event in self.finished]


@pytest.fixture
def step_spy() -> StepSpy:
    """Reporter with a listener that records events."""
    return StepSpy()
