"""Shared page object helpers: element waits and interactions.

Every wait raises ElementNotFoundError naming the element, the condition
and the wait window, so a failed run says which affordance was missing.
"""

from __future__ import annotations

import time

import structlog
from playwright.sync_api import Locator, Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from catalogqa.config.settings import Settings
from catalogqa.core.exceptions import ElementNotFoundError, SectionMismatchError
from catalogqa.core.matching import normalize_text
from catalogqa.reporting.events import StepReporter

log = structlog.get_logger(__name__)


def _now_ms() -> float:
    return time.monotonic() * 1000


def _remaining(timeout: float, started: float) -> float:
    # Playwright reads a zero timeout as "wait forever"
    return max(timeout - (_now_ms() - started), 1.0)


class BasePage:
    """Base class for page objects with timeout-aware helpers."""

    def __init__(
        self,
        page: Page,
        settings: Settings,
        reporter: StepReporter | None = None,
    ) -> None:
        self.page = page
        self.settings = settings
        self.reporter = reporter or StepReporter()

    def _timeout(self, timeout_ms: float | None) -> float:
        return self.settings.default_timeout_ms if timeout_ms is None else timeout_ms

    def _timed_out(self, description: str, condition: str, timeout: float) -> ElementNotFoundError:
        log.warning(
            "element_wait_timeout",
            element=description,
            condition=condition,
            timeout_ms=timeout,
        )
        return ElementNotFoundError(description, condition=condition, timeout_ms=timeout)

    # -------------------------------------------------------------------------
    # Waits
    # -------------------------------------------------------------------------

    def _wait_for_state(
        self,
        locator: Locator,
        state: str,
        description: str,
        timeout_ms: float | None,
    ) -> Locator:
        timeout = self._timeout(timeout_ms)
        try:
            locator.wait_for(state=state, timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise self._timed_out(description, state, timeout) from exc
        return locator

    def should_be_visible(
        self, locator: Locator, description: str, timeout_ms: float | None = None
    ) -> Locator:
        """Wait until the element is visible."""
        return self._wait_for_state(locator, "visible", description, timeout_ms)

    def should_exist(
        self, locator: Locator, description: str, timeout_ms: float | None = None
    ) -> Locator:
        """Wait until the element is attached to the DOM, visible or not."""
        return self._wait_for_state(locator, "attached", description, timeout_ms)

    def should_be_enabled(
        self, locator: Locator, description: str, timeout_ms: float | None = None
    ) -> Locator:
        """Wait until the element is visible and enabled.

        Both conditions share one wait window.
        """
        timeout = self._timeout(timeout_ms)
        started = _now_ms()
        self.should_be_visible(locator, description, timeout)

        try:
            expect(locator).to_be_enabled(timeout=_remaining(timeout, started))
        except AssertionError as exc:
            raise self._timed_out(description, "enabled", timeout) from exc
        return locator

    def should_have_text(
        self,
        locator: Locator,
        expected: str,
        description: str,
        timeout_ms: float | None = None,
        contains: bool = False,
    ) -> Locator:
        """Wait until the element text equals ``expected`` (whitespace-normalised).

        With ``contains=True`` the text only has to contain ``expected``,
        ignoring case.

        Raises:
            ElementNotFoundError: The element never became visible, or went away.
            SectionMismatchError: The element showed different text until the window closed.
        """
        timeout = self._timeout(timeout_ms)
        started = _now_ms()
        self.should_be_visible(locator, description, timeout)

        wanted = normalize_text(expected)
        assertions = expect(locator)
        try:
            if contains:
                assertions.to_contain_text(
                    wanted,
                    ignore_case=True,
                    use_inner_text=True,
                    timeout=_remaining(timeout, started),
                )
            else:
                assertions.to_have_text(
                    wanted, use_inner_text=True, timeout=_remaining(timeout, started)
                )
        except AssertionError as exc:
            actual = normalize_text(self.text_of(locator, description, timeout))
            log.warning("element_text_mismatch", element=description, expected=wanted, actual=actual)
            raise SectionMismatchError(expected=wanted, actual=actual) from exc
        return locator

    def text_of(self, locator: Locator, description: str, timeout_ms: float | None = None) -> str:
        """Rendered text of the element."""
        timeout = self._timeout(timeout_ms)
        try:
            return locator.inner_text(timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise self._timed_out(description, "attached", timeout) from exc

    @staticmethod
    def exists(locator: Locator) -> bool:
        """Check presence in the DOM right now, without waiting.

        Visibility and enabled state are ignored.
        """
        return locator.count() > 0

    # -------------------------------------------------------------------------
    # Interactions
    # -------------------------------------------------------------------------

    def click(self, locator: Locator, description: str) -> None:
        timeout = self.settings.default_timeout_ms
        try:
            locator.click(timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise self._timed_out(description, "clickable", timeout) from exc
        log.debug("element_clicked", element=description)

    def hover(self, locator: Locator, description: str) -> None:
        """Move the pointer over the element without clicking it."""
        timeout = self.settings.default_timeout_ms
        try:
            locator.hover(timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise self._timed_out(description, "hoverable", timeout) from exc
        log.debug("element_hovered", element=description)
