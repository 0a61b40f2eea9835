"""Allure integration for page object steps.

Every reported step becomes an Allure step. When the step finishes, the
listener attaches:
- a PNG screenshot of the current viewport
- the page HTML
- the browser console messages of each configured type

Capture failures are logged and skipped; they never change the step result.
"""

import allure
import structlog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from catalogqa.config.settings import Settings
from catalogqa.reporting.console_log import BrowserConsoleLog
from catalogqa.reporting.events import StepEvent

log = structlog.get_logger(__name__)

SCREENSHOT_NAME = "Screenshot"
PAGE_SOURCE_NAME = "Page source"


class AllureStepListener:
    """Mirrors reporter steps into the Allure lifecycle with attachments."""

    def __init__(
        self,
        page: Page,
        settings: Settings,
        console_log: BrowserConsoleLog | None = None,
    ) -> None:
        self._page = page
        self._settings = settings
        self._console_log = console_log
        self._open_steps: list = []

    def on_step_started(self, event: StepEvent) -> None:
        step = allure.step(event.title)
        step.__enter__()
        self._open_steps.append(step)

    def on_step_finished(self, event: StepEvent) -> None:
        try:
            self.attach_artifacts()
        finally:
            self._close_step(event.error)

    def _close_step(self, error: BaseException | None) -> None:
        if not self._open_steps:
            return
        step = self._open_steps.pop()
        if error is None:
            step.__exit__(None, None, None)
        else:
            step.__exit__(type(error), error, error.__traceback__)

    def attach_artifacts(self) -> None:
        """Attach screenshot, page source and console logs to the current step."""
        if self._settings.save_screenshots:
            screenshot = self._screenshot_bytes()
            if screenshot is not None:
                allure.attach(
                    screenshot,
                    name=SCREENSHOT_NAME,
                    attachment_type=allure.attachment_type.PNG,
                )

        if self._settings.save_page_source:
            html = self._page_source()
            if html is not None:
                allure.attach(
                    html,
                    name=PAGE_SOURCE_NAME,
                    attachment_type=allure.attachment_type.HTML,
                )

        if self._console_log is not None:
            for message_type in self._settings.browser_log_types:
                allure.attach(
                    self._console_log.drain(message_type),
                    name=f"Log : {message_type}",
                    attachment_type=allure.attachment_type.TEXT,
                )

    def _screenshot_bytes(self) -> bytes | None:
        if self._page.is_closed():
            return None
        try:
            return self._page.screenshot()
        except PlaywrightError as exc:
            log.warning("screenshot_capture_failed", error=str(exc))
            return None

    def _page_source(self) -> str | None:
        if self._page.is_closed():
            return None
        try:
            return self._page.content()
        except PlaywrightError as exc:
            log.warning("page_source_capture_failed", error=str(exc))
            return None
