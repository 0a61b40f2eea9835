"""Step reporting: event hub, browser console capture and Allure listener.

Usage:
    from catalogqa.reporting import AllureStepListener, BrowserConsoleLog, StepReporter

    reporter = StepReporter()
    reporter.subscribe(AllureStepListener(page, settings, BrowserConsoleLog(page)))
"""

from catalogqa.reporting.allure_listener import AllureStepListener
from catalogqa.reporting.console_log import BrowserConsoleLog
from catalogqa.reporting.events import StepEvent, StepListener, StepReporter, StepStatus

__all__ = [
    "AllureStepListener",
    "BrowserConsoleLog",
    "StepEvent",
    "StepListener",
    "StepReporter",
    "StepStatus",
]
