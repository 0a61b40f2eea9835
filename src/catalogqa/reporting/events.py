"""Step outcome events and the reporter that publishes them.

Page objects wrap every user-visible action in ``reporter.step(...)``.
The reporter emits a started event, runs the block, then emits a finished
event carrying the outcome. Observers (the Allure listener, a test spy)
subscribe to the reporter; they never change the outcome of a step.
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Protocol

import structlog

log = structlog.get_logger(__name__)


class StepStatus(str, Enum):
    """Lifecycle status of a reported step."""

    STARTED = "started"
    PASSED = "passed"
    FAILED = "failed"  # Assertion did not hold
    BROKEN = "broken"  # Anything else went wrong (timeouts, browser errors)


def status_for(error: BaseException) -> StepStatus:
    """Map an exception to the step status reported for it."""
    if isinstance(error, AssertionError):
        return StepStatus.FAILED
    return StepStatus.BROKEN


@dataclass(frozen=True)
class StepEvent:
    """A single step notification.

    Attributes:
        title: Human readable step title.
        status: STARTED for the opening event, the outcome for the closing one.
        params: Arguments the step was called with.
        error: Exception that ended the step, None unless FAILED/BROKEN.
        duration_ms: Step duration, 0 for the opening event.
    """

    title: str
    status: StepStatus
    params: dict[str, Any] = field(default_factory=dict)
    error: BaseException | None = None
    duration_ms: float = 0.0

    @property
    def finished(self) -> bool:
        return self.status is not StepStatus.STARTED


class StepListener(Protocol):
    """Observer of step events."""

    def on_step_started(self, event: StepEvent) -> None: ...

    def on_step_finished(self, event: StepEvent) -> None: ...


class StepReporter:
    """Publishes step events to subscribed listeners."""

    def __init__(self) -> None:
        self._listeners: list[StepListener] = []

    def subscribe(self, listener: StepListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: StepListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @contextmanager
    def step(self, title: str, **params: Any) -> Iterator[StepEvent]:
        """Report the enclosed block as one step.

        Exceptions raised inside the block are reported and re-raised
        unchanged.

        Example:
            with reporter.step("Open catalog"):
                button.click()
        """
        event = StepEvent(title=title, status=StepStatus.STARTED, params=params)
        log.debug("step_started", title=title, **params)
        self._emit("on_step_started", event)

        started = time.monotonic()
        try:
            yield event
        except Exception as exc:
            finished = replace(
                event,
                status=status_for(exc),
                error=exc,
                duration_ms=(time.monotonic() - started) * 1000,
            )
            log.warning(
                "step_failed",
                title=title,
                status=finished.status.value,
                error=str(exc),
            )
            self._emit("on_step_finished", finished)
            raise

        finished = replace(
            event,
            status=StepStatus.PASSED,
            duration_ms=(time.monotonic() - started) * 1000,
        )
        log.info("step_passed", title=title, duration_ms=round(finished.duration_ms, 1))
        self._emit("on_step_finished", finished)

    def _emit(self, hook: str, event: StepEvent) -> None:
        for listener in list(self._listeners):
            try:
                getattr(listener, hook)(event)
            except Exception:
                # Observers must not decide the step outcome
                log.exception(
                    "step_listener_failed",
                    listener=type(listener).__name__,
                    hook=hook,
                    title=event.title,
                )
