"""Browser console capture, grouped by console message type."""

from collections import defaultdict
from collections.abc import Iterable

import structlog
from playwright.sync_api import ConsoleMessage, Page

log = structlog.get_logger(__name__)


class BrowserConsoleLog:
    """Collects console messages emitted by a page.

    Messages are kept per type ("log", "warning", "error", ...) until they
    are drained, so each report step only gets the messages logged since
    the previous step.
    """

    def __init__(self, page: Page, types: Iterable[str] | None = None) -> None:
        self._types = set(types) if types is not None else None
        self._messages: dict[str, list[str]] = defaultdict(list)
        page.on("console", self._on_console)

    def _on_console(self, message: ConsoleMessage) -> None:
        if self._types is not None and message.type not in self._types:
            return
        self._messages[message.type].append(message.text)

    def messages(self, message_type: str) -> list[str]:
        """Messages of one type collected so far."""
        return list(self._messages.get(message_type, []))

    def drain(self, message_type: str) -> str:
        """Return the collected messages of one type as text and forget them."""
        messages = self._messages.pop(message_type, [])
        if messages:
            log.debug("browser_console_drained", type=message_type, count=len(messages))
        return "\n\n".join(messages)
