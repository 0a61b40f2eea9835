"""catalogqa exception hierarchy.

This module defines the base exception class and the specialized
exceptions raised by page objects and the listing checks.

Assertion-style failures (a product that does not match the filter, a
heading with the wrong text) also inherit from AssertionError so pytest
and Allure report them as test failures rather than broken tests.
"""


class CatalogQAError(Exception):
    """Base exception for all catalogqa errors.

    All custom exceptions in catalogqa should inherit from this class
    to enable consistent error handling and logging.
    """

    pass


class ConfigurationError(CatalogQAError):
    """Raised when configuration or call arguments are unusable.

    Example:
        raise ConfigurationError("Filter term must not be empty")
    """

    pass


class ElementNotFoundError(CatalogQAError):
    """Raised when an element does not reach a condition within its wait window.

    Attributes:
        description: Human readable name of the element that was awaited.
        condition: Condition that was not met (visible, enabled, attached).
        timeout_ms: Wait window in milliseconds.

    Example:
        raise ElementNotFoundError("catalog button", condition="visible", timeout_ms=6000)
    """

    def __init__(self, description: str, condition: str, timeout_ms: float) -> None:
        self.description = description
        self.condition = condition
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Element '{description}' was not {condition} within {timeout_ms:g} ms"
        )


class FilterMismatchError(CatalogQAError, AssertionError):
    """Raised when listed products do not contain the filter term.

    Attributes:
        filter_term: Term every product title must contain.
        titles: Offending product titles, in the order they were found.
    """

    def __init__(self, filter_term: str, titles: list[str]) -> None:
        self.filter_term = filter_term
        self.titles = list(titles)
        if len(self.titles) == 1:
            message = f"Product '{self.titles[0]}' does not match filter '{filter_term}'"
        else:
            listed = "; ".join(f"'{title}'" for title in self.titles)
            message = (
                f"{len(self.titles)} products do not match filter '{filter_term}': {listed}"
            )
        super().__init__(message)


class SectionMismatchError(CatalogQAError, AssertionError):
    """Raised when a page heading does not show the expected section name.

    Attributes:
        expected: Section name the heading should show.
        actual: Last heading text observed, None if the heading never rendered text.
    """

    def __init__(self, expected: str, actual: str | None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected section '{expected}', got '{actual}'")


class PaginationLimitError(CatalogQAError):
    """Raised when a listing keeps offering a next page past the configured bounds.

    Attributes:
        pages_checked: Listing pages fully checked before giving up.
        reason: Which bound was hit ("max_pages" or "deadline").
    """

    def __init__(self, pages_checked: int, reason: str) -> None:
        self.pages_checked = pages_checked
        self.reason = reason
        super().__init__(
            f"Pagination stopped after {pages_checked} pages: {reason} reached "
            "while a next page control was still present"
        )
