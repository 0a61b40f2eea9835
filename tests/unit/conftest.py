"""Fixtures shared by the browser-free unit tests.

Page objects assert through ``playwright.sync_api.expect``, which only
accepts real locators. Unit tests route it to the in-memory fake instead.
"""

from collections.abc import Generator
from unittest.mock import patch

import pytest

from tests.support.fakes import fake_expect


@pytest.fixture(autouse=True)
def fake_locator_assertions() -> Generator[None, None, None]:
    """Route page object assertions to the fake locators."""
    with patch("catalogqa.pages.base.expect", fake_expect):
        yield
