"""
Test Fakes

In-memory doubles of the Playwright page surface used by the page objects.
No browser needed.

Usage:
    from tests.support.fakes import build_storefront

    store = build_storefront([["Apple iPhone 15"], ["Apple iPhone 14"]])
    listing = SmartphonesPage(store.page, settings)
"""

from tests.support.fakes.fake_page import (
    FakeConsoleMessage,
    FakeElement,
    FakeElementHandle,
    FakeLocator,
    FakeLocatorAssertions,
    FakePage,
    fake_expect,
)
from tests.support.fakes.storefront import FakeStorefront, build_storefront, xpath

__all__ = [
    "FakeConsoleMessage",
    "FakeElement",
    "FakeElementHandle",
    "FakeLocator",
    "FakeLocatorAssertions",
    "FakePage",
    "FakeStorefront",
    "build_storefront",
    "fake_expect",
    "xpath",
]
