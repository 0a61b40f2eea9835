"""Citilink main page."""

from __future__ import annotations

import structlog
from playwright.sync_api import Locator

from catalogqa.pages.base import BasePage
from catalogqa.pages.catalog_page import CatalogPage

log = structlog.get_logger(__name__)

CATALOG_BUTTON_CSS = "a[data-meta-name='DesktopHeaderFixed__catalog-menu']"


class MainPage(BasePage):
    """Start page of the shop: header with the catalog menu button."""

    @property
    def catalog_button(self) -> Locator:
        return self.page.locator(CATALOG_BUTTON_CSS).first

    def open(self) -> MainPage:
        """Navigate to the configured site URL."""
        url = self.settings.site_url
        with self.reporter.step("Open site", url=url):
            self.page.goto(
                url,
                wait_until=self.settings.navigation_wait_until,
                timeout=self.settings.default_timeout_ms,
            )
            log.info("site_opened", url=url)
        return self

    def click_catalog(self) -> CatalogPage:
        """Open the catalog menu."""
        with self.reporter.step("Open product catalog"):
            button = self.should_be_visible(self.catalog_button, "catalog button")
            self.click(button, "catalog button")
        return CatalogPage(self.page, self.settings, self.reporter)
