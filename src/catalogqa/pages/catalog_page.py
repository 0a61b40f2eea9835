"""Citilink catalog menu: categories and their subcategories."""

from __future__ import annotations

from playwright.sync_api import Locator

from catalogqa.pages.base import BasePage
from catalogqa.pages.smartphones_page import SmartphonesPage

CATEGORY_XPATH = (
    "//a[contains(@class, 'CatalogLayout__link_level-1') and contains(., '{name}')]"
)
SUBCATEGORY_XPATH = "//li[@class='CatalogLayout__children-item']//a[text()='{name}']"


class CatalogPage(BasePage):
    """Opened catalog menu."""

    def category_link(self, name: str) -> Locator:
        return self.page.locator(f"xpath={CATEGORY_XPATH.format(name=name)}").first

    def subcategory_link(self, name: str) -> Locator:
        return self.page.locator(f"xpath={SUBCATEGORY_XPATH.format(name=name)}").first

    def hover_category(self, category_name: str) -> CatalogPage:
        """Hover a top-level category to reveal its subcategories."""
        with self.reporter.step(
            f"Hover category '{category_name}'", category=category_name
        ):
            description = f"category '{category_name}'"
            link = self.should_be_visible(self.category_link(category_name), description)
            self.hover(link, description)
        return self

    def click_subcategory(self, subcategory_name: str) -> SmartphonesPage:
        """Open the listing of a subcategory."""
        with self.reporter.step(
            f"Open subcategory '{subcategory_name}'", subcategory=subcategory_name
        ):
            description = f"subcategory '{subcategory_name}'"
            link = self.should_be_visible(self.subcategory_link(subcategory_name), description)
            self.click(link, description)
        return SmartphonesPage(self.page, self.settings, self.reporter)
