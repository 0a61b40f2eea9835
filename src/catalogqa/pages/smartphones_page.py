"""Citilink smartphones listing: brand filter, product cards and pagination."""

from __future__ import annotations

import time
from collections.abc import Iterable

import structlog
from playwright.sync_api import ElementHandle, Locator, Page
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from catalogqa.config.settings import Settings
from catalogqa.core.exceptions import (
    ConfigurationError,
    FilterMismatchError,
    PaginationLimitError,
)
from catalogqa.core.matching import normalize_brand, title_matches_filter
from catalogqa.models.catalog import ListingReport
from catalogqa.pages.base import BasePage
from catalogqa.reporting.events import StepReporter

log = structlog.get_logger(__name__)

SECTION_XPATH = "//div[@data-meta-name='SubcategoryPageTitle']//h1"
BRAND_CHECKBOX_XPATH = (
    "//div[@data-meta-name='FilterLabel' and @data-meta-value='{brand}']//input"
)
ACCEPT_COOKIES_BUTTON_XPATH = "//button[span[text()='Я согласен']]"
PRODUCT_ELEMENTS_XPATH = "//div[@data-meta-name='ProductVerticalSnippet']"
NEXT_PAGE_XPATH = "//a[@data-meta-name='PageLink__page-page-next']"


class SmartphonesPage(BasePage):
    """Product listing of a catalog subcategory."""

    def __init__(
        self,
        page: Page,
        settings: Settings,
        reporter: StepReporter | None = None,
    ) -> None:
        super().__init__(page, settings, reporter)
        self._cookies_accepted = False

    # -------------------------------------------------------------------------
    # Locators
    # -------------------------------------------------------------------------

    @property
    def section_heading(self) -> Locator:
        return self.page.locator(f"xpath={SECTION_XPATH}").first

    @property
    def accept_cookies_button(self) -> Locator:
        return self.page.locator(f"xpath={ACCEPT_COOKIES_BUTTON_XPATH}").first

    @property
    def products(self) -> Locator:
        """All product cards currently rendered. Re-read on every access."""
        return self.page.locator(f"xpath={PRODUCT_ELEMENTS_XPATH}")

    @property
    def next_page_button(self) -> Locator:
        return self.page.locator(f"xpath={NEXT_PAGE_XPATH}").first

    def brand_checkbox(self, brand: str) -> Locator:
        xpath = BRAND_CHECKBOX_XPATH.format(brand=normalize_brand(brand))
        return self.page.locator(f"xpath={xpath}").first

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def check_section(self, section_name: str) -> SmartphonesPage:
        """Assert that the listing heading shows the section name."""
        with self.reporter.step(
            f"Check the listing is section '{section_name}'", section=section_name
        ):
            self.should_have_text(
                self.section_heading,
                section_name,
                "section heading",
                contains=self.settings.section_match == "contains",
            )
        return self

    def select_brands(self, brands: Iterable[str]) -> SmartphonesPage:
        """Accept cookies, then tick the filter checkbox of every brand in order.

        An empty brand list ticks nothing and leaves the listing unfiltered.
        """
        brands = list(brands)
        with self.reporter.step(f"Filter products by brands: {brands}", brands=brands):
            self._accept_cookies()
            for brand in brands:
                description = f"brand filter '{normalize_brand(brand)}'"
                checkbox = self.should_be_enabled(self.brand_checkbox(brand), description)
                self.click(checkbox, description)
                log.info("brand_filter_selected", brand=normalize_brand(brand))
        return self

    def wait_for_products_to_load(self) -> SmartphonesPage:
        """Wait for every product card of the current page to exist."""
        with self.reporter.step("Wait for products to load"):
            self._wait_for_products()
        return self

    def results_match_filter(self, filter_term: str) -> ListingReport:
        """Check that every product on every listing page contains the filter term.

        Walks the listing forward through the next page control until it
        disappears. Product cards are re-queried on every page, once the cards
        of the previous page have gone. The walk is bounded by
        ``settings.max_pages`` and ``settings.pagination_deadline_seconds``.

        With ``filter_check_mode="fail_fast"`` the first offending title
        raises; with ``"collect_all"`` every page is walked and all offending
        titles are raised together.

        Raises:
            ConfigurationError: Empty filter term.
            FilterMismatchError: A product title lacks the filter term.
            PaginationLimitError: A next page still existed when a bound was hit.
            ElementNotFoundError: The previous page never went away, or a
                product card on the new page never rendered.
        """
        if not filter_term:
            raise ConfigurationError("Filter term must not be empty")

        fail_fast = self.settings.filter_check_mode == "fail_fast"
        mismatches: list[str] = []
        pages_checked = 0
        products_checked = 0

        with self.reporter.step(
            f"Check products match filter '{filter_term}'", filter_term=filter_term
        ):
            deadline = time.monotonic() + self.settings.pagination_deadline_seconds

            while True:
                titles = [
                    self.text_of(
                        product,
                        f"product card #{index + 1}",
                        timeout_ms=self.settings.product_wait_timeout_ms,
                    )
                    for index, product in enumerate(self.products.all())
                ]
                pages_checked += 1

                for title in titles:
                    products_checked += 1
                    if title_matches_filter(title, filter_term):
                        continue
                    log.warning(
                        "product_filter_mismatch",
                        filter_term=filter_term,
                        title=title,
                        page=pages_checked,
                    )
                    if fail_fast:
                        raise FilterMismatchError(filter_term, [title])
                    mismatches.append(title)

                log.info("listing_page_checked", page=pages_checked, products=len(titles))

                next_button = self.next_page_button
                if not self.exists(next_button):
                    break
                if pages_checked >= self.settings.max_pages:
                    raise PaginationLimitError(pages_checked, reason="max_pages")
                if time.monotonic() >= deadline:
                    raise PaginationLimitError(pages_checked, reason="deadline")

                shown = self._first_product_handle()
                self.click(next_button, "next page button")
                log.info("listing_next_page", page=pages_checked + 1)
                self._wait_for_listing_replaced(shown, pages_checked + 1)
                self._wait_for_products()

            if mismatches:
                raise FilterMismatchError(filter_term, mismatches)

        log.info(
            "listing_matches_filter",
            filter_term=filter_term,
            pages=pages_checked,
            products=products_checked,
        )
        return ListingReport(
            filter_term=filter_term,
            pages_checked=pages_checked,
            products_checked=products_checked,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _accept_cookies(self) -> None:
        if self._cookies_accepted:
            log.debug("cookie_consent_already_accepted")
            return
        button = self.should_be_enabled(self.accept_cookies_button, "cookie consent button")
        self.click(button, "cookie consent button")
        self._cookies_accepted = True

    def _wait_for_products(self) -> int:
        """Wait for each product card, one at a time. Returns how many there were."""
        products = self.products
        count = products.count()
        for index in range(count):
            self.should_exist(
                products.nth(index),
                f"product card #{index + 1}",
                timeout_ms=self.settings.product_wait_timeout_ms,
            )
        return count

    def _first_product_handle(self) -> ElementHandle | None:
        """Pin the first card of the page being left, if it has any."""
        products = self.products
        if products.count() == 0:
            return None
        timeout = self.settings.product_wait_timeout_ms
        try:
            return products.first.element_handle(timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise self._timed_out("product card #1", "attached", timeout) from exc

    def _wait_for_listing_replaced(self, shown: ElementHandle | None, page_number: int) -> None:
        """Block until the cards of the previous page are gone.

        Locators re-resolve against whatever is rendered, and right after the
        click that is still the page being left.
        """
        timeout = self.settings.default_timeout_ms
        if shown is not None:
            try:
                shown.wait_for_element_state("hidden", timeout=timeout)
            except PlaywrightTimeoutError as exc:
                raise self._timed_out(
                    f"listing page {page_number}", "loaded", timeout
                ) from exc
            except PlaywrightError:
                # Full navigation destroyed the old document along with the card
                log.debug("listing_document_replaced", page=page_number)
        self.should_exist(self.products.first, "product card #1", timeout_ms=timeout)
