"""Brand filter scenario: catalog navigation, brand filter, listing check."""

import structlog
from playwright.sync_api import Page

from catalogqa.config.settings import Settings
from catalogqa.models.catalog import CatalogCase, ListingReport
from catalogqa.pages.main_page import MainPage
from catalogqa.reporting.events import StepReporter

log = structlog.get_logger(__name__)


def run_brand_filter_scenario(
    page: Page,
    settings: Settings,
    case: CatalogCase,
    reporter: StepReporter | None = None,
) -> ListingReport:
    """Run one brand filter case end to end.

    Each step needs the previous one to have succeeded; the first failure
    propagates and ends the scenario.

    Args:
        page: Browser page to drive.
        settings: Suite settings (site URL, waits, pagination bounds).
        case: Category, brands and filter term to check.
        reporter: Step reporter the page objects publish to.

    Returns:
        Listing traversal report when every product matched.
    """
    reporter = reporter or StepReporter()
    structlog.contextvars.bind_contextvars(scenario="brand_filter", category=case.category)
    try:
        log.info("scenario_started", brands=case.brands, filter_term=case.filter_term)

        main_page = MainPage(page, settings, reporter).open()
        catalog = main_page.click_catalog()
        catalog = catalog.hover_category(case.category)
        listing = catalog.click_subcategory(case.category)
        listing = listing.check_section(case.category)
        listing = listing.select_brands(case.brands)
        listing = listing.wait_for_products_to_load()
        report = listing.results_match_filter(case.filter_term)

        log.info(
            "scenario_passed",
            pages=report.pages_checked,
            products=report.products_checked,
        )
        return report
    finally:
        structlog.contextvars.unbind_contextvars("scenario", "category")
