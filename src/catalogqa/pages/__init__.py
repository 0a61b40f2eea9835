"""
Page Objects

Page Object Model for the Citilink storefront.
Encapsulates page interactions and locators.

Usage:
    from catalogqa.pages import MainPage

    listing = (
        MainPage(page, settings, reporter)
        .open()
        .click_catalog()
        .hover_category("Смартфоны")
        .click_subcategory("Смартфоны")
    )

Pattern:
    - One class per page/major component
    - Methods for actions, each reported as a step
    - Properties for locators
    - Assertions as methods
"""

from catalogqa.pages.base import BasePage
from catalogqa.pages.catalog_page import CatalogPage
from catalogqa.pages.main_page import MainPage
from catalogqa.pages.smartphones_page import SmartphonesPage

__all__ = ["BasePage", "CatalogPage", "MainPage", "SmartphonesPage"]
