"""Configuration module for catalogqa.

Usage:
    from catalogqa.config import get_settings

    settings = get_settings()  # Cached, read-only
    page = MainPage(browser_page, settings)

Note:
    There is no module-level `settings` instance: it would fail on import
    when SITE_URL is not set. Build the settings once and pass them into
    page objects and scenarios.
"""

from catalogqa.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
