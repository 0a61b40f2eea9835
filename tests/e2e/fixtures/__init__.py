"""E2E test fixtures package."""

from tests.e2e.fixtures.test_data import CATALOG_CASES

__all__ = ["CATALOG_CASES"]
