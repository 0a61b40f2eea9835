"""E2E test data: brand filter cases for the catalog scenario."""

from catalogqa.models.catalog import CatalogCase

# =============================================================================
# Brand Filter Cases
# =============================================================================

CATALOG_CASES = [
    CatalogCase(category="Смартфоны", brands=["Apple"], filter_term="iPhone"),
]
