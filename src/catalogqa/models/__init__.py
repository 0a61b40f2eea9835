"""Domain models for catalog scenarios."""

from catalogqa.models.catalog import CatalogCase, ListingReport

__all__ = ["CatalogCase", "ListingReport"]
