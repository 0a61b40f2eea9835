"""Text matching rules for product titles, brand labels and headings."""

import re

_WHITESPACE = re.compile(r"\s+")


def title_matches_filter(title: str, filter_term: str) -> bool:
    """Check that a product title contains the filter term, ignoring case.

    Plain substring containment: no word boundaries, no stemming.

    Example:
        title_matches_filter("Смартфон Apple iPhone 15 128Gb", "iphone")  # True
    """
    return filter_term.upper() in title.upper()


def normalize_brand(brand: str) -> str:
    """Convert a brand name to the label the filter panel uses ("apple" -> "APPLE")."""
    return brand.strip().upper()


def normalize_text(text: str) -> str:
    """Collapse runs of whitespace and strip the ends."""
    return _WHITESPACE.sub(" ", text).strip()
