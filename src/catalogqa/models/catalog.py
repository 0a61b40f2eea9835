"""Catalog scenario domain models."""

from pydantic import BaseModel, Field


class CatalogCase(BaseModel):
    """Input of one brand filter scenario."""

    category: str = Field(..., min_length=1)
    brands: list[str] = Field(default_factory=list)
    filter_term: str = Field(..., min_length=1)

    def __str__(self) -> str:
        return f"{self.category} {self.brands} {self.filter_term}"


class ListingReport(BaseModel):
    """Outcome of a successful traversal of a filtered listing."""

    filter_term: str
    pages_checked: int = Field(..., ge=1)
    products_checked: int = Field(..., ge=0)
