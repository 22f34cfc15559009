"""Data models for Catalog Taxonomy.

This module contains Pydantic models for data validation and serialization.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from catalog_taxonomy.models.category import Category, CategoryKind
from catalog_taxonomy.models.taxonomy import Taxonomy, TaxonomyGroup


class ApplicationChoice(BaseModel):
    """An application entry offered once an area has been selected."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(description="Raw catalog label, as stored on tickets")
    display_value: str = Field(description="Human-readable label text")
    area: Optional[str] = Field(default=None, description="Owning area, if any")


__all__ = [
    "ApplicationChoice",
    "Category",
    "CategoryKind",
    "Taxonomy",
    "TaxonomyGroup",
]
