"""Catalog Taxonomy - area/application catalog parsing and classification.

This package turns the flattened "Area/Service/Component -> Application"
catalog of a ticketing custom field into a grouped taxonomy and report, and
provides the per-label lookups (owning area, display name) used to filter
application pickers.
"""

__version__ = "0.1.0"
__author__ = "Trickl"

from catalog_taxonomy.classification import (
    classify,
    extract_area,
    extract_display_name,
)
from catalog_taxonomy.config import Settings, get_settings
from catalog_taxonomy.models import Category, CategoryKind, Taxonomy
from catalog_taxonomy.parsing import tokenize_payload
from catalog_taxonomy.report import build_taxonomy, render_report

__all__ = [
    "Category",
    "CategoryKind",
    "Settings",
    "Taxonomy",
    "build_taxonomy",
    "classify",
    "extract_area",
    "extract_display_name",
    "get_settings",
    "render_report",
    "tokenize_payload",
    "__version__",
    "__author__",
]
