"""Label classification and the inverse lookups used by application pickers."""

from .areas import area_name_from_value, area_original_value, extract_area
from .classifier import classify
from .display import application_name, extract_display_name
from .rules import DEFAULT_RULES, CatalogRules, Rule
from .selection import filter_applications_by_area, is_area_placeholder

__all__ = [
    "DEFAULT_RULES",
    "CatalogRules",
    "Rule",
    "application_name",
    "area_name_from_value",
    "area_original_value",
    "classify",
    "extract_area",
    "extract_display_name",
    "filter_applications_by_area",
    "is_area_placeholder",
]
