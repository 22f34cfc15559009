"""Ordered rule tables for catalog labels.

The classifier, the area extractor and the display-name extractor each walk an
ordered tuple of rules and stop at the first match. Order is load-bearing: a
specific prefix (``"Civilia Next - Area "``) must be tried before the general
one that would otherwise shadow it (``"Civilia Next - "``).

Every table is built once at import time and never mutated, so the same
``CatalogRules`` instance can be shared freely.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Generic, TypeVar

from catalog_taxonomy.models import Category
from catalog_taxonomy.parsing.tokenizer import NEW_ITEM_PREFIXES

T = TypeVar("T")

ARROW = " -> "

AREA_PREFIX = "Civilia Next - Area "
AREA_COMUNE_PREFIX = "Civilia Next Area Comune -> "
SIT_PREFIX = "Sistema Informativo Territoriale -> "
CUSTOMER_CARE_PREFIX = "Customer Care - "
SERVICE_PREFIX = "Civilia Next - "
COMPONENT_PREFIX = "Civilia Next -> "
CIVILIA_PRODUCT_PREFIX = "Civilia - "
CIVLIA_WEB_PREFIX = "Civlia Web -> "
FOLIUM_PREFIX = "Folium -> "
METADATAMANAGER_PREFIX = "Metadatamanager -> "

AREA_COMUNE = "Area Comune"
SIT = "Sistema Informativo Territoriale"
CUSTOMER_CARE = "Customer Care"
CIVILIA_NEXT = "Civilia Next"
CIVLIA_WEB = "Civlia Web"
FOLIUM = "Folium"


@dataclass(frozen=True)
class Rule(Generic[T]):
    """A named (predicate, transform) pair."""

    name: str
    matches: Callable[[str], bool]
    produce: Callable[[str], T]


def first_match(rules: Sequence[Rule[T]], label: str) -> Rule[T] | None:
    """Return the first rule whose predicate accepts ``label``."""
    for rule in rules:
        if rule.matches(label):
            return rule
    return None


def name_between(label: str, prefix: str) -> str | None:
    """Return the text between ``prefix`` and the first arrow of ``label``.

    ``None`` when the label does not start with ``prefix`` or has no arrow.
    The name is empty when the arrow directly follows (or overlaps) the prefix.
    """
    if not label.startswith(prefix) or ARROW not in label:
        return None
    return label[len(prefix) : label.index(ARROW)]


def head(label: str) -> str:
    """Text before the first arrow."""
    return label.split(ARROW, 1)[0]


def tail(label: str) -> str:
    """Text after the last arrow, stripped; the label itself without an arrow."""
    if ARROW not in label:
        return label
    return label.rsplit(ARROW, 1)[1].strip()


def _has_arrow(label: str) -> bool:
    return ARROW in label


def _prefixed(prefix: str) -> Callable[[str], bool]:
    return lambda label: label.startswith(prefix)


def _named(prefix: str) -> Callable[[str], bool]:
    return lambda label: name_between(label, prefix) is not None


def _constant(value: T) -> Callable[[str], T]:
    return lambda _label: value


CLASSIFIER_RULES: tuple[Rule[Category], ...] = (
    Rule(
        "civilia_next_area",
        _named(AREA_PREFIX),
        lambda label: Category.area(name_between(label, AREA_PREFIX) or ""),
    ),
    Rule("area_comune", _prefixed(AREA_COMUNE_PREFIX), _constant(Category.area(AREA_COMUNE))),
    Rule("sit", _prefixed(SIT_PREFIX), _constant(Category.area(SIT))),
    Rule(
        "customer_care",
        _prefixed(CUSTOMER_CARE_PREFIX),
        _constant(Category.area(CUSTOMER_CARE)),
    ),
    Rule(
        "civilia_next_service",
        _named(SERVICE_PREFIX),
        lambda label: Category.service(name_between(label, SERVICE_PREFIX) or ""),
    ),
    Rule(
        "civilia_next_component",
        _prefixed(COMPONENT_PREFIX),
        _constant(Category.component(CIVILIA_NEXT)),
    ),
    Rule("product", _has_arrow, lambda label: Category.product(head(label))),
)

# Exact labels promoted to an area although their generic shape
# ("Civilia Next -> X") is a plain component with no area.
AREA_SYNONYMS: Mapping[str, str] = MappingProxyType(
    {
        "Civilia Next -> GeoNext": "Civilia - GeoNext",
        "Civilia Next -> Muse": "Civilia - Muse",
    }
)

AREA_RULES: tuple[Rule[str], ...] = (
    Rule(
        "civilia_next_area",
        _named(AREA_PREFIX),
        lambda label: name_between(label, AREA_PREFIX) or "",
    ),
    Rule("area_comune", _prefixed(AREA_COMUNE_PREFIX), _constant(AREA_COMUNE)),
    # Services own their applications; must precede any "Civilia Next -> " test.
    Rule(
        "civilia_next_service",
        _named(SERVICE_PREFIX),
        lambda label: name_between(label, SERVICE_PREFIX) or "",
    ),
    Rule("civilia_product", _named(CIVILIA_PRODUCT_PREFIX), head),
    Rule("sit", _prefixed(SIT_PREFIX), _constant(SIT)),
    Rule("customer_care", _prefixed(CUSTOMER_CARE_PREFIX), _constant(CUSTOMER_CARE)),
    Rule("civlia_web", _prefixed(CIVLIA_WEB_PREFIX), _constant(CIVLIA_WEB)),
    Rule("folium", _prefixed(FOLIUM_PREFIX), _constant(FOLIUM)),
)

DISPLAY_RULES: tuple[Rule[str], ...] = (
    Rule("metadatamanager", _prefixed(METADATAMANAGER_PREFIX), lambda label: label),
    Rule(
        "civilia_product",
        _prefixed(CIVILIA_PRODUCT_PREFIX),
        lambda label: label[len(CIVILIA_PRODUCT_PREFIX) :],
    ),
)


@dataclass(frozen=True)
class CatalogRules:
    """Immutable bundle of every table used to read catalog labels."""

    new_item_prefixes: tuple[str, ...] = NEW_ITEM_PREFIXES
    classifier: tuple[Rule[Category], ...] = CLASSIFIER_RULES
    area_synonyms: Mapping[str, str] = field(default_factory=lambda: AREA_SYNONYMS)
    area: tuple[Rule[str], ...] = AREA_RULES
    display: tuple[Rule[str], ...] = DISPLAY_RULES


DEFAULT_RULES = CatalogRules()
