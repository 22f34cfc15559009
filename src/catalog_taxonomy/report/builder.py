"""Build a grouped taxonomy from catalog labels."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from catalog_taxonomy.classification.classifier import classify
from catalog_taxonomy.classification.rules import DEFAULT_RULES, CatalogRules
from catalog_taxonomy.models import Category, CategoryKind, Taxonomy, TaxonomyGroup
from catalog_taxonomy.parsing.tokenizer import DEFAULT_MARKER, tokenize_payload

logger = structlog.get_logger()

_KIND_ORDER = {kind: index for index, kind in enumerate(CategoryKind)}


def _group_sort_key(category: Category) -> tuple[int, str]:
    return _KIND_ORDER[category.kind], category.name or ""


def build_taxonomy(labels: Iterable[str], rules: CatalogRules = DEFAULT_RULES) -> Taxonomy:
    """Classify and group catalog labels.

    Args:
        labels: Catalog labels, typically the tokenizer output.
        rules: Rule tables to apply.

    Returns:
        Taxonomy: Groups ordered by kind then name, members sorted.
    """

    all_labels = tuple(labels)
    grouped: dict[Category, list[str]] = {}
    for label in all_labels:
        grouped.setdefault(classify(label, rules), []).append(label)

    groups = tuple(
        TaxonomyGroup(category=category, labels=tuple(sorted(members)))
        for category, members in sorted(grouped.items(), key=lambda item: _group_sort_key(item[0]))
    )
    taxonomy = Taxonomy(labels=all_labels, groups=groups)

    logger.info(
        "taxonomy_built",
        total=taxonomy.total,
        areas=len(taxonomy.areas),
        services=len(taxonomy.services),
        components=len(taxonomy.components),
        products=len(taxonomy.products),
        standalone=len(taxonomy.standalone),
    )
    return taxonomy


def build_taxonomy_from_payload(
    payload: str,
    marker: str = DEFAULT_MARKER,
    rules: CatalogRules = DEFAULT_RULES,
) -> Taxonomy:
    """Tokenize a raw payload and build its taxonomy.

    Raises:
        MalformedInputError: If the payload has no marker. Nothing is classified.
    """

    labels = tokenize_payload(payload, marker=marker, prefixes=rules.new_item_prefixes)
    return build_taxonomy(labels, rules)
