"""Forward classifier: catalog label -> category."""

from __future__ import annotations

from catalog_taxonomy.classification.rules import DEFAULT_RULES, CatalogRules, first_match
from catalog_taxonomy.models import Category


def classify(label: str, rules: CatalogRules = DEFAULT_RULES) -> Category:
    """Assign exactly one category to a catalog label.

    Rules are tried in order and the first match wins; a label that matches
    nothing is ``Standalone``. The result depends only on the label text.

    Args:
        label: Catalog label, e.g. ``"Civilia Next - Area Demografia -> Anagrafe"``.
        rules: Rule tables to apply.

    Returns:
        Category: The label's category.
    """

    rule = first_match(rules.classifier, label)
    if rule is None:
        return Category.standalone()
    return rule.produce(label)
