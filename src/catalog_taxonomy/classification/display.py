"""Display names for catalog labels."""

from __future__ import annotations

from catalog_taxonomy.classification.rules import DEFAULT_RULES, CatalogRules, first_match, tail


def application_name(label: str) -> str:
    """Return the text after the last arrow of ``label`` (the label itself if none)."""
    return tail(label)


def extract_display_name(label: str | None, rules: CatalogRules = DEFAULT_RULES) -> str:
    """Return the human-facing text for a catalog label.

    ``Metadatamanager -> ...`` labels are shown in full and ``Civilia - ...``
    labels drop only their product prefix; everything else is shown as the
    text after its last arrow.

    Examples:
        ``"Civilia Next - Area Demografia -> Anagrafe"`` -> ``"Anagrafe"``
        ``"Civilia - GeoNext -> API PDND"`` -> ``"GeoNext -> API PDND"``
    """

    if not label:
        return ""

    rule = first_match(rules.display, label)
    if rule is None:
        return application_name(label)
    return rule.produce(label)
