"""Area lookups for catalog labels.

``extract_area`` answers "which area owns this application?" straight from the
label text, without a prebuilt taxonomy. It agrees with the classifier for
every label the classifier files under an area, and additionally knows about
services, ``Civilia - X`` products and a couple of hand-maintained synonyms.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from catalog_taxonomy.classification.rules import (
    AREA_COMUNE,
    AREA_PREFIX,
    CUSTOMER_CARE,
    DEFAULT_RULES,
    SERVICE_PREFIX,
    SIT,
    CatalogRules,
    first_match,
)

# Area names whose query value is not "Civilia Next - Area {name}".
AREA_VALUE_OVERRIDES: Mapping[str, str] = MappingProxyType(
    {
        AREA_COMUNE: "Civilia Next Area Comune",
        SIT: SIT,
        CUSTOMER_CARE: CUSTOMER_CARE,
    }
)


def extract_area(label: str | None, rules: CatalogRules = DEFAULT_RULES) -> str | None:
    """Return the area owning ``label``, or None when it belongs to no area.

    Args:
        label: Raw catalog label.
        rules: Rule tables to apply.

    Returns:
        The area name (e.g. ``"Demografia"``, ``"Civilia - GeoNext"``) or None.
    """

    if not label:
        return None

    synonym = rules.area_synonyms.get(label)
    if synonym is not None:
        return synonym

    rule = first_match(rules.area, label)
    if rule is None:
        return None
    return rule.produce(label)


def area_original_value(area_name: str) -> str:
    """Return the query value of an area, e.g. ``"Civilia Next - Area Tecnica"``."""
    return AREA_VALUE_OVERRIDES.get(area_name, f"{AREA_PREFIX}{area_name}")


def area_name_from_value(area_value: str | None) -> str | None:
    """Map an area query value back to the name ``extract_area`` returns.

    ``"Civilia Next - Area Demografia"`` becomes ``"Demografia"``,
    ``"Civilia Next - Servizi On-Line"`` becomes ``"Servizi On-Line"``; values
    without a known prefix are returned unchanged.
    """

    if not area_value:
        return None

    for name, value in AREA_VALUE_OVERRIDES.items():
        if area_value == value:
            return name

    if area_value.startswith(AREA_PREFIX):
        return area_value[len(AREA_PREFIX) :]
    if area_value.startswith(SERVICE_PREFIX):
        return area_value[len(SERVICE_PREFIX) :]
    return area_value
