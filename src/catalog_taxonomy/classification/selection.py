"""Area-driven filtering of application choices.

When an area is picked, the application picker offers the applications owned
by that area followed by every application that belongs to no area.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from catalog_taxonomy.classification.areas import extract_area
from catalog_taxonomy.classification.display import extract_display_name
from catalog_taxonomy.classification.rules import DEFAULT_RULES, CatalogRules
from catalog_taxonomy.models import ApplicationChoice

logger = structlog.get_logger()

# Picker entries that stand for "no area selected".
PLACEHOLDER_PREFIXES: tuple[str, ...] = ("--", "Tutte")


def is_area_placeholder(selected_area: str | None) -> bool:
    """True when ``selected_area`` is empty or a "no selection" entry."""
    if not selected_area or not selected_area.strip():
        return True
    return selected_area.startswith(PLACEHOLDER_PREFIXES)


def filter_applications_by_area(
    labels: Iterable[str],
    selected_area: str | None,
    rules: CatalogRules = DEFAULT_RULES,
) -> list[ApplicationChoice]:
    """Select the applications to offer for an area.

    Args:
        labels: Raw catalog labels.
        selected_area: Area name as returned by ``extract_area`` (compared
            case-insensitively).
        rules: Rule tables to apply.

    Returns:
        Matching applications first, then applications without an area; each
        block sorted by display value. Empty when no area is selected.
    """

    if selected_area is None or is_area_placeholder(selected_area):
        logger.debug("applications_filter_skipped", selected_area=selected_area)
        return []

    wanted = selected_area.casefold()
    choices: list[ApplicationChoice] = []
    match_count = 0
    no_area_count = 0

    for label in labels:
        area = extract_area(label, rules)
        if area is not None and area.casefold() == wanted:
            match_count += 1
        elif area is None:
            no_area_count += 1
        else:
            continue
        choices.append(
            ApplicationChoice(
                value=label,
                display_value=extract_display_name(label, rules),
                area=area,
            )
        )

    choices.sort(key=lambda c: (c.area is None, c.display_value))

    logger.info(
        "applications_filtered",
        selected_area=selected_area,
        matched=match_count,
        without_area=no_area_count,
        total=len(choices),
    )
    return choices
