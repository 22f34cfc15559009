"""Tokenizer for raw catalog payloads.

Ticketing systems dump the allowed values of the application custom field as a
single line such as::

    field customfield_10114 valori: Civilia Next -> GeoNext, Folium -> Affari Generali

Commas separate the entries, but some entries carry a literal comma in their
name (``Sistema Informativo Territoriale -> Editor PRG, Base, Reti``). A comma
is therefore only a separator when the text right after it opens a new entry.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

import structlog

from catalog_taxonomy.exceptions import MalformedInputError

logger = structlog.get_logger()


DEFAULT_MARKER = "valori: "

# Maximum number of characters inspected after a comma when deciding whether it
# separates two entries. Every new-item prefix fits well within it.
LOOKAHEAD_WINDOW = 80

# Prefixes that open a new catalog entry. Order matters only for readability:
# any match makes the preceding comma a separator.
NEW_ITEM_PREFIXES: tuple[str, ...] = (
    "Civilia Next - Area ",
    "Civilia Next - ",
    "Civilia Next Area Comune -> ",
    "Civilia Next -> ",
    "Sistema Informativo Territoriale -> ",
    "Customer Care - ",
    "Civlia Web -> ",
    "Folium -> ",
    "Metadatamanager -> ",
    "Civilia - ",
)


def _is_separator(text: str, comma_index: int, prefixes: Sequence[str]) -> bool:
    pos = comma_index + 1
    while pos < len(text) and text[pos] == " ":
        pos += 1

    # A trailing comma closes the last entry.
    if pos >= len(text):
        return True

    window = text[pos : pos + LOOKAHEAD_WINDOW]
    return any(window.startswith(prefix) for prefix in prefixes)


def iter_labels(
    section: str,
    prefixes: Sequence[str] = NEW_ITEM_PREFIXES,
) -> Iterator[str]:
    """Split the catalog section of a payload into labels.

    Args:
        section: Text following the payload marker.
        prefixes: Prefixes that open a new entry after a comma.

    Yields:
        Trimmed, non-empty labels in the order they appear.
    """

    buffer: list[str] = []
    i = 0
    length = len(section)
    while i < length:
        ch = section[i]
        if ch == "," and _is_separator(section, i, prefixes):
            label = "".join(buffer).strip()
            if label:
                yield label
            buffer.clear()
            if i + 1 < length and section[i + 1] == " ":
                i += 1
        else:
            buffer.append(ch)
        i += 1

    label = "".join(buffer).strip()
    if label:
        yield label


def tokenize_payload(
    payload: str,
    marker: str = DEFAULT_MARKER,
    prefixes: Sequence[str] = NEW_ITEM_PREFIXES,
) -> list[str]:
    """Extract the catalog labels from a raw custom field payload.

    Args:
        payload: Raw payload containing ``marker`` followed by the catalog.
        marker: Literal text preceding the catalog. Only the first occurrence
            is considered.
        prefixes: Prefixes that open a new entry after a comma.

    Returns:
        Labels in payload order (not sorted).

    Raises:
        MalformedInputError: If ``marker`` does not occur in ``payload``.
    """

    start = payload.find(marker)
    if start == -1:
        logger.debug("payload_marker_missing", marker=marker, payload_length=len(payload))
        raise MalformedInputError(f"Catalog marker {marker!r} not found in payload")

    labels = list(iter_labels(payload[start + len(marker) :], prefixes))
    logger.debug("payload_tokenized", label_count=len(labels))
    return labels
