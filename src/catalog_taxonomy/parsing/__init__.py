"""Raw catalog payload parsing."""

from .tokenizer import (
    DEFAULT_MARKER,
    LOOKAHEAD_WINDOW,
    NEW_ITEM_PREFIXES,
    iter_labels,
    tokenize_payload,
)

__all__ = [
    "DEFAULT_MARKER",
    "LOOKAHEAD_WINDOW",
    "NEW_ITEM_PREFIXES",
    "iter_labels",
    "tokenize_payload",
]
