"""Text normalization for deterministic query classification."""

from __future__ import annotations

import re

_MULTISPACE_RE = re.compile(r"\s+")
_EDGE_PUNCTUATION = "\"'`.,;:!?()[]{}<>"


def normalize_query(text: str) -> str:
    """Lowercase and collapse whitespace.

    Punctuation inside the text is kept: phrase rules such as "sort by date" are plain
    containment checks and must see the text as the user wrote it.
    """

    value = (text or "").strip().lower()
    return _MULTISPACE_RE.sub(" ", value)


def tokenize(text: str) -> list[str]:
    """Split normalized text into words, trimming punctuation at the edges of each word.

    `"when was john doe?"` -> `["when", "was", "john", "doe"]`. Words that are pure punctuation
    are dropped.
    """

    tokens = []
    for raw in normalize_query(text).split(" "):
        token = raw.strip(_EDGE_PUNCTUATION)
        if token:
            tokens.append(token)
    return tokens
