"""English phrase tables used by the query classifier.

These tables are matched by plain substring containment against the normalized query, so stems
("deactivat") cover every inflection ("deactivated", "deactivation").
"""

from __future__ import annotations

DEACTIVATION_STEMS: tuple[str, ...] = ("deactivat", "terminat")

ACTIVE_TERM = "active"

LOOKUP_PHRASES: tuple[str, ...] = (
    "when was",
    "when did",
    "what date",
    "who is",
    "information about",
    "details for",
    "details about",
    "find employee",
    "search for",
    "look for",
    "locate",
    "get info on",
)

# "find last 5" asks for a count, not for a person.
COUNT_FIND_PHRASES: tuple[str, ...] = (
    "find last",
    "find top",
    "find the last",
    "find the top",
)

GENERIC_FIND_TERM = "find"

SORT_PHRASES: tuple[str, ...] = ("last", "recent", "sort by date", "sort by deactivation")

TABLE_TERMS: tuple[str, ...] = ("table", "markdown")

LIMIT_LEAD_WORDS: frozenset[str] = frozenset({"last", "top", "latest"})
LIMIT_TRAIL_WORDS: frozenset[str] = frozenset({"employee", "employees"})

# Shorter words are treated as stop-words, not name fragments.
MIN_NAME_FRAGMENT_LENGTH = 3


def contains_any(text: str, phrases: tuple[str, ...]) -> bool:
    """Whether any phrase occurs in the text as a substring."""

    return any(phrase in text for phrase in phrases)
