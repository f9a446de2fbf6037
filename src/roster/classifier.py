"""Rules-based query classifier.

The classifier is a pure function of the query text. Each decision is an ordered rule list
evaluated top to bottom; the first rule whose predicate holds decides the value. Precedence is
encoded by position:
    - the deactivation stem is checked before "active",
    - the "find last N" exclusion is checked before the generic "find" rule.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from src.roster.dictionaries import (
    ACTIVE_TERM,
    COUNT_FIND_PHRASES,
    DEACTIVATION_STEMS,
    GENERIC_FIND_TERM,
    LIMIT_LEAD_WORDS,
    LIMIT_TRAIL_WORDS,
    LOOKUP_PHRASES,
    SORT_PHRASES,
    TABLE_TERMS,
    contains_any,
)
from src.roster.normalize import normalize_query, tokenize
from src.roster.schema import OutputFormat, QueryIntent, StatusFilter

logger = logging.getLogger(__name__)

T = TypeVar("T")

_INTEGER_TOKEN_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Rule(Generic[T]):
    """One classification rule: when `predicate(text)` holds, the decision is `effect`."""

    name: str
    predicate: Callable[[str], bool]
    effect: T


STATUS_RULES: tuple[Rule[StatusFilter], ...] = (
    Rule(
        name="deactivation-stem",
        predicate=lambda text: contains_any(text, DEACTIVATION_STEMS),
        effect=StatusFilter.deactivated,
    ),
    Rule(
        name="active-term",
        predicate=lambda text: ACTIVE_TERM in text,
        effect=StatusFilter.active,
    ),
)

LOOKUP_RULES: tuple[Rule[bool], ...] = (
    Rule(
        name="lookup-phrase",
        predicate=lambda text: contains_any(text, LOOKUP_PHRASES),
        effect=True,
    ),
    Rule(
        name="count-find-exclusion",
        predicate=lambda text: contains_any(text, COUNT_FIND_PHRASES),
        effect=False,
    ),
    Rule(
        name="generic-find",
        predicate=lambda text: GENERIC_FIND_TERM in text,
        effect=True,
    ),
)

SORT_RULES: tuple[Rule[bool], ...] = (
    Rule(
        name="date-sort-phrase",
        predicate=lambda text: contains_any(text, SORT_PHRASES),
        effect=True,
    ),
)

FORMAT_RULES: tuple[Rule[OutputFormat], ...] = (
    Rule(
        name="table-term",
        predicate=lambda text: contains_any(text, TABLE_TERMS),
        effect=OutputFormat.table,
    ),
)


def evaluate_rules(rules: tuple[Rule[T], ...], text: str, default: T) -> T:
    """Return the effect of the first matching rule, or `default` if none matches."""

    for rule in rules:
        if rule.predicate(text):
            logger.debug("rule matched rule=%s effect=%s", rule.name, rule.effect)
            return rule.effect
    return default


def _parse_positive_int(token: str) -> int | None:
    if not _INTEGER_TOKEN_RE.fullmatch(token):
        return None
    try:
        value = int(token)
    except ValueError:
        # Beyond the interpreter's integer string conversion limit.
        return None
    return value if value > 0 else None


def extract_limits(text: str) -> tuple[int, ...]:
    """Extract every requested result count ("last 5", "top 10", "30 employees"), in text order.

    Which one applies depends on how many records the query selects, so the choice is left to
    the engine (see `ranking.resolve_limit`). Number tokens that are not plain positive integers
    are ignored.
    """

    tokens = tokenize(text)
    limits: list[int] = []
    for idx, token in enumerate(tokens[:-1]):
        next_token = tokens[idx + 1]

        if token in LIMIT_LEAD_WORDS:
            value = _parse_positive_int(next_token)
            if value is not None:
                limits.append(value)
                continue

        if next_token in LIMIT_TRAIL_WORDS:
            value = _parse_positive_int(token)
            if value is not None:
                limits.append(value)

    return tuple(limits)


def extract_limit(text: str) -> int | None:
    """Return the first requested result count, or `None`."""

    limits = extract_limits(text)
    return limits[0] if limits else None


def classify_query(text: str) -> QueryIntent:
    """Decode a free-text query into a `QueryIntent`."""

    normalized = normalize_query(text)
    limits = extract_limits(normalized)

    intent = QueryIntent(
        status_filter=evaluate_rules(STATUS_RULES, normalized, StatusFilter.all),
        is_single_person_lookup=evaluate_rules(LOOKUP_RULES, normalized, False),
        wants_date_sort=evaluate_rules(SORT_RULES, normalized, False),
        limit=limits[0] if limits else None,
        limit_candidates=limits,
        output_format=evaluate_rules(FORMAT_RULES, normalized, OutputFormat.list),
    )
    logger.debug("classified query intent=%s", intent.model_dump(mode="json"))
    return intent
