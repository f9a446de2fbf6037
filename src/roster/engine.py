"""Query pipeline orchestration.

decode -> classify -> (single-person lookup | status filter -> date sort -> limit) -> format

Every stage returns a new sequence; the decoded roster is never modified. The answer text is
built only after all stages succeeded, so a failure never leaves a half-rendered answer behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.roster.classifier import classify_query
from src.roster.filters import filter_by_status, find_employee
from src.roster.formatter import NOT_FOUND_MESSAGE, format_person, format_records
from src.roster.ranking import apply_limit, resolve_limit, sort_by_deactivation_date
from src.roster.schema import DecodedRoster, QueryIntent, decode_roster

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryResult:
    """Answer text plus what the pipeline did to produce it."""

    text: str
    intent: QueryIntent
    matched: int
    skipped: int


def answer_query(roster: DecodedRoster, query: str) -> QueryResult:
    """Answer a query against an already decoded roster."""

    intent = classify_query(query)
    records = roster.records

    if intent.is_single_person_lookup:
        logger.info("searching for a specific employee")
        match = find_employee(records, query)
        if match is None:
            return QueryResult(text=NOT_FOUND_MESSAGE, intent=intent, matched=0, skipped=roster.skipped)
        return QueryResult(
            text=format_person(match.best),
            intent=intent,
            matched=len(match.records),
            skipped=roster.skipped,
        )

    selected = filter_by_status(records, intent.status_filter)
    logger.info("filtered status=%s found=%d", intent.status_filter, len(selected))

    if intent.wants_date_sort:
        selected = sort_by_deactivation_date(selected)
        logger.info("sorted by deactivation date (most recent first)")

    limit = resolve_limit(intent.limit_candidates, len(selected))
    limited = apply_limit(selected, limit)
    if len(limited) < len(selected):
        logger.info("limited results to %d employees", len(limited))

    logger.info("formatting %d employees format=%s", len(limited), intent.output_format)
    text = format_records(limited, intent.output_format)
    return QueryResult(text=text, intent=intent, matched=len(limited), skipped=roster.skipped)


def run_query(data: bytes | str, query: str) -> QueryResult:
    """Decode a serialized roster and answer a query against it.

    Raises:
        RosterDecodeError: If the roster document itself cannot be decoded.
    """

    logger.info("processing query=%r", query)
    roster = decode_roster(data)
    logger.info("initial dataset employees=%d skipped=%d", len(roster.records), roster.skipped)
    for failure in roster.failures:
        logger.debug("skipped record index=%d reason=%s", failure.index, failure.reason)

    return answer_query(roster, query)


def process_query(data: bytes | str, query: str) -> str:
    """Answer a query and return only the formatted text (convenience wrapper)."""

    return run_query(data, query).text
