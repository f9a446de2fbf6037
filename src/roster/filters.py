"""Status filtering and best-effort single-person lookup."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from src.roster.dictionaries import MIN_NAME_FRAGMENT_LENGTH
from src.roster.normalize import tokenize
from src.roster.schema import EmployeeRecord, StatusFilter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersonMatch:
    """Records matched by the first adjacent word pair that matched anything."""

    first_fragment: str
    last_fragment: str
    records: tuple[EmployeeRecord, ...]

    @property
    def best(self) -> EmployeeRecord:
        return self.records[0]


def matches_status(record: EmployeeRecord, status: StatusFilter) -> bool:
    if status == StatusFilter.deactivated:
        return record.deactivated
    if status == StatusFilter.active:
        return not record.deactivated
    return True


def filter_by_status(records: Iterable[EmployeeRecord], status: StatusFilter) -> list[EmployeeRecord]:
    """Return the records whose activation status matches `status`, in input order."""

    return [r for r in records if matches_status(r, status)]


def _name_fragment_pairs(query: str) -> Iterable[tuple[str, str]]:
    tokens = tokenize(query)
    for first, last in zip(tokens, tokens[1:]):
        if len(first) < MIN_NAME_FRAGMENT_LENGTH or len(last) < MIN_NAME_FRAGMENT_LENGTH:
            continue
        yield first, last


def _matches_fragments(record: EmployeeRecord, first_fragment: str, last_fragment: str) -> bool:
    # Either field is enough to make the record a candidate.
    return (
            first_fragment in record.first_name.lower()
            or last_fragment in record.last_name.lower()
    )


def find_employee(records: Sequence[EmployeeRecord], query: str) -> PersonMatch | None:
    """Look a person up by name fragments taken from the query.

    Every adjacent word pair is tried as (first-name fragment, last-name fragment); pairs with a
    word shorter than three characters are skipped. The first pair matching at least one record
    wins.

    Returns:
        The winning match, or `None` if no pair matched anything.
    """

    for first_fragment, last_fragment in _name_fragment_pairs(query):
        matched = tuple(r for r in records if _matches_fragments(r, first_fragment, last_fragment))
        if matched:
            logger.info(
                "employee found first=%s last=%s candidates=%d",
                first_fragment,
                last_fragment,
                len(matched),
            )
            return PersonMatch(
                first_fragment=first_fragment,
                last_fragment=last_fragment,
                records=matched,
            )

    logger.info("employee not found")
    return None
