"""Deactivation-date ranking and prefix limiting."""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import date, datetime

from src.roster.schema import EmployeeRecord

DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_deactivation_date(value: str) -> date | None:
    """Parse a strict `YYYY-MM-DD` date; empty or malformed values yield `None`."""

    # strptime alone would also accept unpadded parts such as "2023-1-5".
    if not value or not _DATE_RE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def _date_sort_key(record: EmployeeRecord) -> tuple[int, int]:
    parsed = parse_deactivation_date(record.deactivated_date)
    if parsed is None:
        # Unknown dates all share one key so the stable sort keeps their input order.
        return 1, 0
    return 0, -parsed.toordinal()


def sort_by_deactivation_date(records: Sequence[EmployeeRecord]) -> list[EmployeeRecord]:
    """Sort most recent deactivation first; empty/unparseable dates go last.

    The sort is stable: records with equal dates, and all records without a usable date, keep
    their relative input order.
    """

    return sorted(records, key=_date_sort_key)


def apply_limit(records: Sequence[EmployeeRecord], limit: int | None) -> list[EmployeeRecord]:
    """Keep the first `limit` records; a limit at or above the length changes nothing."""

    if limit is not None and 0 < limit < len(records):
        return list(records[:limit])
    return list(records)


def resolve_limit(candidates: Sequence[int], available: int) -> int | None:
    """Pick the first requested count that actually truncates `available` records.

    Counts at or above `available` would change nothing, so the next one the query mentions is
    tried instead ("top 10 ..., last 2" over five records keeps two).
    """

    for candidate in candidates:
        if 0 < candidate < available:
            return candidate
    return None
