"""Tests for deactivation-date sorting and prefix limiting."""

from __future__ import annotations

from datetime import date

import pytest

from src.roster.ranking import (
    apply_limit,
    parse_deactivation_date,
    resolve_limit,
    sort_by_deactivation_date,
)
from src.roster.schema import EmployeeRecord


def _gone(name: str, deactivated_date: str = "") -> EmployeeRecord:
    return EmployeeRecord(first_name=name, deactivated=True, deactivated_date=deactivated_date)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-01-01", date(2024, 1, 1)),
        ("", None),
        ("2024-1-1", None),
        ("2024-02-30", None),
        ("01/02/2024", None),
        ("2024-01-01T00:00:00", None),
    ],
)
def test_parse_deactivation_date(value: str, expected: date | None) -> None:
    assert parse_deactivation_date(value) == expected


def test_sort_most_recent_first() -> None:
    dates = ["2023-01-01", "2023-06-01", "2022-01-01", "2024-01-01", "2021-01-01"]
    records = [_gone(f"e{i}", d) for i, d in enumerate(dates)]

    result = sort_by_deactivation_date(records)

    assert [r.deactivated_date for r in result] == [
        "2024-01-01",
        "2023-06-01",
        "2023-01-01",
        "2022-01-01",
        "2021-01-01",
    ]


def test_missing_and_unparseable_dates_sink_in_input_order() -> None:
    records = [
        _gone("no-date-1"),
        _gone("bad-date", "last spring"),
        _gone("dated-old", "2020-05-05"),
        _gone("no-date-2"),
        _gone("dated-new", "2023-05-05"),
    ]

    result = sort_by_deactivation_date(records)

    assert [r.first_name for r in result] == [
        "dated-new",
        "dated-old",
        "no-date-1",
        "bad-date",
        "no-date-2",
    ]


def test_sort_is_stable_for_equal_dates() -> None:
    records = [_gone("a", "2023-01-01"), _gone("b", "2024-01-01"), _gone("c", "2023-01-01")]
    result = sort_by_deactivation_date(records)
    assert [r.first_name for r in result] == ["b", "a", "c"]


def test_sort_does_not_modify_input() -> None:
    records = [_gone("a", "2020-01-01"), _gone("b", "2024-01-01")]
    sort_by_deactivation_date(records)
    assert [r.first_name for r in records] == ["a", "b"]


def test_limit_keeps_prefix() -> None:
    records = [_gone(str(i)) for i in range(5)]
    assert [r.first_name for r in apply_limit(records, 2)] == ["0", "1"]


@pytest.mark.parametrize("limit", [None, 5, 50])
def test_limit_at_or_above_length_is_noop(limit: int | None) -> None:
    records = [_gone(str(i)) for i in range(5)]
    assert apply_limit(records, limit) == records


@pytest.mark.parametrize(
    ("candidates", "available", "expected"),
    [
        ((10, 2), 5, 2),
        ((3, 2), 5, 3),
        ((5,), 5, None),
        ((10, 20), 5, None),
        ((), 5, None),
        ((1,), 0, None),
    ],
)
def test_resolve_limit_picks_first_truncating_count(
        candidates: tuple[int, ...], available: int, expected: int | None
) -> None:
    assert resolve_limit(candidates, available) == expected
