"""Tests for status filtering and single-person lookup."""

from __future__ import annotations

import pytest

from src.roster.filters import filter_by_status, find_employee
from src.roster.schema import EmployeeRecord, StatusFilter, decode_roster


@pytest.fixture
def records(roster_bytes: bytes) -> tuple[EmployeeRecord, ...]:
    return decode_roster(roster_bytes).records


def test_filter_deactivated_keeps_input_order(records: tuple[EmployeeRecord, ...]) -> None:
    result = filter_by_status(records, StatusFilter.deactivated)
    assert [r.last_name for r in result] == ["Doe", "Martin", "Brown"]
    assert all(r.deactivated for r in result)


def test_filter_active(records: tuple[EmployeeRecord, ...]) -> None:
    result = filter_by_status(records, StatusFilter.active)
    assert [r.last_name for r in result] == ["Smith", "White"]


def test_filter_all_passes_everything_through(records: tuple[EmployeeRecord, ...]) -> None:
    result = filter_by_status(records, StatusFilter.all)
    assert result == list(records)
    assert result is not records


def test_filter_empty_collection() -> None:
    assert filter_by_status([], StatusFilter.deactivated) == []


def test_find_employee_by_adjacent_name_pair(records: tuple[EmployeeRecord, ...]) -> None:
    match = find_employee(records, "When was John Doe deactivated?")

    assert match is not None
    assert (match.first_fragment, match.last_fragment) == ("john", "doe")
    assert match.best.full_name == "John Doe"


def test_find_employee_is_case_insensitive(records: tuple[EmployeeRecord, ...]) -> None:
    match = find_employee(records, "DETAILS ABOUT ALICE MARTIN")
    assert match is not None
    assert match.best.last_name == "Martin"


def test_find_employee_matches_either_name_field(records: tuple[EmployeeRecord, ...]) -> None:
    match = find_employee(records, "details about jane brown")

    assert match is not None
    assert [r.full_name for r in match.records] == ["Jane Smith", "Bob Brown"]
    assert match.best.full_name == "Jane Smith"


def test_find_employee_skips_short_words(records: tuple[EmployeeRecord, ...]) -> None:
    # "is" is too short, so neither pair around it is tried.
    assert find_employee(records, "who is smith") is None


def test_find_employee_uses_first_matching_pair() -> None:
    records = (
        EmployeeRecord(first_name="Alice", last_name="Johnson"),
        EmployeeRecord(first_name="John", last_name="Doe"),
    )

    # ("was", "john") already matches "Johnson" by last name, before ("john", "doe") is tried.
    match = find_employee(records, "when was john doe deactivated")

    assert match is not None
    assert (match.first_fragment, match.last_fragment) == ("was", "john")
    assert match.best.last_name == "Johnson"


def test_find_employee_not_found(records: tuple[EmployeeRecord, ...]) -> None:
    assert find_employee(records, "when was nobody known here") is None


def test_find_employee_on_empty_collection() -> None:
    assert find_employee((), "when was john doe deactivated") is None
