"""Roster record and query intent models (Pydantic).

`EmployeeRecord` is the contract between the upstream directory snapshot and the query engine.
The serialized roster is decoded here; every element is validated on its own, so one malformed
entry never takes the whole collection down with it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator


class RosterDecodeError(ValueError):
    """Raised when the serialized roster document cannot be decoded at all."""


class StatusFilter(StrEnum):
    """Which part of the roster a query is about."""

    all = "all"
    active = "active"
    deactivated = "deactivated"


class OutputFormat(StrEnum):
    """How a multi-record answer is rendered."""

    list = "list"
    table = "table"


class EmployeeRecord(BaseModel):
    """One directory entry.

    Missing keys fall back to empty text / `False`, mirroring how the directory snapshot omits
    `deactivated_date` for active employees. Values of the wrong type make the record invalid.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    title: str = ""
    deactivated: bool = False
    deactivated_date: str = ""

    @field_validator("first_name", "last_name", "email", "title", "deactivated_date", mode="before")
    @classmethod
    def null_text_is_empty(cls, value: Any) -> Any:
        """Read JSON `null` in a text field as "not set"."""

        return "" if value is None else value

    @field_validator("deactivated", mode="before")
    @classmethod
    def null_flag_is_false(cls, value: Any) -> Any:
        """Read JSON `null` in the status flag as an active employee."""

        return False if value is None else value

    @model_validator(mode="after")
    def validate_deactivation_date(self) -> EmployeeRecord:
        """An active employee cannot carry a deactivation date."""

        if not self.deactivated and self.deactivated_date:
            raise ValueError("deactivated_date must be empty for active employees")
        return self

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_wire(self) -> dict[str, Any]:
        """Dump the record in the snapshot shape (`deactivated_date` omitted when empty)."""

        exclude = None if self.deactivated_date else {"deactivated_date"}
        return self.model_dump(exclude=exclude)


class QueryIntent(BaseModel):
    """Behavioral flags decoded from one free-text query."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status_filter: StatusFilter = StatusFilter.all
    is_single_person_lookup: bool = False
    wants_date_sort: bool = False
    limit: int | None = Field(default=None, gt=0)
    # Every count the query mentions, in text order; `limit` is the first of them.
    limit_candidates: tuple[int, ...] = ()
    output_format: OutputFormat = OutputFormat.list


@dataclass(frozen=True)
class RecordDecodeFailure:
    """A roster element that did not validate as an `EmployeeRecord`."""

    index: int
    reason: str


@dataclass(frozen=True)
class DecodedRoster:
    """Valid records plus the elements that were skipped while decoding."""

    records: tuple[EmployeeRecord, ...]
    failures: tuple[RecordDecodeFailure, ...] = field(default_factory=tuple)

    @property
    def skipped(self) -> int:
        return len(self.failures)


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def decode_roster(data: bytes | str) -> DecodedRoster:
    """Decode a serialized roster (a JSON array of employee objects).

    Raises:
        RosterDecodeError: If the document is not valid JSON or is not an array.
    """

    try:
        payload = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise RosterDecodeError(f"roster is not valid JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise RosterDecodeError("roster must be a JSON array of employee objects")

    records: list[EmployeeRecord] = []
    failures: list[RecordDecodeFailure] = []
    for index, item in enumerate(payload):
        try:
            records.append(EmployeeRecord.model_validate(item))
        except ValidationError as exc:
            failures.append(RecordDecodeFailure(index=index, reason=_describe(exc)))

    return DecodedRoster(records=tuple(records), failures=tuple(failures))
