"""Plain-text and markdown rendering of query results."""

from __future__ import annotations

from collections.abc import Sequence

from src.roster.schema import EmployeeRecord, OutputFormat

NO_RESULTS_MESSAGE = "No employees found matching the criteria."
NOT_FOUND_MESSAGE = "Employee not found in the dataset."

TABLE_HEADER = "| Name | Title | Email | Status | Deactivation Date |"
TABLE_SEPARATOR = "|------|-------|-------|--------|------------------|"


def _status_label(record: EmployeeRecord) -> str:
    return "Deactivated" if record.deactivated else "Active"


def format_list(records: Sequence[EmployeeRecord]) -> str:
    """Render an enumerated list with a count header."""

    if not records:
        return NO_RESULTS_MESSAGE

    lines = [f"Found {len(records)} employees:", ""]
    for idx, record in enumerate(records, start=1):
        line = f"{idx}. {record.full_name}"
        if record.title:
            line += f" - {record.title}"
        if record.deactivated:
            if record.deactivated_date:
                line += f" (Deactivated on {record.deactivated_date})"
            else:
                line += " (Deactivated)"
        lines.append(line)
    return "\n".join(lines) + "\n"


def format_table(records: Sequence[EmployeeRecord]) -> str:
    """Render a five-column markdown table."""

    if not records:
        return NO_RESULTS_MESSAGE

    lines = [TABLE_HEADER, TABLE_SEPARATOR]
    for record in records:
        deactivation_date = record.deactivated_date if record.deactivated else ""
        lines.append(
            f"| {record.full_name} | {record.title} | {record.email} "
            f"| {_status_label(record)} | {deactivation_date} |"
        )
    return "\n".join(lines) + "\n"


def format_person(record: EmployeeRecord) -> str:
    """Render the narrative summary of a single employee."""

    lines = [f"Employee: {record.full_name}"]
    if record.title:
        lines.append(f"Title: {record.title}")
    if record.email:
        lines.append(f"Email: {record.email}")

    lines.append(f"Status: {_status_label(record)}")
    if record.deactivated and record.deactivated_date:
        lines.append(f"Deactivation Date: {record.deactivated_date}")
    return "\n".join(lines) + "\n"


def format_records(records: Sequence[EmployeeRecord], output_format: OutputFormat) -> str:
    if output_format == OutputFormat.table:
        return format_table(records)
    return format_list(records)
