"""Roster snapshot files.

The directory client stores each fetch as `employees-<filter>-<YYYYMMDD-HHMMSS>.json` under a data
directory. This module only reads those files; it never fetches or writes them.
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path

from src.roster.schema import StatusFilter

SNAPSHOT_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"

_SNAPSHOT_RE = re.compile(
    r"^employees-(?P<filter>all|active|deactivated)-(?P<ts>[0-9]{8}-[0-9]{6})\.json$"
)


class RosterFileError(RuntimeError):
    """Raised when a roster file cannot be accessed."""


def read_roster_bytes(path: str | Path) -> bytes:
    """Read the raw roster document from a regular file."""

    file_path = Path(path)
    if not file_path.exists():
        raise RosterFileError(f"Could not access file at {file_path}")
    if file_path.is_dir():
        raise RosterFileError(f"{file_path} is a directory, not a file")

    try:
        return file_path.read_bytes()
    except OSError as exc:
        raise RosterFileError(f"Failed to read file {file_path}: {exc}") from exc


def snapshot_filename(status: StatusFilter, timestamp: datetime) -> str:
    return f"employees-{status.value}-{timestamp.strftime(SNAPSHOT_TIMESTAMP_FORMAT)}.json"


def _snapshot_timestamp(path: Path, status: StatusFilter | None) -> datetime | None:
    match = _SNAPSHOT_RE.match(path.name)
    if not match:
        return None
    if status is not None and match.group("filter") != status.value:
        return None
    try:
        return datetime.strptime(match.group("ts"), SNAPSHOT_TIMESTAMP_FORMAT)
    except ValueError:
        return None


def latest_snapshot(data_dir: str | Path, status: StatusFilter | None = None) -> Path | None:
    """Return the newest snapshot in `data_dir` (by the timestamp in its name).

    Args:
        data_dir: Directory the directory client writes snapshots to.
        status: Only consider snapshots taken with this filter.

    Returns:
        The snapshot path, or `None` if the directory is missing or holds no snapshot.
    """

    directory = Path(data_dir)
    if not directory.is_dir():
        return None

    candidates: list[tuple[datetime, str, Path]] = []
    for path in directory.iterdir():
        if not path.is_file():
            continue
        timestamp = _snapshot_timestamp(path, status)
        if timestamp is not None:
            candidates.append((timestamp, path.name, path))

    if not candidates:
        return None
    return max(candidates)[2]
