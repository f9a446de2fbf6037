"""Application composition root.

This module wires together configuration, the roster snapshot location and the query tool for the
command-line runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from src.config.settings import Settings
from src.roster.dataset import RosterFileError, latest_snapshot
from src.tools.query_tool import QueryJSONTool


@dataclass(frozen=True)
class App:
    """Shared application dependencies for handlers."""

    settings: Settings
    tool: QueryJSONTool
    roster_path: Path


def resolve_roster_path(settings: Settings, path: str | Path | None = None) -> Path:
    """Pick the roster file: explicit path, then `ROSTER_FILE`, then the newest snapshot.

    Raises:
        RosterFileError: If no explicit file is configured and the data directory holds no
            snapshot.
    """

    if path:
        return Path(path)
    if settings.roster_file is not None:
        return settings.roster_file

    latest = latest_snapshot(settings.data_dir)
    if latest is None:
        raise RosterFileError(f"No roster snapshot found in {settings.data_dir}")
    return latest


def create_app(settings: Settings, roster_path: str | Path | None = None) -> App:
    """Create the application container."""

    return App(
        settings=settings,
        tool=QueryJSONTool(),
        roster_path=resolve_roster_path(settings, roster_path),
    )
