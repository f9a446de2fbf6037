"""Tests for the `QueryJSON` tool surface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.roster.dataset import RosterFileError
from src.roster.schema import RosterDecodeError
from src.tools.query_tool import TOOL_NAME, QueryJSONTool, ToolInputError, parse_tool_input


@pytest.fixture
def roster_file(tmp_path: Path, roster_bytes: bytes) -> Path:
    path = tmp_path / "employees-all-20250101-120000.json"
    path.write_bytes(roster_bytes)
    return path


def _call(file_path: object, query: str = "") -> str:
    return QueryJSONTool().call(json.dumps({"file_path": str(file_path), "query": query}))


def test_tool_metadata() -> None:
    tool = QueryJSONTool()
    assert tool.name == TOOL_NAME == "QueryJSON"
    assert '"file_path"' in tool.description


def test_tool_answers_query(roster_file: Path) -> None:
    text = _call(roster_file, "When was John Doe deactivated?")
    assert "Employee: John Doe" in text


def test_tool_empty_query_lists_everyone(roster_file: Path) -> None:
    assert _call(roster_file).startswith("Found 5 employees:")


@pytest.mark.parametrize(
    "raw_input",
    ["not json", "[]", "{}", '{"file_path": "   "}', '{"query": "deactivated"}'],
)
def test_invalid_input(raw_input: str) -> None:
    with pytest.raises(ToolInputError):
        parse_tool_input(raw_input)


def test_input_extra_keys_are_ignored() -> None:
    tool_input = parse_tool_input('{"file_path": "data/x.json", "query": "last 3", "verbose": true}')
    assert tool_input.file_path == "data/x.json"
    assert tool_input.query == "last 3"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(RosterFileError):
        _call(tmp_path / "missing.json")


def test_directory_instead_of_file(tmp_path: Path) -> None:
    with pytest.raises(RosterFileError, match="is a directory"):
        _call(tmp_path)


def test_undecodable_roster(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text('{"employees": []}', encoding="utf-8")

    with pytest.raises(RosterDecodeError):
        _call(path, "deactivated")
