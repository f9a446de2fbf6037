"""`QueryJSON` tool: the roster engine as seen by an external reasoning loop.

The reasoning loop passes a JSON object naming a roster snapshot and the user's question; the tool
returns the formatted answer. Failures are raised, never folded into the answer text.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from src.roster.dataset import read_roster_bytes
from src.roster.engine import run_query

logger = logging.getLogger(__name__)

TOOL_NAME = "QueryJSON"

TOOL_DESCRIPTION = """Queries employee roster data stored in a JSON file.

The file holds an array of employee objects:
[
  {"first_name": "John", "last_name": "Doe", "email": "john.doe@example.com",
   "title": "Software Engineer", "deactivated": true, "deactivated_date": "2021-01-01"},
  {"first_name": "Jane", "last_name": "Doe", "email": "jane.doe@example.com",
   "title": "Marketing Manager", "deactivated": false}
]

The tool can:
- filter employees by status (active / deactivated),
- sort by deactivation date (most recent first),
- limit results to a number of employees,
- find a specific employee by name,
- format results as a markdown table or a text list.

Input must be a JSON object:
{"file_path": "<path to the JSON file>", "query": "<what to do with the data>"}

Example queries:
- "Find the last 5 deactivated employees"
- "When was John Doe deactivated?"
- "Show all active employees as a table"
"""


class ToolInputError(ValueError):
    """Raised when the tool input is not a valid request object."""


class ToolInput(BaseModel):
    """Tool call arguments."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    file_path: str
    query: str = ""

    @field_validator("file_path")
    @classmethod
    def validate_file_path(cls, value: str) -> str:
        if not value:
            raise ValueError("no file path provided")
        return value


def parse_tool_input(raw_input: str) -> ToolInput:
    """Validate the raw tool input.

    Raises:
        ToolInputError: If the input is not a JSON object with a non-empty `file_path`.
    """

    try:
        return ToolInput.model_validate_json(raw_input)
    except ValidationError as exc:
        raise ToolInputError(f"failed to parse input: {exc.errors()[0]['msg']}") from exc


class QueryJSONTool:
    """Callable tool wrapping the roster query engine."""

    name = TOOL_NAME
    description = TOOL_DESCRIPTION

    def call(self, raw_input: str) -> str:
        """Run one tool call and return the answer text.

        Raises:
            ToolInputError: Invalid tool input.
            RosterFileError: The roster file cannot be read.
            RosterDecodeError: The roster file is not a JSON array.
        """

        tool_input = parse_tool_input(raw_input)
        logger.info("tool start name=%s file=%s", self.name, tool_input.file_path)

        data = read_roster_bytes(tool_input.file_path)
        result = run_query(data, tool_input.query)

        logger.info(
            "tool end name=%s matched=%d skipped=%d",
            self.name,
            result.matched,
            result.skipped,
        )
        return result.text
