"""Logging configuration for the command-line agent.

Answers are written to stdout; every log record goes to stderr so piping the agent's output never
mixes diagnostics into an answer.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Rule decisions are logged at DEBUG by the roster package.
ROSTER_LOGGER = "src.roster"


def resolve_log_level(configured: str | None, *, debug: bool = False, quiet: bool = False) -> str:
    """Combine the configured level with the CLI switches; `--debug` beats `--quiet`."""

    if debug:
        return "DEBUG"
    if quiet:
        return "WARNING"
    return (configured or os.getenv("LOG_LEVEL") or "INFO").upper()


def configure_logging(level: str | None = None, *, stream: TextIO | None = None) -> None:
    """Configure Python logging for the process (idempotent; later calls replace handlers)."""

    log_level = resolve_log_level(level)
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
        force=True,
    )
    logging.getLogger(ROSTER_LOGGER).setLevel(log_level)
