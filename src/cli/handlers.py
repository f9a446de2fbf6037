"""Prompt handler: the error boundary between the roster tool and the terminal.

Every prompt produces exactly one reply. Known failures (bad roster file, undecodable roster,
invalid tool input) become a one-line `Error: ...` reply; anything else is logged with a traceback
and reported without details.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from time import monotonic

from src.app import App
from src.roster.dataset import RosterFileError
from src.roster.schema import RosterDecodeError
from src.tools.query_tool import ToolInputError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_REPLY = "Error: internal error"


@dataclass(frozen=True)
class PromptReply:
    """Reply text and whether the prompt was answered successfully."""

    text: str
    ok: bool


def build_tool_input(app: App, text: str) -> str:
    return json.dumps({"file_path": str(app.roster_path), "query": text})


def handle_prompt(text: str, app: App) -> PromptReply:
    """Answer one prompt against the configured roster file."""

    started = monotonic()

    # noinspection PyBroadException
    try:
        answer = app.tool.call(build_tool_input(app, text))
    except (ToolInputError, RosterFileError, RosterDecodeError) as exc:
        latency_ms = int((monotonic() - started) * 1000)
        logger.info("failed reason=%s latency_ms=%d", exc, latency_ms)
        return PromptReply(text=f"Error: {exc}", ok=False)
    except Exception:
        logger.exception("handler failed")
        return PromptReply(text=INTERNAL_ERROR_REPLY, ok=False)

    latency_ms = int((monotonic() - started) * 1000)
    logger.info("handled latency_ms=%d", latency_ms)
    return PromptReply(text=answer, ok=True)
