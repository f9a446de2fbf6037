"""Command-line entrypoint.

Answers roster questions either once (`--prompt`) or interactively, reading one question per line
from stdin until `exit` or end of input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from src.app import App, create_app
from src.cli.handlers import handle_prompt
from src.config.logging import configure_logging, resolve_log_level
from src.config.settings import load_settings
from src.roster.dataset import RosterFileError

logger = logging.getLogger(__name__)

PROMPT = "> "
EXIT_COMMAND = "exit"

WELCOME_TEXT = """Employees roster agent. Type 'exit' to quit.
Example queries:
  Who are the latest 30 deactivated employees?
  When was John Doe deactivated?
"""


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Answer questions about the employees roster.")
    parser.add_argument(
        "--path",
        help="Roster JSON file (defaults to ROSTER_FILE, then the newest snapshot in ROSTER_DATA_DIR).",
    )
    parser.add_argument("--prompt", help="Answer a single prompt and exit (non-interactive mode).")
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Minimal output: only print answers.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every classification decision.",
    )
    return parser.parse_args(argv)


def run_interactive(app: App, stdin: TextIO, stdout: TextIO, *, quiet: bool = False) -> int:
    """Answer prompts line by line until `exit` or end of input."""

    if not quiet:
        stdout.write(WELCOME_TEXT + "\n")

    while True:
        if not quiet:
            stdout.write(PROMPT)
            stdout.flush()

        line = stdin.readline()
        if not line:
            break

        text = line.strip()
        if not text:
            continue
        if text.lower() == EXIT_COMMAND:
            break

        reply = handle_prompt(text, app)
        stdout.write(reply.text.rstrip("\n") + "\n")
        stdout.flush()

    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the agent; returns the process exit code."""

    args = _parse_args(argv)
    settings = load_settings()

    configure_logging(resolve_log_level(settings.log_level, debug=args.debug, quiet=args.quiet))

    try:
        app = create_app(settings, args.path)
    except RosterFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.info("using roster file=%s", app.roster_path)

    if args.prompt:
        reply = handle_prompt(args.prompt, app)
        print(reply.text.rstrip("\n"), file=sys.stdout if reply.ok else sys.stderr)
        return 0 if reply.ok else 1

    return run_interactive(app, sys.stdin, sys.stdout, quiet=args.quiet)


if __name__ == "__main__":
    sys.exit(main())
