"""Command-line entry point for clistudy.

Parses arguments, resolves the sessions file once and dispatches to the
subcommand handlers. This is the only place that reports errors to the
user and picks the exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from clistudy import __version__
from clistudy.commands import log, today, week
from clistudy.data import StudyError, ValidationError
from clistudy.utils.paths import get_sessions_path


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="clistudy",
        description="Track your study time from the command line.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Print debug logging to stderr.")

    sub = p.add_subparsers(dest="cmd", required=True, metavar="COMMAND")

    plog = sub.add_parser("log", help="Log a study session: clistudy log <minutes> <topic>")
    plog.add_argument("minutes", type=int, help="How many minutes did you study?")
    plog.add_argument("topic", help="What did you work on? e.g. \"Rust exam prep\"")

    sub.add_parser("today", help="Show today's study summary")
    sub.add_parser("week", help="Show last 7 days summary")
    return p


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; debug level only when verbose."""
    logging.basicConfig(stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("clistudy").setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv: Optional[List[str]] = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    args = _parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.cmd == "log":
            # Reject bad input before the data directory is even created
            log.validate_minutes(args.minutes)
            log.run(get_sessions_path(), args.minutes, args.topic)
        elif args.cmd == "today":
            today.run(get_sessions_path())
        elif args.cmd == "week":
            week.run(get_sessions_path())
    except ValidationError as exc:
        print(exc, file=sys.stderr)
        return 1
    except StudyError as exc:
        action = "saving session" if args.cmd == "log" else "reading data"
        print(f"Error {action}: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
