#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from urlprefill.app import prefill_new_item
from urlprefill.config import configure_logging
from urlprefill.domain.query import parse_location_query

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Resolve URL prefill hints into initial values for a new item"
    )
    parser.add_argument("collection", help="Collection the new item belongs to")
    parser.add_argument(
        "query",
        help="URL query string with the hints, e.g. 'status=draft&program.abbreviation=ABC'",
    )
    parser.add_argument(
        "--edited",
        action="append",
        default=[],
        metavar="FIELD",
        help="Field the user already edited; hints for it are ignored (repeatable)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Command line entry point."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    query = parse_location_query(args.query)

    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)
    existing_edits = dict.fromkeys(args.edited, True)

    try:
        prefill = prefill_new_item(query, args.collection, existing_edits)
    except Exception as e:  # noqa: BLE001
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(prefill, indent=2, sort_keys=True, default=str))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
