# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from discrimap.app import resolve_class
from discrimap.config import ConfigurationError, configure_logging, get_settings
from discrimap.domain.errors import DiscriminatorError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve discriminator maps of mapped classes")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve the discriminator map of a root")
    resolve.add_argument(
        "target",
        type=str,
        help="Hierarchy root as MODULE:CLASS",
    )
    resolve.add_argument(
        "--module",
        dest="modules",
        action="append",
        default=[],
        help="Additional module whose classes join the registry (repeatable)",
    )
    resolve.add_argument(
        "--delimiter",
        type=str,
        default=None,
        help="Namespace delimiter for self-entry names (defaults to config)",
    )
    resolve.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (defaults to config)",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        settings = get_settings()
        if parsed_args.delimiter is not None:
            settings = replace(settings, namespace_delimiter=parsed_args.delimiter)
        if parsed_args.log_level is not None:
            settings = replace(settings, log_level=parsed_args.log_level)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    configure_logging(level=settings.logging_level)

    try:
        resolved = resolve_class(
            parsed_args.target,
            modules=parsed_args.modules,
            settings=settings,
        )
    except (DiscriminatorError, ImportError, LookupError, ValueError):
        log.exception("Could not resolve discriminator map for %s", parsed_args.target)
        sys.exit(1)

    print(json.dumps(resolved.as_dict(), indent=2))


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
