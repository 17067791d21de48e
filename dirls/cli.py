"""Command-line front door for dirls.

Parses CLI options, merges them with configured defaults, sets up logging,
then dispatches into the listing pipeline.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from . import config
from .config import ListingFlags
from .listing_model import ListingError
from .walk import list_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=config.APP_NAME,
        description="List directory contents with optional detail and recursion.",
    )
    parser.add_argument("path", nargs="?", default=".", help="Path to list. Defaults to current directory.")
    parser.add_argument("-a", dest="show_hidden", action="store_true", help="Include hidden entries plus . and ..")
    parser.add_argument("-l", dest="long_format", action="store_true", help="Use the detailed long format.")
    parser.add_argument("-R", dest="recursive", action="store_true", help="List subdirectories recursively.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug diagnostics to stderr.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the given -a/-l/-R flags as defaults for later runs.",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr prefixed with the program name."""
    level = logging.DEBUG if verbose else config.load_log_level()
    logging.basicConfig(level=level, format=f"{config.APP_NAME}: %(message)s", stream=sys.stderr)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments and list the requested path.

    Exits with status 1 when the target cannot be listed, or when any nested
    directory of a recursive listing was unreadable.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    requested = ListingFlags(
        show_hidden=args.show_hidden,
        long_format=args.long_format,
        recursive=args.recursive,
    )
    if args.save_defaults:
        config.save_default_flags(requested)
    flags = config.load_default_flags().merged(requested)

    try:
        failures = list_path(
            args.path,
            show_hidden=flags.show_hidden,
            long_format=flags.long_format,
            recursive=flags.recursive,
        )
    except ListingError as exc:
        raise SystemExit(f"{config.APP_NAME}: cannot access '{exc.path}': {exc.reason}") from exc

    if failures:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
