"""Command-line surface for looking up one value in an INI-style file."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterable, NoReturn

from inireader import __version__
from inireader.config.settings import is_text_encoding, load_scanner_settings
from inireader.errors import FileOpenError, SettingsError, UsageError
from inireader.io import lookup_value
from inireader.logging_setup import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_NOT_FOUND = 2
EXIT_FILE_ERROR = 3


class _ArgumentParser(argparse.ArgumentParser):
    """Raise :class:`UsageError` instead of exiting with argparse's status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, wrong_count=_is_count_error(message))


def _is_count_error(message: str) -> bool:
    if message.startswith("the following arguments are required"):
        return True
    if message.startswith("unrecognized arguments:"):
        extras = message.split(":", 1)[1].split()
        return not any(extra.startswith("-") for extra in extras)
    return False


def build_parser() -> argparse.ArgumentParser:
    """Create a reusable argument parser for scripts and tests."""
    parser = _ArgumentParser(
        prog="inireader",
        description="Print the value of KEY from [SECTION] of an INI-style file.",
        epilog=(
            "Example: inireader sample.ini CLIENT phone. "
            "Put -- before a section or key that starts with '-': "
            "inireader sample.ini CLIENT -- -key"
        ),
    )
    parser.add_argument("path", type=Path, help="Configuration file to read.")
    parser.add_argument("section", help="Section name, matched case-insensitively.")
    parser.add_argument("key", help="Key name, matched case-insensitively.")
    parser.add_argument(
        "--settings",
        default=None,
        type=Path,
        help="Optional YAML file with scanner settings (comment prefixes, encoding).",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Text encoding of the configuration file (overrides the settings file).",
    )
    parser.add_argument(
        "-v",
        "--verbosity",
        action="count",
        default=0,
        help="Increase log output on stderr (repeat for more).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    """Entry point invoked by `python -m inireader` or the console script."""
    parser = build_parser()
    try:
        args = parser.parse_args(list(argv) if argv is not None else None)
    except UsageError as exc:
        if exc.wrong_count:
            print(
                "Invalid usage. You must supply three parameters: <path> <section> <key>.",
                file=sys.stderr,
            )
        print(f"{parser.format_usage().rstrip()}\n{parser.prog}: {exc}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(args.verbosity)

    try:
        settings = load_scanner_settings(args.settings)
    except SettingsError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_USAGE
    if args.encoding:
        if not is_text_encoding(args.encoding):
            print(f"Unknown text encoding: {args.encoding}", file=sys.stderr)
            return EXIT_USAGE
        settings = replace(settings, encoding=args.encoding)

    logger.debug("looking up %r in [%s] of %s", args.key, args.section, args.path)
    try:
        value = lookup_value(args.path, args.section, args.key, settings=settings)
    except FileOpenError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_FILE_ERROR

    if value is None:
        print(
            f"Key '{args.key}' not found in section [{args.section}] of {args.path}",
            file=sys.stderr,
        )
        return EXIT_NOT_FOUND

    print(value)
    return EXIT_OK


def run() -> None:
    """Console-script wrapper turning the return code into the process status."""
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
