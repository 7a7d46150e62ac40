"""CLI handlers for `timenow resolve`, `timenow detect` and `timenow list`."""

import argparse
import sys

from timenow.catalog import all_timezones
from timenow.detector import detect_timezone
from timenow.resolver import UnresolvedTimezone, resolve_timezone


def run_resolve_command(argv: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="timenow resolve")
    parser.add_argument("query", nargs="+", help="Timezone text, e.g. 'new york'")
    args = parser.parse_args(argv)

    try:
        print(resolve_timezone(" ".join(args.query)))
    except UnresolvedTimezone as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


def run_detect_command(argv: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="timenow detect")
    parser.add_argument("--quiet", "-q", action="store_true", help="No source messages")
    args = parser.parse_args(argv)

    print(detect_timezone(quiet=args.quiet))


def run_list_command(argv: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="timenow list")
    parser.add_argument("pattern", nargs="?", default="", help="Case-insensitive filter")
    args = parser.parse_args(argv)

    needle = args.pattern.lower()
    names = [name for name in all_timezones() if needle in name.lower()]
    if not names:
        print(f"no timezones matching {args.pattern!r}")
        sys.exit(1)
    for name in names:
        print(name)
