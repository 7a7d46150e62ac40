"""Entry point for timenow."""

import argparse
import logging
import sys

from timenow.resolver import UnresolvedTimezone
from timenow.snapshot import now

HELP = """\
timenow -- current time in UTC and in your actual local timezone

commands:
  timenow [TZ] [-q]          Show UTC and local time (TZ may be fuzzy)
  timenow resolve QUERY      Resolve fuzzy text to a timezone name
  timenow detect [-q]        Show the detected local timezone
  timenow list [PATTERN]     List valid timezone names
  timenow set TZ             Save your timezone to ~/.timenow.env
  timenow help               Show this help message

examples:
  timenow
  timenow Perth
  timenow "US Eastern"
  timenow set "Perth Australia"

configuring your timezone
-------------------------
If your system timezone is UTC (common on servers and containers),
timenow can still show your local time once you tell it where you are.

Option 1: profile file (recommended)
  timenow set Hobart
  or add to ~/.timenow.env:

    R_TIMENOW_TZ=Australia/Hobart

Option 2: environment variable
  export R_TIMENOW_TZ=Australia/Hobart

Option 3: in Python
  import timenow
  timenow.set_option("Australia/Hobart")

Option 4: system timezone (Ubuntu/Debian)
  sudo timedatectl set-timezone Australia/Hobart

detection order:
  1. timenow.set_option()
  2. R_TIMENOW_TZ (environment or ~/.timenow.env)
  3. /etc/timezone
  4. timedatectl
  5. the OS default timezone
  falls back to UTC with a warning
"""


def timenow_help() -> None:
    print(HELP)


def _dispatch_subcommand(argv: list[str]) -> bool:
    """Route CLI subcommands. Returns True if handled."""
    if not argv:
        return False
    cmd = argv[0]
    rest = argv[1:]
    if cmd in ("help", "--help", "-h"):
        timenow_help()
        return True
    routes: dict[str, tuple[str, str]] = {
        "resolve": ("timenow.zone_cmd", "run_resolve_command"),
        "detect": ("timenow.zone_cmd", "run_detect_command"),
        "list": ("timenow.zone_cmd", "run_list_command"),
        "set": ("timenow.profile", "run_set_command"),
    }
    if cmd in routes:
        from importlib import import_module

        mod_path, func_name = routes[cmd]
        getattr(import_module(mod_path), func_name)(rest)
        return True
    return False


def _show_now(argv: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="timenow", add_help=False)
    parser.add_argument("tz", nargs="*", help="Timezone (fuzzy text allowed)")
    parser.add_argument("--quiet", "-q", action="store_true", help="No detection messages")
    args = parser.parse_args(argv)

    tz = " ".join(args.tz) or None
    try:
        print(now(tz, quiet=args.quiet))
    except UnresolvedTimezone as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="timenow: %(message)s")
    argv = sys.argv[1:]
    if _dispatch_subcommand(argv):
        return
    _show_now(argv)


if __name__ == "__main__":
    main()
