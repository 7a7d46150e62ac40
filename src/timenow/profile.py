"""Persist a timezone preference to the user profile file.

The profile (``~/.timenow.env``) is plain dotenv text loaded on import of
``timenow.config``. Only the ``R_TIMENOW_TZ=`` line is rewritten; every other
line is kept verbatim and in order. There is no locking: two processes
writing the profile at once can lose one update.
"""

import argparse
import logging
import os
import re
import shutil
import sys
import tempfile
from pathlib import Path

from timenow import config
from timenow.config import ENV_VAR
from timenow.resolver import UnresolvedTimezone, resolve_timezone
from timenow.snapshot import now

log = logging.getLogger(__name__)

_KEY_LINE = re.compile(rf"^{ENV_VAR}=")


def _write_atomic(path: Path, content: str) -> None:
    """Temp file + os.replace in the same directory. Keeps the mode of an existing file."""
    fd, tmp = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        try:
            os.write(fd, content.encode("utf-8"))
        finally:
            os.close(fd)
        if path.exists():
            shutil.copymode(path, tmp)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


def set_timezone(tz: str, profile: Path | None = None) -> str:
    """Resolve ``tz`` and save it as the persisted preference. Returns the resolved name.

    Also exports it to the current process environment.
    """
    resolved = resolve_timezone(tz)
    # Write through symlinks so dotfile-managed profiles stay linked
    path = (profile or config.PROFILE_FILE).expanduser().resolve()

    lines = path.read_text(encoding="utf-8").splitlines() if path.exists() else []
    existing = [line for line in lines if _KEY_LINE.match(line)]
    if existing:
        log.info("Replacing %s", existing[0])
        lines = [line for line in lines if not _KEY_LINE.match(line)]

    lines.append(f"{ENV_VAR}={resolved}")
    _write_atomic(path, "\n".join(lines) + "\n")

    os.environ[ENV_VAR] = resolved
    return resolved


def run_set_command(argv: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="timenow set")
    parser.add_argument("tz", nargs="+", help="Timezone (fuzzy: 'Hobart', 'Perth Australia')")
    parser.add_argument(
        "--profile", type=Path, default=None, help=f"Profile file (default: {config.PROFILE_FILE})"
    )
    args = parser.parse_args(argv)

    try:
        resolved = set_timezone(" ".join(args.tz), profile=args.profile)
    except UnresolvedTimezone as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"added to {args.profile or config.PROFILE_FILE}:")
    print(f"  {ENV_VAR}={resolved}")
    print("set for the current process too.")
    print()
    print("current time:")
    print(now(quiet=True))
