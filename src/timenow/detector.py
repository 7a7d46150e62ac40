"""Local timezone detection for machines whose system clock says UTC.

Sources are consulted in a fixed order and the first candidate that names a
real timezone wins:

1. in-process option (``timenow.set_option``)
2. ``R_TIMENOW_TZ`` environment variable (or ``~/.timenow.env``)
3. ``/etc/timezone`` (Debian/Ubuntu)
4. ``timedatectl`` (systemd)
5. the OS default reported by tzlocal

Detection never fails: with nothing usable it falls back to UTC.
"""

import logging
import subprocess
from collections.abc import Callable
from pathlib import Path

import tzlocal

from timenow.catalog import is_valid_tz
from timenow.config import ENV_VAR, TIMEDATECTL_CMD, TIMEDATECTL_TIMEOUT, DetectionConfig

log = logging.getLogger(__name__)

FALLBACK_TZ = "UTC"


def read_etc_timezone(path: Path) -> str | None:
    """First line of the file, stripped. Unreadable or missing -> None."""
    try:
        with path.open() as f:
            first = f.readline()
    except (OSError, UnicodeDecodeError):
        return None
    return first.strip() or None


def run_system_timezone_query() -> str | None:
    """Ask timedatectl for the configured zone. Any failure -> None."""
    try:
        result = subprocess.run(
            TIMEDATECTL_CMD,
            capture_output=True,
            text=True,
            timeout=TIMEDATECTL_TIMEOUT,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    if result.returncode != 0 or not result.stdout:
        return None
    return result.stdout.splitlines()[0].strip() or None


def system_default_timezone() -> str | None:
    try:
        return tzlocal.get_localzone_name()
    except (LookupError, ValueError, OSError):
        return None


def _from_option(config: DetectionConfig) -> str | None:
    return config.option


def _from_env(config: DetectionConfig) -> str | None:
    return config.env_value


def _from_etc_timezone(config: DetectionConfig) -> str | None:
    return read_etc_timezone(config.etc_timezone)


def _from_timedatectl(config: DetectionConfig) -> str | None:
    return config.system_query()


def _from_system_default(config: DetectionConfig) -> str | None:
    return config.system_default()


# (label, reader, announce) -- announced sources log which one was used.
SOURCES: tuple[tuple[str, Callable[[DetectionConfig], str | None], bool], ...] = (
    ("in-process option", _from_option, True),
    (ENV_VAR, _from_env, True),
    ("/etc/timezone", _from_etc_timezone, False),
    ("timedatectl", _from_timedatectl, False),
    ("system default", _from_system_default, False),
)


def detect_timezone(quiet: bool = False, config: DetectionConfig | None = None) -> str:
    """Return the user's intended timezone, or UTC when nothing is configured."""
    if config is None:
        config = DetectionConfig.from_environment()

    for label, reader, announce in SOURCES:
        candidate = reader(config)
        if not candidate:
            continue
        if not is_valid_tz(candidate):
            log.debug("ignoring invalid timezone %r from %s", candidate, label)
            continue
        if announce and not quiet:
            log.info("using timezone from %s", label)
        return candidate

    if not quiet:
        log.warning(
            "could not detect local timezone, using %s. "
            "Run `timenow help` for configuration options.",
            FALLBACK_TZ,
        )
    return FALLBACK_TZ
