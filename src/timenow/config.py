"""User-configurable values loaded from the environment and the profile file."""

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

ENV_VAR = "R_TIMENOW_TZ"
PROFILE_FILE = Path.home() / ".timenow.env"

# Debian/Ubuntu: plain text file with IANA name
ETC_TIMEZONE = Path("/etc/timezone")
TIMEDATECTL_CMD = ("timedatectl", "show", "--property=Timezone", "--value")
TIMEDATECTL_TIMEOUT = 5  # seconds

# A persisted preference never overrides a variable already in the environment.
load_dotenv(PROFILE_FILE)

_option: str | None = None


def set_option(tz: str | None) -> None:
    """Set the in-process timezone override. ``None`` clears it."""
    global _option
    _option = tz


def get_option() -> str | None:
    return _option


def _default_system_query() -> str | None:
    from timenow.detector import run_system_timezone_query

    return run_system_timezone_query()


def _default_system_default() -> str | None:
    from timenow.detector import system_default_timezone

    return system_default_timezone()


@dataclass(frozen=True, slots=True)
class DetectionConfig:
    """Inputs consulted by the detector, in priority order."""

    option: str | None = None
    env_value: str | None = None
    etc_timezone: Path = ETC_TIMEZONE
    system_query: Callable[[], str | None] = field(default=_default_system_query)
    system_default: Callable[[], str | None] = field(default=_default_system_default)

    @staticmethod
    def from_environment() -> "DetectionConfig":
        """Snapshot the in-process option and ``R_TIMENOW_TZ`` as they are right now."""
        return DetectionConfig(option=get_option(), env_value=os.environ.get(ENV_VAR))
