"""Current time in UTC and in a local zone, with the offset between them."""

from dataclasses import dataclass
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from timenow.detector import detect_timezone
from timenow.resolver import resolve_timezone

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_offset(seconds: int) -> str:
    """``same as UTC``, ``+8h``, ``+5h30m`` or ``-3h30m``."""
    if seconds == 0:
        return "same as UTC"
    sign = "+" if seconds > 0 else "-"
    hours, rest = divmod(abs(seconds), 3600)
    minutes = rest // 60
    if minutes == 0:
        return f"{sign}{hours}h"
    return f"{sign}{hours}h{minutes:02d}m"


@dataclass(frozen=True, slots=True)
class TimeSnapshot:
    utc: datetime
    local: datetime
    local_tz: str

    @property
    def offset_seconds(self) -> int:
        offset = self.local.utcoffset()
        return int(offset.total_seconds()) if offset is not None else 0

    def __str__(self) -> str:
        offset = format_offset(self.offset_seconds)
        if self.offset_seconds != 0:
            offset += " from UTC"
        return (
            f"{self.utc.strftime(TIME_FORMAT)} (UTC)\n"
            f"{self.local.strftime(TIME_FORMAT)} ({self.local_tz})\n"
            f"{offset}"
        )


def take_snapshot(tz: str, at: datetime | None = None) -> TimeSnapshot:
    """View one instant (default: now) in UTC and in ``tz``."""
    utc = (at or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return TimeSnapshot(utc=utc, local=utc.astimezone(ZoneInfo(tz)), local_tz=tz)


def now(tz: str | None = None, quiet: bool = False) -> TimeSnapshot:
    """Snapshot for ``tz`` (fuzzy text allowed), or the detected local zone when omitted."""
    local_tz = detect_timezone(quiet=quiet) if tz is None else resolve_timezone(tz)
    return take_snapshot(local_tz)
