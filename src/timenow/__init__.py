"""Current time in UTC and in your real local timezone, with fuzzy timezone lookup."""

from timenow.catalog import CatalogUnavailable, all_timezones, is_valid_tz
from timenow.config import DetectionConfig, get_option, set_option
from timenow.detector import detect_timezone
from timenow.main import timenow_help
from timenow.profile import set_timezone
from timenow.resolver import UnresolvedTimezone, approximate_match, resolve_timezone
from timenow.snapshot import TimeSnapshot, format_offset, now, take_snapshot

__all__ = [
    "CatalogUnavailable",
    "DetectionConfig",
    "TimeSnapshot",
    "UnresolvedTimezone",
    "all_timezones",
    "approximate_match",
    "detect_timezone",
    "format_offset",
    "get_option",
    "is_valid_tz",
    "now",
    "resolve_timezone",
    "set_option",
    "set_timezone",
    "take_snapshot",
    "timenow_help",
]
