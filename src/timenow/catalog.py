"""Canonical IANA timezone identifiers known to this interpreter."""

import functools
import zoneinfo


class CatalogUnavailable(RuntimeError):
    """No timezone database could be found (install the ``tzdata`` package)."""


@functools.lru_cache(maxsize=1)
def all_timezones() -> tuple[str, ...]:
    """Sorted identifiers from the system zoneinfo tree or the ``tzdata`` package."""
    names = tuple(sorted(zoneinfo.available_timezones()))
    if not names:
        raise CatalogUnavailable("no timezone database found; install the 'tzdata' package")
    return names


@functools.lru_cache(maxsize=1)
def _catalog_set() -> frozenset[str]:
    return frozenset(all_timezones())


def is_valid_tz(name: object) -> bool:
    return isinstance(name, str) and name in _catalog_set()
