"""Fuzzy timezone resolution.

Free text is matched against the catalog in four strict stages; the first
stage that produces an answer wins and stages are never scored against each
other:

1. exact identifier ("Australia/Perth")
2. unique case-insensitive final segment ("perth")
3. every word contained anywhere, any order ("Perth Australia")
4. approximate substring match within 20% edits ("Austrlia/Prth")

Stages 3 and 4 break ties by preferring the shortest identifier, then
catalog order.
"""

import logging
import math
import re
from collections.abc import Sequence

import regex

from timenow.catalog import all_timezones

log = logging.getLogger(__name__)

MAX_DISTANCE = 0.2
_WORD_SPLIT = re.compile(r"[^A-Za-z]+")


class UnresolvedTimezone(ValueError):
    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(
            f"Could not resolve timezone {query!r}. "
            "Run `timenow list` or call timenow.all_timezones() to see valid options."
        )


def _shortest(matches: Sequence[str]) -> str:
    """min() keeps the first of equal-length names, i.e. catalog order."""
    return min(matches, key=len)


def _suffix(name: str) -> str:
    return name.rsplit("/", 1)[-1]


def suffix_matches(query: str, catalog: Sequence[str]) -> list[str]:
    wanted = query.lower()
    return [name for name in catalog if _suffix(name).lower() == wanted]


def query_words(query: str) -> list[str]:
    return [w for w in _WORD_SPLIT.split(query) if w]


def word_matches(query: str, catalog: Sequence[str]) -> list[str]:
    """Identifiers containing every letter-run of ``query``, case-insensitively."""
    words = [w.lower() for w in query_words(query)]
    if not words:
        return []
    return [name for name in catalog if all(w in name.lower() for w in words)]


def max_edits(query: str, max_distance: float = MAX_DISTANCE) -> int:
    # round() first so 0.2 * 15 is 3 edits, not 4
    return math.ceil(round(max_distance * len(query), 9))


def approximate_match(
    query: str, candidates: Sequence[str], max_distance: float = MAX_DISTANCE
) -> list[str]:
    """Candidates containing ``query`` within a fraction of edits, case-insensitively.

    Insertions, deletions and substitutions each cost one; the query may
    match anywhere inside a candidate (agrep-style substring matching).
    Order of ``candidates`` is preserved.
    """
    if not query:
        return []
    k = max_edits(query, max_distance)
    pattern = regex.compile(
        f"(?:{regex.escape(query)}){{e<={k}}}", flags=regex.IGNORECASE
    )
    return [name for name in candidates if pattern.search(name)]


def resolve_timezone(query: str, catalog: Sequence[str] | None = None) -> str:
    """Resolve a possibly fuzzy timezone description to one canonical identifier.

    ``catalog`` defaults to every identifier in the tz database.
    Raises UnresolvedTimezone when no stage finds a candidate.
    """
    if catalog is None:
        catalog = all_timezones()

    if query in catalog:
        return query

    # an empty fuzzy pattern would match everything
    if not query:
        raise UnresolvedTimezone(query)

    suffixed = suffix_matches(query, catalog)
    if len(suffixed) == 1:
        log.debug("resolved %r by final segment: %s", query, suffixed[0])
        return suffixed[0]

    worded = word_matches(query, catalog)
    if worded:
        match = _shortest(worded)
        log.debug("resolved %r by words (%d candidates): %s", query, len(worded), match)
        return match

    fuzzy = approximate_match(query, catalog)
    if fuzzy:
        match = _shortest(fuzzy)
        log.debug("resolved %r by approximate match (%d candidates): %s", query, len(fuzzy), match)
        return match

    raise UnresolvedTimezone(query)
