"""Ranker — orders applications by one sort key and applies the quick-search term.

Invariants:
    - Never mutates the input list; always returns a new list
    - Stable: equal keys keep their input order (sorted() is stable)
    - dueDate ascending; percentComplete and fitScore descending
    - Quick search runs after criteria filtering and before sorting; it is never persisted
    - Quick search looks at title, organization and keywords (not summary)

Design Decisions:
    - Descending order via negated key, not reverse=True: reverse would flip tie order
    - Unknown sort value falls back to input order (copy), mirroring "no sort selected"
"""

from datetime import date

from pursuit.core.application import Application
from pursuit.core.criteria import Criteria
from pursuit.core.domain_types import SortOption
from pursuit.core.match_application import filter_applications

_SORT_KEYS = {
    SortOption.DUE_DATE: lambda r: r.due_date,
    SortOption.PERCENT_COMPLETE: lambda r: -r.percent_complete,
    SortOption.FIT_SCORE: lambda r: -r.fit_score,
}


def sort_applications(
    records: list[Application], key: SortOption,
) -> list[Application]:
    """New list ordered by key; ties keep input order."""
    sort_key = _SORT_KEYS.get(key)
    if sort_key is None:
        return list(records)
    return sorted(records, key=sort_key)


def normalize_search_term(term: str | None) -> str:
    return (term or "").strip().lower()


def _search_haystack(record: Application) -> str:
    return (
        f"{record.title} {record.organization} {' '.join(record.keywords)}"
    ).lower()


def quick_search(records: list[Application], term: str | None) -> list[Application]:
    """Narrow by a free-text term. Blank term keeps everything."""
    needle = normalize_search_term(term)
    if not needle:
        return list(records)
    return [r for r in records if needle in _search_haystack(r)]


def visible_applications(
    records: list[Application],
    criteria: Criteria,
    term: str | None,
    sort: SortOption,
    today: date,
) -> list[Application]:
    """Full pipeline: criteria filter -> quick search -> sort."""
    filtered = filter_applications(records, criteria, today)
    return sort_applications(quick_search(filtered, term), sort)
