"""Predicate Engine — decides whether one application satisfies the criteria.

Invariants:
    - Pure and total: no IO, no clock reads, never raises for well-formed inputs
    - Every present constraint must pass (AND); absent constraints never reject
    - Preset window is [today, today + N days], both ends inclusive; past due dates fail
    - Explicit range bounds are inclusive; an open bound does not constrain that side
    - Keywords match as case-insensitive substrings of title + record keywords

Design Decisions:
    - today is a parameter so results are reproducible in tests and across time zones
    - One small predicate per rule: each rule is readable and testable on its own
"""

from datetime import date, timedelta

from pursuit.core.application import Application
from pursuit.core.criteria import (
    CeilingRange, Criteria, DateRangePeriod, PeriodFilter, PresetPeriod,
)


def _period_allows(due: date, period: PeriodFilter, today: date) -> bool:
    if isinstance(period, PresetPeriod):
        return today <= due <= today + timedelta(days=int(period.days))
    if isinstance(period, DateRangePeriod):
        if period.start is not None and due < period.start:
            return False
        if period.end is not None and due > period.end:
            return False
    return True


def _ceiling_allows(ceiling: float, bounds: CeilingRange) -> bool:
    if bounds.min is not None and ceiling < bounds.min:
        return False
    if bounds.max is not None and ceiling > bounds.max:
        return False
    return True


def _keyword_haystack(record: Application) -> str:
    return f"{record.title} {' '.join(record.keywords)}".lower()


def _keywords_allow(record: Application, keywords: set[str]) -> bool:
    haystack = _keyword_haystack(record)
    return any(kw.lower() in haystack for kw in keywords)


def matches(record: Application, criteria: Criteria, today: date) -> bool:
    """True when the record passes every present constraint."""
    if criteria.category and record.category != criteria.category:
        return False
    if criteria.vehicle and record.vehicle != criteria.vehicle:
        return False
    if criteria.tags and criteria.tags.isdisjoint(record.tags):
        return False
    if criteria.organizations and record.organization not in criteria.organizations:
        return False
    if not _period_allows(record.due_date, criteria.period, today):
        return False
    if not _ceiling_allows(record.ceiling, criteria.ceiling_range):
        return False
    if criteria.keywords and not _keywords_allow(record, criteria.keywords):
        return False
    return True


def filter_applications(
    records: list[Application], criteria: Criteria, today: date,
) -> list[Application]:
    """Records passing the criteria, in input order."""
    return [r for r in records if matches(r, criteria, today)]
