"""Criteria Model — the canonical shape of a user's filter constraints.

Invariants:
    - default_criteria() has every constraint absent: None scalars, empty sets, no bounds
    - Set-valued fields are Python sets: field-wise equality is set equality
    - keywords are stored stripped and lowercased; empty keywords never enter the set
    - period is None, PresetPeriod or DateRangePeriod; each variant carries an explicit kind tag

Design Decisions:
    - Mutable dataclass (like the rest of the in-memory state) but replaced wholesale:
      edits go through merge_criteria/with_keyword, never in-place on a shared value
    - Keyword insertion (with_keyword) lives in merge_criteria.py next to the copy rules
    - period_from_range() collapses an all-empty range to None; this is the UI
      construction path only. The codec keeps degenerate ranges as-is (round-trip law)
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, Union

from pursuit.core.domain_types import PeriodPreset


@dataclass(frozen=True)
class PresetPeriod:
    """Relative window: due within the next `days` days, starting today."""
    days: PeriodPreset
    kind: Literal["preset"] = "preset"


@dataclass(frozen=True)
class DateRangePeriod:
    """Explicit window; either bound may be open."""
    start: date | None = None
    end: date | None = None
    kind: Literal["range"] = "range"

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None


PeriodFilter = Union[PresetPeriod, DateRangePeriod, None]


@dataclass
class CeilingRange:
    """Contract ceiling bounds. Ordering/sign rules live in validate_ceiling."""
    min: float | None = None
    max: float | None = None


@dataclass
class Criteria:
    """Full set of filter constraints, independent of any single record."""

    category: str | None = None
    tags: set[str] = field(default_factory=set)
    vehicle: str | None = None
    organizations: set[str] = field(default_factory=set)
    period: PeriodFilter = None
    ceiling_range: CeilingRange = field(default_factory=CeilingRange)
    keywords: set[str] = field(default_factory=set)


CRITERIA_FIELDS: tuple[str, ...] = (
    "category", "tags", "vehicle", "organizations",
    "period", "ceiling_range", "keywords",
)


def default_criteria() -> Criteria:
    """Fresh empty criteria. Every call returns an independent value."""
    return Criteria()


def normalize_keyword(raw: str) -> str:
    return raw.strip().lower()


def normalize_keywords(raw: list[str] | set[str]) -> set[str]:
    """Lowercase, strip, drop empties. Duplicates collapse in the set."""
    return {kw for kw in (normalize_keyword(r) for r in raw) if kw}


def period_from_range(start: date | None, end: date | None) -> PeriodFilter:
    """Build a period from date-input edits. Both bounds cleared means no constraint."""
    if start is None and end is None:
        return None
    return DateRangePeriod(start=start, end=end)


def has_active_filters(criteria: Criteria) -> bool:
    """True when at least one constraint could reject a record."""
    period_active = criteria.period is not None and not (
        isinstance(criteria.period, DateRangePeriod) and criteria.period.is_unbounded
    )
    return (
        bool(criteria.category)
        or bool(criteria.vehicle)
        or bool(criteria.tags)
        or bool(criteria.organizations)
        or period_active
        or criteria.ceiling_range.min is not None
        or criteria.ceiling_range.max is not None
        or bool(criteria.keywords)
    )
