"""Merge / Clone — whole-field replacement and deep copies of Criteria.

Invariants:
    - Results never share a set or sub-object with base OR patch (no aliasing)
    - A key present in the patch replaces the base field entirely, including an explicit None
    - List-valued fields are replaced, never unioned
    - merge_criteria(c, {}) == clone_criteria(c)
    - Unknown patch keys are ignored; nothing here raises for patch content

Design Decisions:
    - Patch is a Mapping keyed by field name: "key present" distinguishes
      "clear this field" (None) from "leave it alone" (absent)
    - Period variants are frozen, but they are still rebuilt so every merge
      allocates fresh sub-objects
"""

from collections.abc import Iterable, Mapping

from pursuit.core.criteria import (
    CRITERIA_FIELDS, CeilingRange, Criteria, DateRangePeriod, PeriodFilter,
    PresetPeriod, normalize_keyword,
)


def _copy_period(period: PeriodFilter) -> PeriodFilter:
    if isinstance(period, PresetPeriod):
        return PresetPeriod(days=period.days)
    if isinstance(period, DateRangePeriod):
        return DateRangePeriod(start=period.start, end=period.end)
    return None


def _copy_ceiling(ceiling: CeilingRange | None) -> CeilingRange:
    if ceiling is None:
        return CeilingRange()
    return CeilingRange(min=ceiling.min, max=ceiling.max)


def _copy_set(values: Iterable[str] | None) -> set[str]:
    return set(values) if values else set()


def _copy_field(name: str, value: object) -> object:
    if name in ("tags", "organizations", "keywords"):
        return _copy_set(value)  # type: ignore[arg-type]
    if name == "ceiling_range":
        return _copy_ceiling(value)  # type: ignore[arg-type]
    if name == "period":
        return _copy_period(value)  # type: ignore[arg-type]
    return value


def clone_criteria(criteria: Criteria) -> Criteria:
    """Deep, independently-mutable copy."""
    return Criteria(**{
        name: _copy_field(name, getattr(criteria, name))
        for name in CRITERIA_FIELDS
    })


def merge_criteria(base: Criteria, patch: Mapping[str, object]) -> Criteria:
    """New criteria: base fields, each present patch field replacing its counterpart."""
    return Criteria(**{
        name: _copy_field(name, patch[name] if name in patch else getattr(base, name))
        for name in CRITERIA_FIELDS
    })


def with_keyword(criteria: Criteria, raw: str) -> Criteria:
    """Return new criteria with one keyword added (plain copy for blanks/duplicates)."""
    keyword = normalize_keyword(raw)
    if not keyword:
        return clone_criteria(criteria)
    return merge_criteria(criteria, {"keywords": criteria.keywords | {keyword}})


def without_keyword(criteria: Criteria, raw: str) -> Criteria:
    """Return new criteria with one keyword removed."""
    keyword = normalize_keyword(raw)
    return merge_criteria(criteria, {"keywords": criteria.keywords - {keyword}})
