"""Criteria Schemas — Pydantic request/response models for the workspace endpoints.

Invariants:
    - Period bodies are a discriminated union on an explicit `kind` tag
    - Presets only accept 30, 60 or 90 days
    - Ceiling bounds may be negative here: the ceiling validator reports it,
      the schema does not reject it (the user may keep editing)
    - CriteriaBody.to_criteria() applies UI construction rules: keywords lowercased,
      blank entries dropped, an empty date range collapses to "no period"
    - Ceiling bounds must be finite; inf and nan are rejected with 400
    - Responses use CriteriaResponse, which carries no input limits, so any
      decoded share link can be echoed back

Design Decisions:
    - Patch body uses exclude_unset so an explicit null clears a field while an
      omitted key leaves it untouched
"""

from datetime import date
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from pursuit.core.criteria import (
    CeilingRange, Criteria, DateRangePeriod, PeriodFilter, PresetPeriod,
    normalize_keywords, period_from_range,
)
from pursuit.core.domain_types import PeriodPreset, ViewMode


class PresetPeriodBody(BaseModel):
    kind: Literal["preset"]
    days: Literal[30, 60, 90]


class RangePeriodBody(BaseModel):
    kind: Literal["range"]
    start: date | None = None
    end: date | None = None


PeriodBody = Annotated[
    Union[PresetPeriodBody, RangePeriodBody], Field(discriminator="kind"),
]


class CeilingBody(BaseModel):
    min: float | None = Field(None, allow_inf_nan=False)
    max: float | None = Field(None, allow_inf_nan=False)


class CeilingResponse(BaseModel):
    min: float | None = None
    max: float | None = None


def _period_from_body(body: PresetPeriodBody | RangePeriodBody | None) -> PeriodFilter:
    if isinstance(body, PresetPeriodBody):
        return PresetPeriod(days=PeriodPreset(body.days))
    if isinstance(body, RangePeriodBody):
        return period_from_range(body.start, body.end)
    return None


def _period_to_body(period: PeriodFilter) -> PresetPeriodBody | RangePeriodBody | None:
    if isinstance(period, PresetPeriod):
        return PresetPeriodBody(kind="preset", days=int(period.days))
    if isinstance(period, DateRangePeriod):
        return RangePeriodBody(kind="range", start=period.start, end=period.end)
    return None


def _clean_code(value: str | None) -> str | None:
    if not value:
        return None
    return value.strip() or None


def _clean_strings(values: list[str] | None) -> set[str]:
    return {v.strip() for v in values or [] if v and v.strip()}


def _ceiling_from_body(body: CeilingBody | None) -> CeilingRange:
    if body is None:
        return CeilingRange()
    return CeilingRange(min=body.min, max=body.max)


class CriteriaBody(BaseModel):
    """Full criteria value."""
    category: str | None = Field(None, max_length=50)
    tags: list[str] = Field(default_factory=list, max_length=100)
    vehicle: str | None = Field(None, max_length=100)
    organizations: list[str] = Field(default_factory=list, max_length=100)
    period: PeriodBody | None = None
    ceiling_range: CeilingBody = Field(default_factory=CeilingBody)
    keywords: list[str] = Field(default_factory=list, max_length=100)

    def to_criteria(self) -> Criteria:
        return Criteria(
            category=_clean_code(self.category),
            tags=_clean_strings(self.tags),
            vehicle=_clean_code(self.vehicle),
            organizations=_clean_strings(self.organizations),
            period=_period_from_body(self.period),
            ceiling_range=_ceiling_from_body(self.ceiling_range),
            keywords=normalize_keywords(self.keywords),
        )


class CriteriaPatchBody(BaseModel):
    """Partial criteria — only keys sent by the client replace draft fields."""
    category: str | None = Field(None, max_length=50)
    tags: list[str] | None = Field(None, max_length=100)
    vehicle: str | None = Field(None, max_length=100)
    organizations: list[str] | None = Field(None, max_length=100)
    period: PeriodBody | None = None
    ceiling_range: CeilingBody | None = None
    keywords: list[str] | None = Field(None, max_length=100)

    def to_patch(self) -> dict[str, object]:
        converters = {
            "category": lambda: _clean_code(self.category),
            "tags": lambda: _clean_strings(self.tags),
            "vehicle": lambda: _clean_code(self.vehicle),
            "organizations": lambda: _clean_strings(self.organizations),
            "period": lambda: _period_from_body(self.period),
            "ceiling_range": lambda: _ceiling_from_body(self.ceiling_range),
            "keywords": lambda: normalize_keywords(self.keywords or []),
        }
        return {name: converters[name]() for name in self.model_fields_set}


class CriteriaResponse(BaseModel):
    """Criteria as stored or decoded. No input limits: share links may exceed them."""
    category: str | None = None
    tags: list[str] = []
    vehicle: str | None = None
    organizations: list[str] = []
    period: PeriodBody | None = None
    ceiling_range: CeilingResponse = CeilingResponse()
    keywords: list[str] = []

    @classmethod
    def from_criteria(cls, criteria: Criteria) -> "CriteriaResponse":
        return cls(
            category=criteria.category,
            tags=sorted(criteria.tags),
            vehicle=criteria.vehicle,
            organizations=sorted(criteria.organizations),
            period=_period_to_body(criteria.period),
            ceiling_range=CeilingResponse(
                min=criteria.ceiling_range.min, max=criteria.ceiling_range.max,
            ),
            keywords=sorted(criteria.keywords),
        )


class KeywordBody(BaseModel):
    keyword: str = Field(min_length=1, max_length=100)


class ViewModeBody(BaseModel):
    view_mode: ViewMode


class WorkspaceResponse(BaseModel):
    """Draft/applied state plus everything the criteria panel needs."""
    draft: CriteriaResponse
    applied: CriteriaResponse
    draft_encoded: str
    applied_encoded: str
    changed: bool
    ceiling_error: str | None
    has_active_filters: bool
    has_preset: bool
    view_mode: ViewMode
    share_query: str

    @classmethod
    def from_snapshot(cls, snapshot: dict) -> "WorkspaceResponse":
        return cls(
            **{
                **snapshot,
                "draft": CriteriaResponse.from_criteria(snapshot["draft"]),
                "applied": CriteriaResponse.from_criteria(snapshot["applied"]),
            },
        )
