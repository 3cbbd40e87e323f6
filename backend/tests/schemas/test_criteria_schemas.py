"""Criteria schemas — request bodies convert to core Criteria with UI construction rules.

Invariants:
    - Period is a discriminated union on kind; presets limited to 30/60/90
    - An empty date range collapses to no period
    - Patch bodies only carry keys the client sent (explicit null included)
    - Negative ceiling bounds are accepted here (the validator reports them)
"""

from datetime import date

import pytest
from pydantic import ValidationError

from pursuit.core.criteria import CeilingRange, Criteria, DateRangePeriod, PresetPeriod
from pursuit.core.domain_types import PeriodPreset
from pursuit.schemas.criteria import (
    CriteriaBody, CriteriaPatchBody, CriteriaResponse, KeywordBody,
)


# --- CriteriaBody -------------------------------------------------------------

def test_empty_body_is_default_criteria():
    assert CriteriaBody().to_criteria() == Criteria()


def test_preset_period_converts():
    body = CriteriaBody(period={"kind": "preset", "days": 90})
    assert body.to_criteria().period == PresetPeriod(days=PeriodPreset.NEXT_90_DAYS)


def test_preset_outside_set_rejected():
    with pytest.raises(ValidationError):
        CriteriaBody(period={"kind": "preset", "days": 45})


def test_missing_kind_rejected():
    with pytest.raises(ValidationError):
        CriteriaBody(period={"days": 30})


def test_range_period_converts():
    body = CriteriaBody(period={"kind": "range", "start": "2025-10-01"})
    assert body.to_criteria().period == DateRangePeriod(start=date(2025, 10, 1), end=None)


def test_empty_range_collapses_to_none():
    body = CriteriaBody(period={"kind": "range", "start": None, "end": None})
    assert body.to_criteria().period is None


def test_strings_cleaned_and_keywords_normalized():
    body = CriteriaBody(
        category="  ", tags=["SB", " ", "SB"], organizations=[" GSA "],
        keywords=["Cloud", " CLOUD ", ""],
    )
    c = body.to_criteria()
    assert c.category is None
    assert c.tags == {"SB"}
    assert c.organizations == {"GSA"}
    assert c.keywords == {"cloud"}


def test_negative_ceiling_accepted():
    c = CriteriaBody(ceiling_range={"min": -5}).to_criteria()
    assert c.ceiling_range == CeilingRange(min=-5, max=None)


def test_non_finite_ceiling_rejected():
    for bound in (float("inf"), float("-inf"), float("nan")):
        with pytest.raises(ValidationError):
            CriteriaBody(ceiling_range={"min": bound})
        with pytest.raises(ValidationError):
            CriteriaPatchBody(ceiling_range={"max": bound})


# --- CriteriaResponse ---------------------------------------------------------

def test_response_has_no_input_limits():
    criteria = Criteria(category="x" * 60, tags={f"T{i}" for i in range(150)})
    body = CriteriaResponse.from_criteria(criteria)
    assert body.category == "x" * 60
    assert len(body.tags) == 150


def test_from_criteria_sorts_sets():
    body = CriteriaResponse.from_criteria(Criteria(tags={"WOSB", "SB"}))
    assert body.tags == ["SB", "WOSB"]


# --- CriteriaPatchBody --------------------------------------------------------

def test_patch_only_contains_sent_keys():
    patch = CriteriaPatchBody.model_validate({"vehicle": "GSA MAS"}).to_patch()
    assert patch == {"vehicle": "GSA MAS"}


def test_patch_explicit_null_is_kept():
    patch = CriteriaPatchBody.model_validate({"period": None, "tags": None}).to_patch()
    assert patch == {"period": None, "tags": set()}


def test_patch_converts_ceiling():
    patch = CriteriaPatchBody.model_validate({"ceiling_range": {"max": 10}}).to_patch()
    assert patch["ceiling_range"] == CeilingRange(min=None, max=10)


# --- KeywordBody --------------------------------------------------------------

def test_keyword_body_requires_text():
    with pytest.raises(ValidationError):
        KeywordBody(keyword="")
