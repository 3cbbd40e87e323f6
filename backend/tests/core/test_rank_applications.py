"""Ranker tests — stable sorting, quick search, and the results pipeline.

Tests cover:
    - percentComplete descending is stable for ties
    - dueDate ascending, fitScore descending
    - Input list is never mutated
    - Quick search over title, organization, keywords (summary excluded)
    - Blank search term keeps everything
    - visible_applications: filter, then search, then sort
"""

from datetime import date

from pursuit.core.application import Application
from pursuit.core.criteria import Criteria
from pursuit.core.domain_types import ApplicationStatus, SortOption
from pursuit.core.rank_applications import (
    normalize_search_term, quick_search, sort_applications, visible_applications,
)

TODAY = date(2025, 10, 1)


def _make_application(id: str, **overrides) -> Application:
    fields = {
        "id": id,
        "title": f"Opportunity {id}",
        "organization": "GSA",
        "category": "541512",
        "vehicle": "GSA MAS",
        "due_date": date(2025, 11, 1),
        "status": ApplicationStatus.DRAFT,
        "percent_complete": 50,
        "fit_score": 70.0,
        "ceiling": 1_000_000,
    }
    fields.update(overrides)
    return Application(**fields)


# --- Sorting ------------------------------------------------------------------

def test_percent_complete_sort_is_descending_and_stable():
    records = [
        _make_application("A", percent_complete=40),
        _make_application("B", percent_complete=90),
        _make_application("C", percent_complete=90),
        _make_application("D", percent_complete=10),
    ]
    result = sort_applications(records, SortOption.PERCENT_COMPLETE)
    assert [r.percent_complete for r in result] == [90, 90, 40, 10]
    assert [r.id for r in result] == ["B", "C", "A", "D"]


def test_due_date_sort_is_ascending():
    records = [
        _make_application("A", due_date=date(2025, 12, 1)),
        _make_application("B", due_date=date(2025, 10, 5)),
        _make_application("C", due_date=date(2025, 11, 1)),
    ]
    result = sort_applications(records, SortOption.DUE_DATE)
    assert [r.id for r in result] == ["B", "C", "A"]


def test_fit_score_sort_is_descending_and_stable():
    records = [
        _make_application("A", fit_score=61.5),
        _make_application("B", fit_score=88.0),
        _make_application("C", fit_score=61.5),
    ]
    result = sort_applications(records, SortOption.FIT_SCORE)
    assert [r.id for r in result] == ["B", "A", "C"]


def test_sort_does_not_mutate_input():
    records = [
        _make_application("A", percent_complete=10),
        _make_application("B", percent_complete=90),
    ]
    original = list(records)
    result = sort_applications(records, SortOption.PERCENT_COMPLETE)
    assert records == original
    assert result is not records


def test_sort_accepts_string_values():
    records = [_make_application("A", fit_score=1), _make_application("B", fit_score=2)]
    result = sort_applications(records, SortOption("fitScore"))
    assert [r.id for r in result] == ["B", "A"]


# --- Quick search -------------------------------------------------------------

def test_normalize_search_term():
    assert normalize_search_term("  Cloud ") == "cloud"
    assert normalize_search_term(None) == ""


def test_blank_search_keeps_everything():
    records = [_make_application("A"), _make_application("B")]
    assert quick_search(records, "   ") == records
    assert quick_search(records, None) == records


def test_search_matches_title_organization_and_keywords():
    records = [
        _make_application("A", title="Zero Trust Architecture"),
        _make_application("B", organization="Department of Energy"),
        _make_application("C", keywords=("energy", "grid")),
        _make_application("D"),
    ]
    assert [r.id for r in quick_search(records, "ZERO")] == ["A"]
    assert [r.id for r in quick_search(records, "energy")] == ["B", "C"]


def test_search_does_not_look_at_summary():
    record = _make_application("A", summary="satellite ground station")
    assert quick_search([record], "satellite") == []


# --- Pipeline -----------------------------------------------------------------

def test_visible_applications_filters_searches_then_sorts():
    records = [
        _make_application("A", category="541512", title="Cloud Ops", fit_score=60),
        _make_application("B", category="541511", title="Cloud Apps", fit_score=99),
        _make_application("C", category="541512", title="Cloud Data", fit_score=80),
        _make_application("D", category="541512", title="Help Desk", fit_score=95),
    ]
    result = visible_applications(
        records, Criteria(category="541512"), "cloud", SortOption.FIT_SCORE, TODAY,
    )
    assert [r.id for r in result] == ["C", "A"]
