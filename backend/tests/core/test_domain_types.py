"""Domain Types — verifies enum members and their wire values.

Tests:
    - Enums serialize to the strings the web client sends
    - PeriodPreset has exactly 30, 60 and 90
    - ApplicationStatus is in pipeline order
"""

from pursuit.core.domain_types import (
    DEFAULT_SORT, DEFAULT_VIEW_MODE, ApplicationId,
    ApplicationStatus, PeriodPreset, SortOption, ViewMode,
)


def test_application_id_wraps_str():
    assert ApplicationId("RFP-001") == "RFP-001"


def test_period_presets_are_day_counts():
    assert [int(p) for p in PeriodPreset] == [30, 60, 90]
    assert PeriodPreset(60) is PeriodPreset.NEXT_60_DAYS


def test_sort_options_wire_values():
    assert {s.value for s in SortOption} == {"dueDate", "percentComplete", "fitScore"}
    assert DEFAULT_SORT is SortOption.DUE_DATE


def test_view_modes():
    assert {m.value for m in ViewMode} == {"cards", "table"}
    assert DEFAULT_VIEW_MODE is ViewMode.CARDS


def test_status_pipeline_order():
    assert [s.value for s in ApplicationStatus] == [
        "Draft", "Ready", "Submitted", "Awarded", "Lost",
    ]


def test_str_enums_compare_to_strings():
    assert SortOption.FIT_SCORE == "fitScore"
    assert ApplicationStatus.DRAFT == "Draft"
