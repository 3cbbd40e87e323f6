"""Progress Stats tests — pure function, no mocks needed."""

from datetime import date

from pursuit.core.application import Application
from pursuit.core.domain_types import ApplicationStatus
from pursuit.core.progress_stats import compute_progress_stats


def _make_application(status: ApplicationStatus, percent: int) -> Application:
    return Application(
        id=f"RFP-{percent}", title="t", organization="GSA", category="541512",
        vehicle="GSA MAS", due_date=date(2025, 11, 1), status=status,
        percent_complete=percent, fit_score=50.0, ceiling=1.0,
    )


def test_empty_list_yields_zeros():
    stats = compute_progress_stats([])
    assert stats["total"] == 0
    assert stats["average_completion"] == 0
    assert set(stats["by_status"].values()) == {0}


def test_every_status_listed_in_pipeline_order():
    stats = compute_progress_stats([])
    assert list(stats["by_status"]) == ["Draft", "Ready", "Submitted", "Awarded", "Lost"]


def test_counts_by_status():
    records = [
        _make_application(ApplicationStatus.DRAFT, 10),
        _make_application(ApplicationStatus.DRAFT, 20),
        _make_application(ApplicationStatus.AWARDED, 100),
    ]
    stats = compute_progress_stats(records)
    assert stats["total"] == 3
    assert stats["by_status"]["Draft"] == 2
    assert stats["by_status"]["Awarded"] == 1
    assert stats["by_status"]["Lost"] == 0


def test_average_rounds_half_up():
    records = [
        _make_application(ApplicationStatus.READY, 40),
        _make_application(ApplicationStatus.READY, 45),
    ]
    assert compute_progress_stats(records)["average_completion"] == 43
