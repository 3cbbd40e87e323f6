"""Progress Stats — pursuit dashboard numbers for the visible applications.

Invariants:
    - Every ApplicationStatus appears in by_status (zero when absent), in pipeline order
    - average_completion rounds half up; 0 for an empty list
    - Never raises — empty input yields zero counts

Design Decisions:
    - Pure function over the already-filtered list: the dashboard always agrees with the results
"""

import math

from pursuit.core.application import Application
from pursuit.core.domain_types import ApplicationStatus


def compute_progress_stats(records: list[Application]) -> dict:
    """Status totals and average completion. Pure, no IO."""
    by_status = {status.value: 0 for status in ApplicationStatus}
    for record in records:
        by_status[record.status.value] += 1

    total = len(records)
    average = 0
    if total:
        mean = sum(r.percent_complete for r in records) / total
        average = math.floor(mean + 0.5)

    return {
        "total": total,
        "by_status": by_status,
        "average_completion": average,
    }
