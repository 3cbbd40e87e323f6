"""Application Record — the read-only procurement opportunity the criteria filter.

Invariants:
    - Frozen: the core never mutates a record; status changes produce a new record
    - tags is a frozenset (membership only); keywords keep their order for text search
    - due_date is a calendar date (no time-of-day component)

Design Decisions:
    - Dataclass, not ORM: core stays importable without SQLAlchemy
    - with_submitted() lives here because "submitted" implies 100% completion
"""

from dataclasses import dataclass, field, replace
from datetime import date

from pursuit.core.domain_types import ApplicationStatus


@dataclass(frozen=True)
class Application:
    """One procurement opportunity entry."""

    id: str
    title: str
    organization: str
    category: str
    vehicle: str
    due_date: date
    status: ApplicationStatus
    percent_complete: int
    fit_score: float
    ceiling: float
    tags: frozenset[str] = field(default_factory=frozenset)
    keywords: tuple[str, ...] = ()
    summary: str | None = None

    def with_submitted(self) -> "Application":
        """Return a copy marked Submitted at 100% completion."""
        return replace(
            self, status=ApplicationStatus.SUBMITTED, percent_complete=100,
        )
