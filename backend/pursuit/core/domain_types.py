"""Domain Types — enums and value types shared by the criteria core and the shell.

Invariants:
    - Every closed set of values (statuses, sort keys, view modes, presets) is an Enum
    - PeriodPreset values are day counts: exactly 30, 60 and 90
    - str Enums serialize to JSON without custom encoders

Design Decisions:
    - NewType over dataclass wrappers for identifiers: zero runtime cost
    - IntEnum for PeriodPreset: the wire format carries the bare day count
"""

from enum import Enum, IntEnum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ApplicationId = NewType("ApplicationId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ApplicationStatus(str, Enum):
    """Pursuit stages, in pipeline order (dashboards iterate in this order)."""
    DRAFT = "Draft"
    READY = "Ready"
    SUBMITTED = "Submitted"
    AWARDED = "Awarded"
    LOST = "Lost"


class SortOption(str, Enum):
    """Result ordering keys — exactly one active at a time."""
    DUE_DATE = "dueDate"
    PERCENT_COMPLETE = "percentComplete"
    FIT_SCORE = "fitScore"


class ViewMode(str, Enum):
    """Result layout persisted per user."""
    CARDS = "cards"
    TABLE = "table"


class PeriodPreset(IntEnum):
    """Relative due-date windows: next N days from today."""
    NEXT_30_DAYS = 30
    NEXT_60_DAYS = 60
    NEXT_90_DAYS = 90


DEFAULT_SORT = SortOption.DUE_DATE
DEFAULT_VIEW_MODE = ViewMode.CARDS
