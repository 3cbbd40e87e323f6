"""Ceiling Validator — cross-field rules for the ceiling range.

Invariants:
    - Returns user-facing text or None; never raises, never mutates
    - min > max is reported before sign problems
    - A range with both bounds absent is always valid
"""

from pursuit.core.criteria import CeilingRange

MIN_EXCEEDS_MAX = "minimum exceeds maximum"
MIN_NEGATIVE = "minimum must be non-negative"
MAX_NEGATIVE = "maximum must be non-negative"


def validate_ceiling(ceiling: CeilingRange) -> str | None:
    if ceiling.min is not None and ceiling.max is not None and ceiling.min > ceiling.max:
        return MIN_EXCEEDS_MAX
    if ceiling.min is not None and ceiling.min < 0:
        return MIN_NEGATIVE
    if ceiling.max is not None and ceiling.max < 0:
        return MAX_NEGATIVE
    return None
