"""Ceiling Validator tests."""

from pursuit.core.criteria import CeilingRange
from pursuit.core.validate_ceiling import (
    MAX_NEGATIVE, MIN_EXCEEDS_MAX, MIN_NEGATIVE, validate_ceiling,
)


def test_min_above_max():
    assert validate_ceiling(CeilingRange(min=100, max=50)) == "minimum exceeds maximum"


def test_negative_min():
    assert validate_ceiling(CeilingRange(min=-1, max=None)) == "minimum must be non-negative"


def test_negative_max():
    assert validate_ceiling(CeilingRange(min=None, max=-5)) == MAX_NEGATIVE


def test_empty_range_is_valid():
    assert validate_ceiling(CeilingRange(min=None, max=None)) is None


def test_equal_bounds_are_valid():
    assert validate_ceiling(CeilingRange(min=0, max=0)) is None


def test_ordering_reported_before_sign():
    assert validate_ceiling(CeilingRange(min=-1, max=-10)) == MIN_EXCEEDS_MAX


def test_both_negative_in_order_reports_min():
    assert validate_ceiling(CeilingRange(min=-10, max=-1)) == MIN_NEGATIVE


def test_validator_does_not_mutate():
    ceiling = CeilingRange(min=100, max=50)
    validate_ceiling(ceiling)
    assert ceiling == CeilingRange(min=100, max=50)
