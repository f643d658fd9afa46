"""Bounds checks for integer values.

All checks raise soft issues: an out-of-range number is still a number, so
later checks keep running against it.
"""

from typing import TypeVar

from ..core.validation import Validator
from .base import check

A = TypeVar("A")
I = TypeVar("I")


def minimum(prior: Validator[A, int, I], low: int, issue: I) -> Validator[A, int, I]:
    """Requires the value to be at least ``low``."""
    return check(prior, lambda value: value >= low, issue)


def maximum(prior: Validator[A, int, I], high: int, issue: I) -> Validator[A, int, I]:
    """Requires the value to be at most ``high``."""
    return check(prior, lambda value: value <= high, issue)


def in_range(prior: Validator[A, int, I], low: int, high: int, issue: I) -> Validator[A, int, I]:
    """Requires ``low <= value <= high``.

    Args:
        prior (Validator[A, int, I]): The pipeline built so far.
        low (int): The inclusive lower bound.
        high (int): The inclusive upper bound.
        issue (I): Recorded once when the value falls outside the range.

    Returns:
        Validator[A, int, I]: The extended pipeline.
    """
    return check(prior, lambda value: low <= value <= high, issue)


def greater_than(prior: Validator[A, int, I], bound: int, issue: I) -> Validator[A, int, I]:
    return check(prior, lambda value: value > bound, issue)


def less_than(prior: Validator[A, int, I], bound: int, issue: I) -> Validator[A, int, I]:
    return check(prior, lambda value: value < bound, issue)


def positive(prior: Validator[A, int, I], issue: I) -> Validator[A, int, I]:
    return greater_than(prior, 0, issue)


def non_negative(prior: Validator[A, int, I], issue: I) -> Validator[A, int, I]:
    return minimum(prior, 0, issue)
