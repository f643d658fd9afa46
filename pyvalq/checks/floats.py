"""Bounds checks for floating point values.

NaN compares false against every bound, so a NaN input fails ``minimum``,
``maximum`` and ``in_range`` as well as ``finite``.
"""

import math
from typing import TypeVar

from ..core.validation import Validator
from .base import check

A = TypeVar("A")
I = TypeVar("I")


def minimum(prior: Validator[A, float, I], low: float, issue: I) -> Validator[A, float, I]:
    """Requires the value to be at least ``low``."""
    return check(prior, lambda value: value >= low, issue)


def maximum(prior: Validator[A, float, I], high: float, issue: I) -> Validator[A, float, I]:
    """Requires the value to be at most ``high``."""
    return check(prior, lambda value: value <= high, issue)


def in_range(prior: Validator[A, float, I], low: float, high: float, issue: I) -> Validator[A, float, I]:
    """Requires ``low <= value <= high`` (both bounds inclusive)."""
    return check(prior, lambda value: low <= value <= high, issue)


def finite(prior: Validator[A, float, I], issue: I) -> Validator[A, float, I]:
    """Rejects NaN and both infinities."""
    return check(prior, math.isfinite, issue)
