"""Length, emptiness and pattern checks for strings.

Lengths are counted in code points, as returned by ``len``.
"""

import re
from typing import TypeVar, Union

from ..core.validation import Validator
from .base import check

A = TypeVar("A")
I = TypeVar("I")


def not_empty(prior: Validator[A, str, I], issue: I) -> Validator[A, str, I]:
    """Requires at least one character."""
    return check(prior, lambda value: len(value) > 0, issue)


def not_blank(prior: Validator[A, str, I], issue: I) -> Validator[A, str, I]:
    """Requires at least one non-whitespace character."""
    return check(prior, lambda value: bool(value.strip()), issue)


def min_length(prior: Validator[A, str, I], length: int, issue: I) -> Validator[A, str, I]:
    return check(prior, lambda value: len(value) >= length, issue)


def max_length(prior: Validator[A, str, I], length: int, issue: I) -> Validator[A, str, I]:
    return check(prior, lambda value: len(value) <= length, issue)


def length_between(prior: Validator[A, str, I], low: int, high: int, issue: I) -> Validator[A, str, I]:
    """Requires ``low <= len(value) <= high``.

    Args:
        prior (Validator[A, str, I]): The pipeline built so far.
        low (int): The inclusive minimum length.
        high (int): The inclusive maximum length.
        issue (I): Recorded once when the length falls outside the bounds.

    Returns:
        Validator[A, str, I]: The extended pipeline.
    """
    return check(prior, lambda value: low <= len(value) <= high, issue)


def matches(prior: Validator[A, str, I], pattern: Union[str, "re.Pattern[str]"], issue: I) -> Validator[A, str, I]:
    """Requires the whole string to match ``pattern``."""
    compiled = re.compile(pattern)
    return check(prior, lambda value: compiled.fullmatch(value) is not None, issue)
