"""Checks for raw byte sequences.

Decoding is a halting check: bytes that are not valid UTF-8 cannot produce a
string, so nothing after ``utf8`` in the pipeline runs.
"""

from typing import TypeVar

from ..core.validation import Validator
from .base import check, convert

A = TypeVar("A")
I = TypeVar("I")


def utf8(prior: Validator[A, bytes, I], issue: I) -> Validator[A, str, I]:
    """Decodes the bytes as strict UTF-8, halting with ``issue`` on failure.

    Args:
        prior (Validator[A, bytes, I]): The pipeline built so far.
        issue (I): The issue to halt with when decoding fails.

    Returns:
        Validator[A, str, I]: The extended pipeline, now producing ``str``.
    """
    return convert(prior, lambda value: bytes(value).decode("utf-8"), issue, UnicodeDecodeError)


def max_size(prior: Validator[A, bytes, I], size: int, issue: I) -> Validator[A, bytes, I]:
    """Requires at most ``size`` bytes."""
    return check(prior, lambda value: len(value) <= size, issue)
