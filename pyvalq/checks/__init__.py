"""Check libraries built on the evaluation core.

Each module holds single-step checks for one kind of value. Every check takes
the pipeline built so far as its first argument and returns the extended
pipeline, so checks nest naturally::

    from pyvalq import validator
    from pyvalq.checks import integers

    birth_year = integers.in_range(validator(), 1600, 2023, "birth year out of range")
"""
from . import byte_strings, floats, integers, strings
from .base import check, convert

__all__ = ["byte_strings", "floats", "integers", "strings", "check", "convert"]
