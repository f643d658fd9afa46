"""Core components for pyvalq.

This package contains the evaluation engine (the ``Continue``/``Halt``
outcome algebra and the combinators that compose validators), the lifters
that carry validators over optional values and collections, and the
configuration manager used by the command-line tool.
"""

from .lifting import mapping, optional, validatable_list, validatable_map, vector
from .validation import (
    Continue,
    Err,
    Halt,
    Issues,
    Ok,
    Validatable,
    Validation,
    Validator,
    accept,
    apply,
    chain,
    continuing,
    extend,
    halt,
    invalid,
    map_output,
    valid,
    validate,
    validator,
)

__all__ = [
    # Outcomes
    "Continue",
    "Halt",
    "Validation",
    "Issues",
    "Ok",
    "Err",
    # Shapes
    "Validatable",
    "Validator",
    # Steps
    "valid",
    "invalid",
    "halt",
    "continuing",
    # Pipelines
    "validator",
    "extend",
    "chain",
    "apply",
    "accept",
    "map_output",
    "validate",
    # Lifting
    "optional",
    "vector",
    "mapping",
    "validatable_list",
    "validatable_map",
]
