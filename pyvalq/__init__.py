"""pyvalq: composable validation pipelines.

This package builds validators out of small checks, runs them once against an
input, and returns either the validated value or every issue found along the
way. A command-line tool validates JSON documents against registered schemas.
"""

from .core import (
    Continue,
    Err,
    Halt,
    Issues,
    Ok,
    accept,
    apply,
    chain,
    continuing,
    extend,
    halt,
    invalid,
    map_output,
    mapping,
    optional,
    valid,
    validatable_list,
    validatable_map,
    validate,
    validator,
    vector,
)

__version__ = "0.4.0"
__author__ = "Livrädo Sandoval"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "Continue",
    "Halt",
    "Issues",
    "Ok",
    "Err",
    "valid",
    "invalid",
    "halt",
    "continuing",
    "validator",
    "extend",
    "chain",
    "apply",
    "accept",
    "map_output",
    "validate",
    "optional",
    "vector",
    "mapping",
    "validatable_list",
    "validatable_map",
]
