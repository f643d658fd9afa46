"""Building blocks shared by every check library.

A check wraps a prior validator with a single test. ``check`` raises a soft
issue when the test fails and keeps the value; ``convert`` runs a fallible
conversion and halts when no usable value can be produced.
"""

from typing import Callable, Tuple, Type, TypeVar, Union

from ..core.validation import Validator, extend, halt, invalid, valid

A = TypeVar("A")
T = TypeVar("T")
U = TypeVar("U")
I = TypeVar("I")


def check(prior: Validator[A, T, I], predicate: Callable[[T], bool], issue: I) -> Validator[A, T, I]:
    """Extends ``prior`` with a test that records ``issue`` when it fails.

    Args:
        prior (Validator[A, T, I]): The pipeline built so far.
        predicate (Callable[[T], bool]): Returns True for acceptable values.
        issue (I): The issue to record when ``predicate`` returns False.

    Returns:
        Validator[A, T, I]: The extended pipeline. The value is passed on
        unchanged whether or not the test passes.
    """
    def step(value: T):
        if predicate(value):
            return valid(value)
        return invalid(value, issue)
    return extend(prior, step)


def convert(
    prior: Validator[A, T, I],
    fn: Callable[[T], U],
    issue: I,
    errors: Union[Type[Exception], Tuple[Type[Exception], ...]] = (ValueError, TypeError),
) -> Validator[A, U, I]:
    """Extends ``prior`` with a conversion that halts on failure.

    Args:
        prior (Validator[A, T, I]): The pipeline built so far.
        fn (Callable[[T], U]): The conversion. It signals failure by raising
            one of ``errors``.
        issue (I): The issue to halt with when the conversion fails.
        errors: The exception types that mean "no usable value". Anything
            else propagates to the caller.

    Returns:
        Validator[A, U, I]: The extended pipeline.
    """
    def step(value: T):
        try:
            converted = fn(value)
        except errors:
            return halt(issue)
        return valid(converted)
    return extend(prior, step)
