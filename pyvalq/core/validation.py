"""The evaluation core of pyvalq.

A validation run threads an issue accumulator through a chain of steps. Each
step either continues with a value (possibly recording soft issues along the
way) or halts, after which no later step is evaluated. The shapes involved are
plain callables:

* A ``Validatable`` is a function from the issues accumulated so far to a
  ``Validation`` (``Continue`` or ``Halt``).
* A ``Validator`` is a function from an input value to a ``Validatable``.

Pipelines are grown with ``extend`` and run once with ``validate``, which
collapses the outcome into ``Ok`` or ``Err``.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, Iterator, List, Protocol, TypeVar, Union

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
T = TypeVar("T")
K = TypeVar("K")
I = TypeVar("I")
T_co = TypeVar("T_co", covariant=True)
A_contra = TypeVar("A_contra", contravariant=True)


class Issues(Generic[I]):
    """An immutable, structurally shared stack of issues.

    Pushing returns a new stack that shares every earlier node with the
    receiver, so threading the accumulator through a pipeline never copies
    it. Iteration, ``to_list`` and ``len`` expose issues oldest first, in the
    order they were raised.
    """

    __slots__ = ("_head", "_tail", "_size")

    def __init__(self) -> None:
        """Creates an empty stack. Non-empty stacks are built with ``push``."""
        self._head: Any = None
        self._tail: "Union[Issues[I], None]" = None
        self._size = 0

    @staticmethod
    def empty() -> "Issues[Any]":
        """Returns the shared empty stack."""
        return _EMPTY_ISSUES

    @staticmethod
    def of(*issues: I) -> "Issues[I]":
        """Builds a stack holding ``issues`` in the given (oldest first) order."""
        stack: Issues[I] = _EMPTY_ISSUES
        for issue in issues:
            stack = stack.push(issue)
        return stack

    def push(self, issue: I) -> "Issues[I]":
        node: Issues[I] = object.__new__(Issues)
        node._head = issue
        node._tail = self
        node._size = self._size + 1
        return node

    def to_list(self) -> List[I]:
        newest_first = []
        node = self
        while node._tail is not None:
            newest_first.append(node._head)
            node = node._tail
        newest_first.reverse()
        return newest_first

    def __iter__(self) -> Iterator[I]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Issues):
            return NotImplemented
        return len(self) == len(other) and self.to_list() == other.to_list()

    def __hash__(self) -> int:
        return hash(tuple(self.to_list()))

    def __repr__(self) -> str:
        return f"Issues({self.to_list()!r})"


_EMPTY_ISSUES: Issues[Any] = Issues()


@dataclass(frozen=True)
class Continue(Generic[T, I]):
    """A step produced ``value``; ``issues`` holds everything raised so far."""

    value: T
    issues: Issues[I]


@dataclass(frozen=True)
class Halt(Generic[I]):
    """A step could not produce a value; nothing after it may run."""

    issues: Issues[I]


Validation = Union[Continue[T, I], Halt[I]]


class Validatable(Protocol[T_co, I]):
    """A deferred run: given the issues raised so far, produce a ``Validation``."""

    def __call__(self, issues: Issues[I]) -> "Union[Continue[T_co, I], Halt[I]]":
        ...


class Validator(Protocol[A_contra, T_co, I]):
    """A builder: given an input, produce the ``Validatable`` that checks it."""

    def __call__(self, value: A_contra) -> Validatable[T_co, I]:
        ...


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful validation result containing the validated value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True)
class Err(Generic[I]):
    """A failed validation result containing every issue, oldest first."""

    issues: List[I]

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


def continuing(
    validation: Validation[T, I],
    fn: Callable[[T, Issues[I]], Validation[K, I]],
) -> Validation[K, I]:
    """Sequences the next step after ``validation``.

    If ``validation`` is a ``Continue``, ``fn`` is called with its value and
    issues and its result is returned. A ``Halt`` is returned unchanged and
    ``fn`` is never called.

    Args:
        validation (Validation[T, I]): The outcome of the previous step.
        fn (Callable[[T, Issues[I]], Validation[K, I]]): The next step.

    Returns:
        Validation[K, I]: The outcome of the next step, or the halt.
    """
    if isinstance(validation, Halt):
        return validation
    return fn(validation.value, validation.issues)


def valid(value: T) -> Validatable[T, Any]:
    """A step that succeeds with ``value`` and raises nothing."""
    def run(issues: Issues[I]) -> Validation[T, I]:
        return Continue(value, issues)
    return run


def invalid(value: T, issue: I) -> Validatable[T, I]:
    """A step that keeps ``value`` but records ``issue``; later steps still run."""
    def run(issues: Issues[I]) -> Validation[T, I]:
        return Continue(value, issues.push(issue))
    return run


def halt(issue: I) -> Validatable[Any, I]:
    """A step that records ``issue`` and stops the whole run."""
    def run(issues: Issues[I]) -> Validation[Any, I]:
        return Halt(issues.push(issue))
    return run


def validator() -> Validator[A, A, Any]:
    """Returns the identity validator, the root of every pipeline."""
    return valid


def extend(first: Validator[A, B, I], second: Validator[B, C, I]) -> Validator[A, C, I]:
    """Composes two validators so that ``second`` runs on the output of ``first``.

    Check libraries call this with a ``second`` that performs a single test.
    Composition is associative, and ``second`` is never invoked if ``first``
    halts.

    Args:
        first (Validator[A, B, I]): The validator applied to the input.
        second (Validator[B, C, I]): The validator applied to the output of
            ``first``.

    Returns:
        Validator[A, C, I]: The composed validator.
    """
    def build(value: A) -> Validatable[C, I]:
        def run(issues: Issues[I]) -> Validation[C, I]:
            return continuing(first(value)(issues), lambda out, acc: second(out)(acc))
        return run
    return build


def chain(*validators: Validator[Any, Any, I]) -> Validator[Any, Any, I]:
    """Extends the identity validator with each of ``validators`` in turn."""
    return reduce(extend, validators, validator())


def apply(first: Validator[A, B, I], value: A) -> Callable[[Validator[B, C, I]], Validatable[C, I]]:
    """Applies ``first`` to ``value`` and waits for a continuation.

    This is ``extend`` split in two, so that ordinary control flow can sit
    between the steps. The continuation receives the validated output of
    ``first``, which makes dependent validation possible::

        apply(birth_year, data)(lambda birth:
            apply(start_year_after(birth), data)(valid))

    Args:
        first (Validator[A, B, I]): The validator to run on ``value``.
        value (A): The concrete input.

    Returns:
        Callable[[Validator[B, C, I]], Validatable[C, I]]: A function that
        takes the continuation validator and returns the combined
        ``Validatable``.
    """
    def with_continuation(then: Validator[B, C, I]) -> Validatable[C, I]:
        def run(issues: Issues[I]) -> Validation[C, I]:
            return continuing(first(value)(issues), lambda out, acc: then(out)(acc))
        return run
    return with_continuation


def accept(validator_: Validator[A, T, I], value: A) -> Validatable[T, I]:
    """Applies ``validator_`` to ``value`` with no continuation."""
    return validator_(value)


def map_output(validator_: Validator[A, B, I], fn: Callable[[B], C]) -> Validator[A, C, I]:
    """Transforms the validated output of ``validator_`` with ``fn``.

    No issue is ever raised by the transformation itself.
    """
    return extend(validator_, lambda out: valid(fn(out)))


def validate(validatable: Validatable[T, I]) -> Union[Ok[T], Err[I]]:
    """Runs ``validatable`` from an empty accumulator and collapses the outcome.

    Args:
        validatable (Validatable[T, I]): The computation to run.

    Returns:
        Union[Ok[T], Err[I]]: ``Ok`` with the value when the run continued to
        the end without raising anything; otherwise ``Err`` with every issue,
        oldest first. A value produced alongside soft issues is discarded.
    """
    outcome = validatable(Issues.empty())
    if isinstance(outcome, Continue) and not outcome.issues:
        return Ok(outcome.value)
    return Err(outcome.issues.to_list())
