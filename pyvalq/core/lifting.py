"""Lifts single-value validators over optional values and collections.

Every lifter threads one accumulator through all of the elements it visits,
so soft issues from every element are kept. The first halt aborts the whole
lift; elements after it are never evaluated.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, TypeVar, Union

from .validation import Continue, Halt, Issues, Validatable, Validation, Validator, valid

X = TypeVar("X")
Y = TypeVar("Y")
K = TypeVar("K")
V = TypeVar("V")
I = TypeVar("I")

Entry = Tuple[Validatable[K, I], Validatable[V, I]]


def _fold_items(items: Iterable[Validatable[X, I]], issues: Issues[I]) -> Validation[List[X], I]:
    values: List[X] = []
    for item in items:
        outcome = item(issues)
        if isinstance(outcome, Halt):
            return outcome
        values.append(outcome.value)
        issues = outcome.issues
    return Continue(values, issues)


def _fold_entries(entries: Iterable[Entry], issues: Issues[I]) -> Validation[Dict[Any, Any], I]:
    result: Dict[Any, Any] = {}
    for key_item, value_item in entries:
        key_outcome = key_item(issues)
        if isinstance(key_outcome, Halt):
            return key_outcome
        value_outcome = value_item(key_outcome.issues)
        if isinstance(value_outcome, Halt):
            return value_outcome
        result[key_outcome.value] = value_outcome.value
        issues = value_outcome.issues
    return Continue(result, issues)


def optional(validator_: Validator[X, Y, I]) -> Validator[Optional[X], Optional[Y], I]:
    """Lifts ``validator_`` over a value that may be ``None``.

    ``None`` passes through as ``None`` without invoking ``validator_``;
    absence is never an issue at this layer. A present value is validated
    normally, and a halt inside propagates as a halt of the whole optional.
    """
    def build(value: Optional[X]) -> Validatable[Optional[Y], I]:
        if value is None:
            return valid(None)
        return validator_(value)
    return build


def validatable_list(items: Iterable[Validatable[X, I]]) -> Validatable[List[X], I]:
    """Folds already-applied validatables into one that yields a list.

    Args:
        items (Iterable[Validatable[X, I]]): The element computations, in
            order. The iterable is consumed immediately.

    Returns:
        Validatable[List[X], I]: A computation yielding the element values in
        the same order, or the first halt encountered.
    """
    items = list(items)

    def run(issues: Issues[I]) -> Validation[List[X], I]:
        return _fold_items(items, issues)
    return run


def validatable_map(
    entries: Union[Mapping[K, Validatable[V, I]], Iterable[Entry]],
) -> Validatable[Dict[K, V], I]:
    """Folds already-applied key and value validatables into one that yields a dict.

    ``entries`` is either a mapping of plain keys to value validatables, or an
    iterable of ``(key_validatable, value_validatable)`` pairs. For each entry
    the key runs before the value, in iteration order, all sharing one
    accumulator.
    When two entries produce the same key, the later entry replaces the
    earlier one and no issue is recorded; key validators that must keep keys
    distinct should check for that themselves.

    Args:
        entries: The entries to fold. The iterable is consumed immediately.

    Returns:
        Validatable[Dict[K, V], I]: A computation yielding a dict with the
        validated keys and values, or the first halt encountered.
    """
    if isinstance(entries, Mapping):
        pairs = [(valid(key), value) for key, value in entries.items()]
    else:
        pairs = list(entries)

    def run(issues: Issues[I]) -> Validation[Dict[K, V], I]:
        return _fold_entries(pairs, issues)
    return run


def vector(validator_: Validator[X, Y, I]) -> Validator[Iterable[X], List[Y], I]:
    """Lifts ``validator_`` over every element of a sequence.

    The output list preserves input order. Issues from every element are
    collected; the first halting element stops the lift, and ``validator_``
    is not applied to the elements after it.
    """
    def build(values: Iterable[X]) -> Validatable[List[Y], I]:
        values = list(values)

        def run(issues: Issues[I]) -> Validation[List[Y], I]:
            return _fold_items((validator_(value) for value in values), issues)
        return run
    return build


def mapping(
    value_validator: Validator[X, Y, I],
    key_validator: Optional[Validator[Any, K, I]] = None,
) -> Validator[Mapping[Any, X], Dict[K, Y], I]:
    """Lifts validators over the keys and values of a mapping.

    Args:
        value_validator (Validator[X, Y, I]): Applied to every value.
        key_validator (Optional[Validator[Any, K, I]]): Applied to every key.
            Keys are kept unchanged when omitted. If two keys validate to the
            same output key, the later entry wins.

    Returns:
        Validator[Mapping[Any, X], Dict[K, Y], I]: The lifted validator.
    """
    validate_key = key_validator or valid

    def build(values: Mapping[Any, X]) -> Validatable[Dict[K, Y], I]:
        items = list(values.items())

        def run(issues: Issues[I]) -> Validation[Dict[K, Y], I]:
            return _fold_entries(
                ((validate_key(key), value_validator(value)) for key, value in items), issues
            )
        return run
    return build
