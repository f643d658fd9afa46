"""Decoders that turn parsed JSON-like values into typed values.

The input to every decoder is whatever ``json.load`` produced: dicts, lists,
strings, numbers, booleans and ``None``. A value of the wrong shape halts,
since there is no usable value to keep validating. Each decoder is an
ordinary ``Validator`` and composes with the check libraries::

    birth_year = integers.in_range(integer("birth_year must be an integer"),
                                   1600, 2023, "birth year out of range")
"""

from typing import Any, Dict, List, Mapping, Optional, TypeVar

from ..core.lifting import optional, validatable_list, validatable_map
from ..core.validation import Validatable, Validator, halt, valid

T = TypeVar("T")
K = TypeVar("K")
I = TypeVar("I")


def integer(issue: I) -> Validator[Any, int, I]:
    """Accepts ``int`` values. Booleans are rejected."""
    def build(value: Any) -> Validatable[int, I]:
        if isinstance(value, int) and not isinstance(value, bool):
            return valid(value)
        return halt(issue)
    return build


def number(issue: I) -> Validator[Any, float, I]:
    """Accepts ``int`` and ``float`` values and produces a ``float``.

    Integers too large to represent as a float halt with ``issue``.
    """
    def build(value: Any) -> Validatable[float, I]:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return valid(float(value))
            except OverflowError:
                return halt(issue)
        return halt(issue)
    return build


def string(issue: I) -> Validator[Any, str, I]:
    def build(value: Any) -> Validatable[str, I]:
        if isinstance(value, str):
            return valid(value)
        return halt(issue)
    return build


def boolean(issue: I) -> Validator[Any, bool, I]:
    def build(value: Any) -> Validatable[bool, I]:
        if isinstance(value, bool):
            return valid(value)
        return halt(issue)
    return build


def list_of(element: Validator[Any, T, I], issue: I) -> Validator[Any, List[T], I]:
    """Decodes a JSON array, applying ``element`` to every item.

    Args:
        element (Validator[Any, T, I]): The decoder for each item.
        issue (I): The issue to halt with when the value is not a list.

    Returns:
        Validator[Any, List[T], I]: A decoder producing the items in order.
    """
    def build(value: Any) -> Validatable[List[T], I]:
        if not isinstance(value, list):
            return halt(issue)
        return validatable_list(element(item) for item in value)
    return build


def dict_of(
    value_decoder: Validator[Any, T, I],
    issue: I,
    key_decoder: Optional[Validator[str, K, I]] = None,
) -> Validator[Any, Dict[K, T], I]:
    """Decodes a JSON object, applying decoders to every key and value.

    Args:
        value_decoder (Validator[Any, T, I]): The decoder for each value.
        issue (I): The issue to halt with when the value is not a dict.
        key_decoder (Optional[Validator[str, K, I]]): The decoder for each
            key. Keys are kept as strings when omitted. If two keys decode to
            the same output key, the later member wins.

    Returns:
        Validator[Any, Dict[K, T], I]: A decoder producing a dict with the
        same key set as the input.
    """
    decode_key = key_decoder or valid

    def build(value: Any) -> Validatable[Dict[K, T], I]:
        if not isinstance(value, dict):
            return halt(issue)
        return validatable_map((decode_key(key), value_decoder(item)) for key, item in value.items())
    return build


def field(name: str, decoder: Validator[Any, T, I], missing_issue: I) -> Validator[Mapping[str, Any], T, I]:
    """Decodes the required member ``name`` of a JSON object.

    A missing member halts with ``missing_issue``. Callers are expected to
    have decoded the enclosing value as an object already.
    """
    def build(value: Mapping[str, Any]) -> Validatable[T, I]:
        if name not in value:
            return halt(missing_issue)
        return decoder(value[name])
    return build


def optional_field(name: str, decoder: Validator[Any, T, I]) -> Validator[Mapping[str, Any], Optional[T], I]:
    """Decodes the member ``name`` if present; absent or ``null`` gives ``None``."""
    decode = optional(decoder)

    def build(value: Mapping[str, Any]) -> Validatable[Optional[T], I]:
        return decode(value.get(name))
    return build


def json_object(issue: I) -> Validator[Any, Dict[str, Any], I]:
    """Accepts a JSON object as-is, so its members can be read with ``field``."""
    def build(value: Any) -> Validatable[Dict[str, Any], I]:
        if isinstance(value, dict):
            return valid(value)
        return halt(issue)
    return build
