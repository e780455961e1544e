"""Type assignability rules.

A single predicate decides whether a value of one type may stand in for a
declared type without conversion. It is used both for the direct-copy fast
path and for matching registered converters.
"""

from __future__ import annotations

import types
from typing import Annotated, Any, TypeVar, Union, get_args, get_origin

# Implicit numeric promotions accepted where the wider type is declared.
_NUMERIC_PROMOTIONS: dict[type, frozenset[type]] = {
    bool: frozenset({int, float, complex}),
    int: frozenset({float, complex}),
    float: frozenset({complex}),
}

_NONE_TYPE = type(None)


def _unwrap(tp: Any) -> Any:
    """Strip Annotated, NewType and TypeVar wrappers down to a plain type."""
    while True:
        if get_origin(tp) is Annotated:
            tp = get_args(tp)[0]
        elif isinstance(tp, TypeVar):
            tp = tp.__bound__ if tp.__bound__ is not None else Any
        elif callable(tp) and hasattr(tp, "__supertype__"):
            tp = tp.__supertype__
        else:
            return tp


def _is_union(tp: Any) -> bool:
    origin = get_origin(tp)
    return origin is Union or origin is types.UnionType


def is_wildcard(tp: Any) -> bool:
    """Whether a declared type accepts any value."""
    tp = _unwrap(tp)
    return tp is Any or tp is object or tp is None


def is_assignable(from_type: Any, to_type: Any) -> bool:
    """Check whether a value of ``from_type`` may be assigned to ``to_type``.

    Rules:
    - reflexive; ``Any``, ``object`` and a missing annotation accept everything
    - subclasses are assignable to their bases
    - numeric promotion: bool -> int -> float -> complex
    - unions accept any member; a union source needs every member to fit
    - parameterised generics compare by origin only
    """
    if from_type is None:
        from_type = Any
    from_type = _unwrap(from_type)
    to_type = _unwrap(to_type)

    if is_wildcard(to_type):
        return True
    if from_type is Any:
        return False
    if from_type == to_type:
        return True

    if _is_union(from_type):
        return all(is_assignable(arg, to_type) for arg in get_args(from_type))
    if _is_union(to_type):
        return any(is_assignable(from_type, arg) for arg in get_args(to_type))

    from_origin = get_origin(from_type) or from_type
    to_origin = get_origin(to_type) or to_type

    if from_origin is _NONE_TYPE or to_origin is _NONE_TYPE:
        return from_origin is to_origin

    if to_origin in _NUMERIC_PROMOTIONS.get(from_origin, ()):
        return True

    try:
        return issubclass(from_origin, to_origin)
    except TypeError:
        # Literal, Callable[...] and other special forms
        return False
