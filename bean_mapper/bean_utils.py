"""Module-level copy helpers without custom converters.

Backed by one shared BeanConverter with an empty registry and its own plan
cache: values are copied when their type fits the target property's declared
type, and written as None otherwise. A mismatched property therefore
overwrites the target's existing value with None rather than being skipped.
"""

from __future__ import annotations

from typing import Any, TypeVar

from bean_mapper.mapping.converter import BeanConverter

T = TypeVar("T")

_DEFAULT = BeanConverter()


def copy_properties(source: Any, target: Any) -> None:
    """Copy the property values of ``source`` into ``target``."""
    _DEFAULT.copy_properties(source, target)


def convert(source: Any, target_type: type[T]) -> T:
    """Create a ``target_type`` instance populated from ``source``."""
    return _DEFAULT.convert(source, target_type)


def default_converter() -> BeanConverter:
    """The shared converter behind this module."""
    return _DEFAULT
