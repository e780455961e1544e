"""Type converter registry.

Converters are resolved to a fixed (source type, target type) pair once, at
registration time, and grouped by declared source type:

    class GenderToInt(TypeConverter[Gender, int]):
        def convert(self, source: Gender) -> int: ...

    def decimal_to_str(source: Decimal) -> str: ...

    registry = ConverterRegistry([
        resolve_converter(GenderToInt()),
        resolve_converter(decimal_to_str),
        resolve_converter(Decimal, source_type=float, target_type=Decimal),
    ])
"""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, get_args, get_origin, get_type_hints

from bean_mapper.core.assignability import is_assignable
from bean_mapper.core.exceptions import ConverterRegistrationError

logger = logging.getLogger(__name__)

S = TypeVar("S")
T = TypeVar("T")


class TypeConverter(ABC, Generic[S, T]):
    """Base class for converters declaring their types as generic arguments."""

    @abstractmethod
    def convert(self, source: S) -> T:
        """Convert a source value to the target type."""

    def __call__(self, source: S) -> T:
        return self.convert(source)


@dataclass(frozen=True)
class ResolvedConverter:
    """A converter with its declared types fixed at registration."""

    func: Callable[[Any], Any]
    source_type: Any
    target_type: Any
    order: int = 0

    def __call__(self, value: Any) -> Any:
        return self.func(value)


def _generic_arguments(converter: TypeConverter[Any, Any]) -> tuple[Any, Any] | None:
    """Read S and T from the TypeConverter[S, T] base in the converter's MRO."""
    for klass in type(converter).__mro__:
        for base in getattr(klass, "__orig_bases__", ()):
            if get_origin(base) is TypeConverter:
                args = get_args(base)
                if len(args) == 2 and not any(isinstance(a, TypeVar) for a in args):
                    return args[0], args[1]
    return None


def _hinted_arguments(func: Callable[..., Any]) -> tuple[Any, Any]:
    """Infer source and target types from a callable's annotations."""
    try:
        hints = get_type_hints(func)
    except (TypeError, NameError):
        hints = {}

    try:
        sig = inspect.signature(func)
    except (ValueError, TypeError):
        return None, None

    source_type = None
    for name, param in sig.parameters.items():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            source_type = hints.get(name)
            break

    return source_type, hints.get("return")


def resolve_converter(
    converter: Callable[[Any], Any],
    source_type: Any = None,
    target_type: Any = None,
    order: int = 0,
) -> ResolvedConverter:
    """Resolve a converter's declared types.

    Explicit ``source_type``/``target_type`` win over anything inferred.
    Otherwise the types come from a ``TypeConverter[S, T]`` base or from the
    callable's parameter and return annotations.

    Raises:
        ConverterRegistrationError: If either type cannot be determined.
    """
    if not callable(converter):
        raise ConverterRegistrationError(converter, "converter is not callable")

    if source_type is None or target_type is None:
        inferred: tuple[Any, Any] | None = None
        if isinstance(converter, TypeConverter):
            inferred = _generic_arguments(converter)
            if inferred is None:
                inferred = _hinted_arguments(converter.convert)
        elif inspect.isclass(converter):
            # A constructor used as a converter produces its own type
            inferred = (None, converter)
        elif inspect.isroutine(converter):
            inferred = _hinted_arguments(converter)
        else:
            inferred = _hinted_arguments(converter.__call__)
        source_type = source_type if source_type is not None else inferred[0]
        target_type = target_type if target_type is not None else inferred[1]

    if source_type is None:
        raise ConverterRegistrationError(converter, "source type is unknown")
    if target_type is None:
        raise ConverterRegistrationError(converter, "target type is unknown")

    return ResolvedConverter(
        func=converter,
        source_type=source_type,
        target_type=target_type,
        order=order,
    )


class ConverterRegistry:
    """Immutable index of resolved converters grouped by source type.

    Built once, then read-only for the lifetime of the owning BeanConverter.
    Lookups return the first match in registration order.
    """

    def __init__(self, converters: Iterable[ResolvedConverter] = ()) -> None:
        ordered = sorted(converters, key=lambda c: c.order)
        index: dict[Any, list[ResolvedConverter]] = {}
        for converter in ordered:
            index.setdefault(converter.source_type, []).append(converter)
        self._index: dict[Any, tuple[ResolvedConverter, ...]] = {
            source_type: tuple(group) for source_type, group in index.items()
        }
        self._size = len(ordered)
        logger.debug(
            "Built converter registry: %d converters over %d source types",
            self._size,
            len(self._index),
        )

    def find(self, value_type: type, target_type: Any) -> ResolvedConverter | None:
        """Find the converter for a runtime value type and a declared target.

        A converter matches when ``value_type`` is assignable to its source
        type and its target type is assignable to ``target_type``. Among all
        matches the earliest registered wins.
        """
        best: ResolvedConverter | None = None
        for source_type, group in self._index.items():
            if not is_assignable(value_type, source_type):
                continue
            for converter in group:
                if best is not None and converter.order >= best.order:
                    break
                if is_assignable(converter.target_type, target_type):
                    best = converter
                    break
        return best

    def for_source(self, source_type: Any) -> tuple[ResolvedConverter, ...]:
        """Converters registered for exactly ``source_type``."""
        return self._index.get(source_type, ())

    @property
    def source_types(self) -> list[Any]:
        """Declared source types, in first-registration order."""
        return list(self._index)

    def __len__(self) -> int:
        return self._size
