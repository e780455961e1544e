"""Default property introspection.

Supports dataclasses, Pydantic models, and plain classes. Detection order:
1. Pydantic BaseModel -> model_fields
2. dataclass -> dataclasses.fields()
3. Plain class -> class annotations; when the class declares none, the
   attributes a no-argument instance carries, or else ``__init__`` parameters

``property`` objects are picked up for every kind of class; a property
without a setter is read-only. Reading an attribute that was never assigned
yields None.
"""

from __future__ import annotations

import dataclasses
import inspect
import operator
from collections.abc import Callable
from typing import Any, ClassVar, get_origin, get_type_hints

from pydantic import BaseModel

from bean_mapper.core.exceptions import IntrospectionError
from bean_mapper.mapping.protocol import PropertyDescriptor


def is_pydantic_model(cls: type) -> bool:
    """Check if a class is a Pydantic BaseModel."""
    return issubclass(cls, BaseModel)


def _attribute_getter(name: str) -> Callable[[Any], Any]:
    def _get(obj: Any) -> Any:
        try:
            return getattr(obj, name)
        except AttributeError:
            return None

    return _get


def _attribute_setter(name: str) -> Callable[[Any, Any], None]:
    def _set(obj: Any, value: Any) -> None:
        setattr(obj, name, value)

    return _set


def _type_hints(cls: type) -> dict[str, Any]:
    """Resolve class annotations, degrading unresolvable ones to Any."""
    try:
        return get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        hints: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            for name, annotation in inspect.get_annotations(klass).items():
                hints[name] = Any if isinstance(annotation, str) else annotation
        return hints


def _is_class_var(annotation: Any) -> bool:
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _property_type(prop: property) -> Any:
    if prop.fget is None:
        return Any
    try:
        return get_type_hints(prop.fget).get("return", Any)
    except (NameError, TypeError):
        return Any


class DefaultIntrospector:
    """Lists the copyable properties of dataclasses, Pydantic models and
    plain classes.

    Args:
        include_private: Also list ``_``-prefixed attributes. Dunder names
            are never listed.
    """

    def __init__(self, include_private: bool = False) -> None:
        self._include_private = include_private

    def list_properties(self, cls: type) -> tuple[PropertyDescriptor, ...]:
        if not isinstance(cls, type):
            raise IntrospectionError(type(cls), f"expected a class, got {cls!r}")

        if is_pydantic_model(cls):
            found = self._pydantic_fields(cls)
        elif dataclasses.is_dataclass(cls):
            found = self._dataclass_fields(cls)
        else:
            found = self._plain_fields(cls)

        names = {descriptor.name for descriptor in found}
        for descriptor in self._properties(cls):
            if descriptor.name not in names:
                found.append(descriptor)
                names.add(descriptor.name)

        return tuple(d for d in found if self._is_visible(d.name))

    def _is_visible(self, name: str) -> bool:
        if name.startswith("__"):
            return False
        return self._include_private or not name.startswith("_")

    def _pydantic_fields(self, cls: Any) -> list[PropertyDescriptor]:
        frozen_model = bool(cls.model_config.get("frozen", False))
        result = []
        for name, info in cls.model_fields.items():
            writable = not (frozen_model or info.frozen)
            result.append(
                PropertyDescriptor(
                    name=name,
                    declared_type=info.annotation if info.annotation is not None else Any,
                    getter=_attribute_getter(name),
                    setter=_attribute_setter(name) if writable else None,
                )
            )
        return result

    def _dataclass_fields(self, cls: Any) -> list[PropertyDescriptor]:
        hints = _type_hints(cls)
        writable = not cls.__dataclass_params__.frozen
        return [
            PropertyDescriptor(
                name=f.name,
                declared_type=hints.get(f.name, Any),
                getter=_attribute_getter(f.name),
                setter=_attribute_setter(f.name) if writable else None,
            )
            for f in dataclasses.fields(cls)
        ]

    def _plain_fields(self, cls: type) -> list[PropertyDescriptor]:
        hints = {
            name: annotation
            for name, annotation in _type_hints(cls).items()
            if not _is_class_var(annotation)
            and not isinstance(inspect.getattr_static(cls, name, None), property)
        }
        if not hints:
            hints = self._instance_attributes(cls)
        return [
            PropertyDescriptor(
                name=name,
                declared_type=annotation,
                getter=_attribute_getter(name),
                setter=_attribute_setter(name),
            )
            for name, annotation in hints.items()
        ]

    def _instance_attributes(self, cls: type) -> dict[str, Any]:
        """Properties of an unannotated class.

        When ``__init__`` can be called without arguments, the attributes a
        fresh instance carries are listed, typed from the matching
        ``__init__`` parameter or as Any. Otherwise the ``__init__``
        parameters themselves are listed.

        Raises:
            IntrospectionError: If the no-argument construction fails.
        """
        if cls.__init__ is object.__init__:
            return {}
        try:
            sig = inspect.signature(cls.__init__)
        except (ValueError, TypeError):
            return {}
        try:
            hints = get_type_hints(cls.__init__)
        except (NameError, TypeError):
            hints = {}
        params = {
            name: param
            for name, param in sig.parameters.items()
            if name != "self" and param.kind in (param.POSITIONAL_OR_KEYWORD, param.KEYWORD_ONLY)
        }
        if any(param.default is param.empty for param in params.values()):
            return {name: hints.get(name, Any) for name in params}

        try:
            sample = cls()
        except Exception as e:
            raise IntrospectionError(cls, f"cannot create a sample instance: {e}") from e
        return {name: hints.get(name, Any) for name in getattr(sample, "__dict__", {})}

    def _properties(self, cls: type) -> list[PropertyDescriptor]:
        result = []
        seen: set[str] = set()
        for klass in cls.__mro__:
            # BaseModel's own properties are model metadata, not fields
            if klass is object or klass.__module__.startswith("pydantic."):
                continue
            for name, attr in vars(klass).items():
                if name in seen or not isinstance(attr, property):
                    continue
                seen.add(name)
                result.append(
                    PropertyDescriptor(
                        name=name,
                        declared_type=_property_type(attr),
                        getter=operator.attrgetter(name) if attr.fget is not None else None,
                        setter=_attribute_setter(name) if attr.fset is not None else None,
                    )
                )
        return result
