"""Collaborator protocols.

BeanConverter reaches type introspection and instance creation only through
these interfaces; the defaults live in introspection.py and instance.py.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@dataclass(frozen=True)
class PropertyDescriptor:
    """A copyable property of a type.

    ``getter`` is None for write-only properties, ``setter`` is None for
    read-only ones.
    """

    name: str
    declared_type: Any
    getter: Callable[[Any], Any] | None
    setter: Callable[[Any, Any], None] | None

    @property
    def readable(self) -> bool:
        return self.getter is not None

    @property
    def writable(self) -> bool:
        return self.setter is not None


@runtime_checkable
class PropertyIntrospector(Protocol):
    """Enumerates the copyable properties of a type."""

    def list_properties(self, cls: type) -> tuple[PropertyDescriptor, ...]:
        """Return the properties of ``cls`` in declaration order."""
        ...


@runtime_checkable
class InstanceFactory(Protocol):
    """Creates empty instances of target types."""

    def new_instance(self, cls: type[T]) -> T:
        """Create an instance of ``cls`` without arguments.

        Raises:
            InstantiationError: If ``cls`` cannot be constructed.
        """
        ...
