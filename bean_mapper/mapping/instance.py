"""Default instance creation for convert()."""

from __future__ import annotations

from typing import TypeVar

from bean_mapper.core.exceptions import InstantiationError
from bean_mapper.mapping.introspection import is_pydantic_model

T = TypeVar("T")


class DefaultInstanceFactory:
    """Creates empty target instances.

    Pydantic models are created with ``model_construct()`` so that required
    fields do not block construction; they are filled by the copy that
    follows. Every other class must accept a call without arguments.
    """

    def new_instance(self, cls: type[T]) -> T:
        if not isinstance(cls, type):
            raise InstantiationError(type(cls), f"expected a class, got {cls!r}")
        try:
            if is_pydantic_model(cls):
                return cls.model_construct()  # type: ignore[attr-defined, no-any-return]
            return cls()
        except Exception as e:
            raise InstantiationError(cls, str(e)) from e

