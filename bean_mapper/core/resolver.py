"""Per-property compatibility resolution.

Decides, for one runtime value and one declared target type, whether the value
is copied as-is, routed through a registered converter, or dropped to None.
"""

from __future__ import annotations

from typing import Any

from bean_mapper.core.assignability import is_assignable
from bean_mapper.core.exceptions import ConversionError
from bean_mapper.core.registry import ConverterRegistry, ResolvedConverter

# Marks a value that is copied without conversion
DIRECT = object()


class CompatibilityResolver:
    """Resolve property values against declared target types.

    Resolution order:
    1. None stays None
    2. value type assignable to the target type -> value unchanged
    3. first registered converter accepting the value and producing a
       compatible type -> converter(value)
    4. otherwise None (an unmappable property is not an error)
    """

    def __init__(self, registry: ConverterRegistry | None = None) -> None:
        self._registry = registry if registry is not None else ConverterRegistry()

    @property
    def registry(self) -> ConverterRegistry:
        return self._registry

    def select(self, value: Any, target_type: Any) -> ResolvedConverter | object | None:
        """Pick the resolution strategy without applying it.

        Returns the ``DIRECT`` sentinel for an as-is copy, the matching
        converter, or None when the value cannot be mapped.
        """
        value_type = type(value)
        if is_assignable(value_type, target_type):
            return DIRECT
        if not self._registry:
            return None
        return self._registry.find(value_type, target_type)

    def resolve(self, value: Any, target_type: Any, property_name: str = "<value>") -> Any:
        """Map ``value`` onto ``target_type``.

        Raises:
            ConversionError: If the selected converter raises.
        """
        if value is None:
            return None
        strategy = self.select(value, target_type)
        if strategy is DIRECT:
            return value
        if strategy is None:
            return None
        converter: ResolvedConverter = strategy  # type: ignore[assignment]
        try:
            return converter(value)
        except Exception as e:
            raise ConversionError(property_name, converter.func, str(e)) from e
