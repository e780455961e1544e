"""bean_mapper exception hierarchy.

Unmappable properties are deliberately NOT represented here: a property that
cannot be copied or converted resolves to ``None`` instead of raising.
"""

from __future__ import annotations

from typing import Any


class BeanMapperError(Exception):
    """Base exception for all bean_mapper errors."""


# --- Registration ---


class RegistrationError(BeanMapperError):
    """Base for converter registration errors."""


class ConverterRegistrationError(RegistrationError):
    """Raised when a converter's source or target type cannot be resolved."""

    def __init__(self, converter: Any, detail: str) -> None:
        self.converter = converter
        name = getattr(converter, "__qualname__", None) or type(converter).__qualname__
        super().__init__(f"Cannot register converter '{name}': {detail}")


# --- Introspection ---


class IntrospectionError(BeanMapperError):
    """Raised when the properties of a type cannot be enumerated."""

    def __init__(self, target_class: type, detail: str) -> None:
        self.target_class = target_class
        super().__init__(f"Cannot introspect {target_class.__qualname__}: {detail}")


# --- Mapping ---


class MappingError(BeanMapperError):
    """Base for copy/convert errors."""


class NullArgumentError(MappingError, ValueError):
    """Raised when copy_properties receives a None source or target."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"{argument} must not be None")


class InstantiationError(MappingError):
    """Raised when the target type of convert cannot be default-constructed."""

    def __init__(self, target_class: type, detail: str) -> None:
        self.target_class = target_class
        super().__init__(f"Failed to create instance of {target_class.__qualname__}: {detail}")


class ConversionError(MappingError):
    """Raised when a registered converter fails on a property value."""

    def __init__(self, property_name: str, converter: Any, detail: str) -> None:
        self.property_name = property_name
        self.converter = converter
        super().__init__(f"Converter failed for property '{property_name}': {detail}")


class PropertyWriteError(MappingError):
    """Raised when the target rejects a resolved value."""

    def __init__(self, property_name: str, detail: str) -> None:
        self.property_name = property_name
        super().__init__(f"Cannot write property '{property_name}': {detail}")
