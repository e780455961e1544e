"""bean_mapper - property copying between typed objects with pluggable conversion."""

from __future__ import annotations

from bean_mapper import bean_utils
from bean_mapper.core.assignability import is_assignable
from bean_mapper.core.config import BeanConverterConfig
from bean_mapper.core.exceptions import (
    BeanMapperError,
    ConversionError,
    ConverterRegistrationError,
    InstantiationError,
    IntrospectionError,
    MappingError,
    NullArgumentError,
    PropertyWriteError,
    RegistrationError,
)
from bean_mapper.core.registry import (
    ConverterRegistry,
    ResolvedConverter,
    TypeConverter,
    resolve_converter,
)
from bean_mapper.core.resolver import CompatibilityResolver
from bean_mapper.mapping.builder import BeanConverterBuilder, bean_converter
from bean_mapper.mapping.cache import PlanCache
from bean_mapper.mapping.converter import BeanConverter

__all__ = [
    # Facade
    "BeanConverter",
    "BeanConverterBuilder",
    "bean_converter",
    "bean_utils",
    # Config
    "BeanConverterConfig",
    # Conversion
    "TypeConverter",
    "ResolvedConverter",
    "ConverterRegistry",
    "resolve_converter",
    "CompatibilityResolver",
    "is_assignable",
    # Caching
    "PlanCache",
    # Exceptions
    "BeanMapperError",
    "RegistrationError",
    "ConverterRegistrationError",
    "IntrospectionError",
    "MappingError",
    "NullArgumentError",
    "InstantiationError",
    "ConversionError",
    "PropertyWriteError",
]
