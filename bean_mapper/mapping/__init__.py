"""Mapping layer - copy properties between typed objects."""

from __future__ import annotations

from bean_mapper.mapping.builder import BeanConverterBuilder, bean_converter
from bean_mapper.mapping.cache import PlanCache
from bean_mapper.mapping.converter import BeanConverter
from bean_mapper.mapping.instance import DefaultInstanceFactory
from bean_mapper.mapping.introspection import DefaultIntrospector
from bean_mapper.mapping.plan import CopyPlan, FieldPlan, compile_plan
from bean_mapper.mapping.protocol import (
    InstanceFactory,
    PropertyDescriptor,
    PropertyIntrospector,
)

__all__ = [
    "BeanConverter",
    "BeanConverterBuilder",
    "bean_converter",
    "PlanCache",
    "CopyPlan",
    "FieldPlan",
    "compile_plan",
    "DefaultIntrospector",
    "DefaultInstanceFactory",
    "PropertyDescriptor",
    "PropertyIntrospector",
    "InstanceFactory",
]
