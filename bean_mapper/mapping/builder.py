"""BeanConverter builder DSL.

Provides a fluent builder for registering converters and pairing options:

    converter = (
        bean_converter()
        .register_converter(gender_to_int)
        .register_converter(Decimal, source_type=float)
        .alias("username", "name")
        .exclude("password")
        .build()
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from bean_mapper.core.config import BeanConverterConfig
from bean_mapper.core.registry import ConverterRegistry, ResolvedConverter, resolve_converter
from bean_mapper.mapping.cache import PlanCache
from bean_mapper.mapping.converter import BeanConverter
from bean_mapper.mapping.protocol import InstanceFactory, PropertyIntrospector

logger = logging.getLogger(__name__)


def bean_converter() -> BeanConverterBuilder:
    """Entry point for the converter builder DSL."""
    return BeanConverterBuilder()


class BeanConverterBuilder:
    """Fluent builder for BeanConverter instances."""

    def __init__(self) -> None:
        self._converters: list[ResolvedConverter] = []
        self._exclude: set[str] = set()
        self._aliases: dict[str, str] = {}
        self._include_private = False
        self._introspector: PropertyIntrospector | None = None
        self._instance_factory: InstanceFactory | None = None
        self._plan_cache: PlanCache | None = None

    def register_converter(
        self,
        converter: Callable[[Any], Any],
        source_type: Any = None,
        target_type: Any = None,
    ) -> BeanConverterBuilder:
        """Register a converter, resolving its declared types immediately.

        Earlier registrations take precedence when several converters fit
        the same value and target.

        Raises:
            ConverterRegistrationError: If the types cannot be resolved.
        """
        resolved = resolve_converter(
            converter,
            source_type=source_type,
            target_type=target_type,
            order=len(self._converters),
        )
        self._converters.append(resolved)
        logger.debug(
            "Registered converter #%d: %r -> %r",
            resolved.order,
            resolved.source_type,
            resolved.target_type,
        )
        return self

    def exclude(self, *names: str) -> BeanConverterBuilder:
        """Never write the given target properties."""
        self._exclude.update(names)
        return self

    def alias(self, source_name: str, target_name: str) -> BeanConverterBuilder:
        """Copy source property ``source_name`` into ``target_name``."""
        self._aliases[source_name] = target_name
        return self

    def include_private(self, enabled: bool = True) -> BeanConverterBuilder:
        """Also copy ``_``-prefixed attributes."""
        self._include_private = enabled
        return self

    def introspector(self, introspector: PropertyIntrospector) -> BeanConverterBuilder:
        """Replace the default property introspector."""
        self._introspector = introspector
        return self

    def instance_factory(self, factory: InstanceFactory) -> BeanConverterBuilder:
        """Replace the default instance factory used by ``convert``."""
        self._instance_factory = factory
        return self

    def plan_cache(self, cache: PlanCache) -> BeanConverterBuilder:
        """Use a specific plan cache instead of a fresh one."""
        self._plan_cache = cache
        return self

    def build(self) -> BeanConverter:
        """Freeze the registrations into a ready BeanConverter."""
        config = BeanConverterConfig(
            exclude=frozenset(self._exclude),
            aliases=dict(self._aliases),
            include_private=self._include_private,
        )
        return BeanConverter(
            registry=ConverterRegistry(self._converters),
            config=config,
            introspector=self._introspector,
            instance_factory=self._instance_factory,
            plan_cache=self._plan_cache,
        )
