"""Bean converter facade.

BeanConverter copies same-named properties from a source object onto a target
object, converting values through registered TypeConverters where the types
differ. Copy plans are cached per (source type, target type), so hold one
long-lived instance per set of converters and share it between threads.

Unmappable properties do not raise: a source value that is neither
assignable to the target property's declared type nor accepted by any
registered converter is written to the target as None. Callers relying on
partial mapping depend on this.

A copy either completes or leaves the target as it was. Values are resolved
before the first write; Pydantic targets are first written on a scratch
``model_copy()`` so assignment validation runs before the real target is
touched, and a write the target rejects undoes the writes before it.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from bean_mapper.core.config import BeanConverterConfig
from bean_mapper.core.exceptions import NullArgumentError, PropertyWriteError
from bean_mapper.core.registry import ConverterRegistry
from bean_mapper.core.resolver import CompatibilityResolver
from bean_mapper.mapping.cache import PlanCache
from bean_mapper.mapping.instance import DefaultInstanceFactory
from bean_mapper.mapping.introspection import DefaultIntrospector, is_pydantic_model
from bean_mapper.mapping.plan import CopyPlan, FieldPlan, compile_plan
from bean_mapper.mapping.protocol import InstanceFactory, PropertyIntrospector

T = TypeVar("T")

_UNSET = object()


class BeanConverter:
    """Property copier with pluggable type conversion.

    Args:
        registry: Converters consulted when a value is not directly
            assignable. Defaults to an empty registry.
        config: Property pairing options.
        introspector: Enumerates the properties of a type.
        instance_factory: Creates empty targets for ``convert``.
        plan_cache: Copy plan cache owned by this converter.
    """

    def __init__(
        self,
        registry: ConverterRegistry | None = None,
        config: BeanConverterConfig | None = None,
        introspector: PropertyIntrospector | None = None,
        instance_factory: InstanceFactory | None = None,
        plan_cache: PlanCache | None = None,
    ) -> None:
        self._config = config or BeanConverterConfig()
        self._resolver = CompatibilityResolver(registry)
        self._introspector = introspector or DefaultIntrospector(
            include_private=self._config.include_private
        )
        self._instance_factory = instance_factory or DefaultInstanceFactory()
        self._plans = plan_cache if plan_cache is not None else PlanCache()

    @property
    def registry(self) -> ConverterRegistry:
        return self._resolver.registry

    @property
    def config(self) -> BeanConverterConfig:
        return self._config

    @property
    def plan_cache(self) -> PlanCache:
        return self._plans

    def copy_properties(self, source: Any, target: Any) -> None:
        """Copy the property values of ``source`` into ``target``.

        All values are read and resolved before the first write, so a failing
        converter leaves ``target`` untouched. A value the target refuses to
        accept leaves it untouched as well.

        Raises:
            NullArgumentError: If ``source`` or ``target`` is None.
            ConversionError: If a registered converter raises.
            PropertyWriteError: If the target rejects a resolved value.
        """
        if source is None:
            raise NullArgumentError("source")
        if target is None:
            raise NullArgumentError("target")

        plan = self.plan_for(type(source), type(target))
        resolve = self._resolver.resolve
        resolved = [
            (f, resolve(f.getter(source), f.target_type, f.target_name))
            for f in plan.fields
        ]
        if is_pydantic_model(type(target)):
            _write_all(target.model_copy(), resolved)
        _write_all(target, resolved)

    def convert(self, source: Any, target_type: type[T]) -> T:
        """Create a ``target_type`` instance and copy ``source`` into it.

        Raises:
            InstantiationError: If ``target_type`` cannot be created without
                arguments. Nothing is copied in that case.
        """
        result = self._instance_factory.new_instance(target_type)
        self.copy_properties(source, result)
        return result

    def convert_all(self, sources: Iterable[Any], target_type: type[T]) -> list[T]:
        """Convert every source, in order."""
        return [self.convert(source, target_type) for source in sources]

    def plan_for(self, source_type: type, target_type: type) -> CopyPlan:
        """Cached copy plan for a type pair, compiled on first use."""
        return self._plans.get_or_build(source_type, target_type, self._compile)

    def _compile(self, source_type: type, target_type: type) -> CopyPlan:
        return compile_plan(source_type, target_type, self._introspector, self._config)


def _write_all(target: Any, resolved: list[tuple[FieldPlan, Any]]) -> None:
    written: list[tuple[FieldPlan, Any]] = []
    for field, value in resolved:
        previous = getattr(target, field.target_name, _UNSET)
        try:
            field.setter(target, value)
        except Exception as e:
            _restore(target, written)
            raise PropertyWriteError(field.target_name, str(e)) from e
        written.append((field, previous))


def _restore(target: Any, written: list[tuple[FieldPlan, Any]]) -> None:
    for field, previous in reversed(written):
        if previous is _UNSET:
            delattr(target, field.target_name)
        else:
            field.setter(target, previous)
