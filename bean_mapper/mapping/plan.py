"""Copy plan data classes.

Frozen dataclasses describing which properties two types share. A plan is
structural only: converter selection depends on runtime values and happens
on every copy.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from bean_mapper.core.config import BeanConverterConfig
from bean_mapper.mapping.protocol import PropertyIntrospector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldPlan:
    """A property present on both the source and the target type."""

    source_name: str
    target_name: str
    source_type: Any
    target_type: Any
    getter: Callable[[Any], Any]
    setter: Callable[[Any, Any], None]


@dataclass(frozen=True)
class CopyPlan:
    """Compiled copy plan for one (source type, target type) pair."""

    source_type: type
    target_type: type
    fields: tuple[FieldPlan, ...] = field(default_factory=tuple)

    @property
    def key(self) -> tuple[type, type]:
        return (self.source_type, self.target_type)

    @property
    def field_names(self) -> list[str]:
        return [f.target_name for f in self.fields]


def compile_plan(
    source_type: type,
    target_type: type,
    introspector: PropertyIntrospector,
    config: BeanConverterConfig | None = None,
) -> CopyPlan:
    """Pair the readable source properties with the writable target ones.

    Pairing is by name after applying ``config.aliases``; an aliased source
    property takes precedence over a source property that already carries
    the target name. Excluded target names and properties found on only one
    side are left out. Fields keep the target's declaration order.
    """
    config = config or BeanConverterConfig()

    sources = {d.name: d for d in introspector.list_properties(source_type) if d.readable}

    by_target = {name: name for name in sources if name not in config.aliases}
    by_target.update(
        {config.target_name(name): name for name in sources if name in config.aliases}
    )

    fields = []
    for target in introspector.list_properties(target_type):
        if not target.writable or target.name in config.exclude:
            continue
        source_name = by_target.get(target.name)
        if source_name is None:
            continue
        source = sources[source_name]
        fields.append(
            FieldPlan(
                source_name=source_name,
                target_name=target.name,
                source_type=source.declared_type,
                target_type=target.declared_type,
                getter=source.getter,  # type: ignore[arg-type]
                setter=target.setter,  # type: ignore[arg-type]
            )
        )

    logger.debug(
        "Compiled copy plan %s -> %s with %d fields",
        source_type.__qualname__,
        target_type.__qualname__,
        len(fields),
    )
    return CopyPlan(source_type=source_type, target_type=target_type, fields=tuple(fields))
