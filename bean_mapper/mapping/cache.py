"""Copy plan cache.

One cache per BeanConverter, keyed by (source type, target type). Entries are
never evicted. Reads are plain dict lookups; inserts take a lock and keep the
first plan stored, so racing builders all end up with the same object.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from bean_mapper.mapping.plan import CopyPlan


class PlanCache:
    """Grow-only, thread-safe cache of compiled copy plans."""

    def __init__(self) -> None:
        self._plans: dict[tuple[type, type], CopyPlan] = {}
        self._lock = threading.Lock()

    def get(self, source_type: type, target_type: type) -> CopyPlan | None:
        return self._plans.get((source_type, target_type))

    def get_or_build(
        self,
        source_type: type,
        target_type: type,
        build: Callable[[type, type], CopyPlan],
    ) -> CopyPlan:
        """Return the cached plan, compiling and storing it on first use.

        ``build`` runs outside the lock; two threads may compile the same
        pair, but only the first stored plan is ever returned.
        """
        key = (source_type, target_type)
        plan = self._plans.get(key)
        if plan is not None:
            return plan

        plan = build(source_type, target_type)
        with self._lock:
            return self._plans.setdefault(key, plan)

    def __contains__(self, key: object) -> bool:
        return key in self._plans

    def __len__(self) -> int:
        return len(self._plans)
