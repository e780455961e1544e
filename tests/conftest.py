"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from bean_mapper.mapping.cache import PlanCache
from bean_mapper.mapping.introspection import DefaultIntrospector


@pytest.fixture
def plan_cache() -> PlanCache:
    """Fresh plan cache, so no test sees plans compiled by another."""
    return PlanCache()


@pytest.fixture
def spy_introspector() -> MagicMock:
    """DefaultIntrospector wrapped in a mock to count introspection calls."""
    return MagicMock(wraps=DefaultIntrospector())
