"""Unit tests for copy plan compilation and PlanCache."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from bean_mapper.core.config import BeanConverterConfig
from bean_mapper.mapping.cache import PlanCache
from bean_mapper.mapping.introspection import DefaultIntrospector
from bean_mapper.mapping.plan import CopyPlan, FieldPlan, compile_plan


@dataclass
class Account:
    id: int
    username: str
    balance: float
    password: str


@dataclass
class AccountView:
    name: str = ""
    balance: Decimal = Decimal("0")
    id: int = 0
    password: str = ""
    created: str = ""


class ReadOnlyView:
    def __init__(self) -> None:
        self._id = 0

    @property
    def id(self) -> int:
        return self._id


def _compile(config: BeanConverterConfig | None = None) -> CopyPlan:
    return compile_plan(Account, AccountView, DefaultIntrospector(), config)


class TestCompilePlan:
    def test_pairs_by_name_in_target_order(self) -> None:
        plan = _compile()
        assert plan.field_names == ["balance", "id", "password"]
        assert plan.key == (Account, AccountView)

    def test_records_declared_types(self) -> None:
        balance = _compile().fields[0]
        assert balance.source_type is float
        assert balance.target_type is Decimal

    def test_alias(self) -> None:
        plan = _compile(BeanConverterConfig(aliases={"username": "name"}))
        assert plan.field_names == ["name", "balance", "id", "password"]
        assert plan.fields[0].source_name == "username"

    def test_alias_takes_precedence_over_same_name(self) -> None:
        plan = _compile(BeanConverterConfig(aliases={"username": "password"}))
        password = next(f for f in plan.fields if f.target_name == "password")
        assert password.source_name == "username"

    def test_exclude(self) -> None:
        plan = _compile(BeanConverterConfig(exclude=frozenset({"password"})))
        assert plan.field_names == ["balance", "id"]

    def test_read_only_target_skipped(self) -> None:
        plan = compile_plan(Account, ReadOnlyView, DefaultIntrospector())
        assert plan.fields == ()

    def test_plan_frozen(self) -> None:
        plan = _compile()
        with pytest.raises(AttributeError):
            plan.fields = ()  # type: ignore[misc]
        with pytest.raises(AttributeError):
            plan.fields[0].target_name = "x"  # type: ignore[misc]


def _plan(source: type = Account, target: type = AccountView) -> CopyPlan:
    return CopyPlan(source_type=source, target_type=target, fields=())


class TestPlanCache:
    def test_builds_once(self, plan_cache: PlanCache) -> None:
        build = MagicMock(side_effect=lambda s, t: _plan(s, t))
        first = plan_cache.get_or_build(Account, AccountView, build)
        second = plan_cache.get_or_build(Account, AccountView, build)
        assert first is second
        build.assert_called_once_with(Account, AccountView)

    def test_keyed_by_ordered_pair(self, plan_cache: PlanCache) -> None:
        forward = plan_cache.get_or_build(Account, AccountView, _plan)
        backward = plan_cache.get_or_build(AccountView, Account, _plan)
        assert forward is not backward
        assert len(plan_cache) == 2
        assert (Account, AccountView) in plan_cache
        assert (AccountView, Account) in plan_cache

    def test_get_missing(self, plan_cache: PlanCache) -> None:
        assert plan_cache.get(Account, AccountView) is None
        assert len(plan_cache) == 0

    def test_build_error_not_cached(self, plan_cache: PlanCache) -> None:
        def fail(source: type, target: type) -> CopyPlan:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            plan_cache.get_or_build(Account, AccountView, fail)
        assert len(plan_cache) == 0

    def test_racing_builders_share_first_plan(self, plan_cache: PlanCache) -> None:
        barrier = threading.Barrier(2, timeout=5)
        built: list[CopyPlan] = []

        def slow_build(source: type, target: type) -> CopyPlan:
            plan = _plan(source, target)
            built.append(plan)
            barrier.wait()
            return plan

        with ThreadPoolExecutor(max_workers=2) as pool:
            futures = [
                pool.submit(plan_cache.get_or_build, Account, AccountView, slow_build)
                for _ in range(2)
            ]
            results = [f.result() for f in futures]

        assert len(built) == 2
        assert results[0] is results[1]
        assert results[0] in built
        assert plan_cache.get(Account, AccountView) is results[0]

    def test_field_plan_holds_accessors(self) -> None:
        field_plan = _compile().fields[1]
        assert isinstance(field_plan, FieldPlan)
        account = Account(7, "alice", 1.5, "pw")
        view = AccountView()
        field_plan.setter(view, field_plan.getter(account))
        assert view.id == 7
