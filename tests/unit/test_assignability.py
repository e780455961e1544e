"""Unit tests for is_assignable."""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Annotated, Any, Literal, NewType, Optional, TypeVar, Union

from bean_mapper.core.assignability import is_assignable, is_wildcard


class Animal:
    pass


class Dog(Animal):
    pass


class Color(Enum):
    RED = 1


class Level(IntEnum):
    LOW = 1


UserId = NewType("UserId", int)
AnimalT = TypeVar("AnimalT", bound=Animal)
Unbound = TypeVar("Unbound")


class TestBasicRules:
    def test_reflexive(self) -> None:
        assert is_assignable(str, str)
        assert is_assignable(Decimal, Decimal)
        assert is_assignable(Animal, Animal)

    def test_subclass_to_base(self) -> None:
        assert is_assignable(Dog, Animal)

    def test_base_to_subclass_rejected(self) -> None:
        assert not is_assignable(Animal, Dog)

    def test_unrelated_types_rejected(self) -> None:
        assert not is_assignable(str, int)
        assert not is_assignable(Color, int)
        assert not is_assignable(float, Decimal)

    def test_int_enum_is_an_int(self) -> None:
        assert is_assignable(Level, int)


class TestWildcards:
    def test_any_target_accepts_everything(self) -> None:
        assert is_assignable(Dog, Any)
        assert is_assignable(Color, object)

    def test_missing_annotation_accepts_everything(self) -> None:
        assert is_assignable(str, None)
        assert is_wildcard(None)

    def test_any_source_only_fits_wildcards(self) -> None:
        assert not is_assignable(Any, int)
        assert is_assignable(Any, Any)


class TestNumericPromotion:
    def test_int_widens_to_float_and_complex(self) -> None:
        assert is_assignable(int, float)
        assert is_assignable(int, complex)
        assert is_assignable(float, complex)

    def test_bool_widens_to_numbers(self) -> None:
        assert is_assignable(bool, int)
        assert is_assignable(bool, float)

    def test_narrowing_rejected(self) -> None:
        assert not is_assignable(float, int)
        assert not is_assignable(complex, float)
        assert not is_assignable(int, bool)

    def test_numeric_abcs(self) -> None:
        assert is_assignable(int, numbers.Integral)
        assert is_assignable(float, numbers.Real)
        assert not is_assignable(float, numbers.Integral)


class TestTypingConstructs:
    def test_optional_target(self) -> None:
        assert is_assignable(int, Optional[int])
        assert is_assignable(int, Optional[float])
        assert not is_assignable(str, Optional[int])

    def test_union_target(self) -> None:
        assert is_assignable(str, Union[int, str])
        assert is_assignable(str, int | str)
        assert not is_assignable(bytes, int | str)

    def test_union_source_needs_every_member(self) -> None:
        assert is_assignable(Union[int, bool], float)
        assert not is_assignable(Union[int, str], int)

    def test_none_type(self) -> None:
        assert is_assignable(type(None), Optional[int])
        assert not is_assignable(type(None), int)
        assert not is_assignable(int, type(None))

    def test_generic_compares_origin(self) -> None:
        assert is_assignable(list, list[int])
        assert is_assignable(list[str], list[int])
        assert is_assignable(list, Sequence[int])
        assert not is_assignable(dict, list[int])

    def test_annotated_unwrapped(self) -> None:
        assert is_assignable(int, Annotated[int, "id"])
        assert is_assignable(Annotated[Dog, "pet"], Animal)

    def test_new_type_unwrapped(self) -> None:
        assert is_assignable(int, UserId)
        assert not is_assignable(str, UserId)

    def test_type_var_uses_bound(self) -> None:
        assert is_assignable(Dog, AnimalT)
        assert not is_assignable(str, AnimalT)
        assert is_assignable(str, Unbound)

    def test_special_forms_rejected(self) -> None:
        assert not is_assignable(str, Literal["a"])
