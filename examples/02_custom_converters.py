"""
Example 02: Custom Converters

This example demonstrates registering type converters on a BeanConverter.
Converters run only where a value does not fit the target property's type.
"""

from decimal import Decimal
from enum import Enum

from bean_mapper import TypeConverter, bean_converter


class Gender(Enum):
    MALE = 0
    FEMALE = 1


class Person:
    """Request object"""
    name: str
    age: int
    gender: Gender
    height: float
    wealth: Decimal

    def __init__(self, name, age, gender, height, wealth):
        self.name = name
        self.age = age
        self.gender = gender
        self.height = height
        self.wealth = wealth


class PersonRecord:
    """Storage record"""
    name: str
    age: int
    gender: int
    height: Decimal
    wealth: str

    def __init__(self):
        self.name = ""
        self.age = 0
        self.gender = 0
        self.height = Decimal("0")
        self.wealth = "0"


class GenderToInt(TypeConverter[Gender, int]):
    def convert(self, source: Gender) -> int:
        return source.value


def decimal_to_plain_string(source: Decimal) -> str:
    return format(source, "f")


def main():
    # Build once, share everywhere
    converter = (
        bean_converter()
        .register_converter(GenderToInt())
        .register_converter(lambda v: Decimal(repr(v)), source_type=float, target_type=Decimal)
        .register_converter(decimal_to_plain_string)
        .build()
    )

    peter = Person("Peter", 34, Gender.MALE, 1.85, Decimal("123456789.87654321"))

    print("=== Custom Converters ===\n")

    record = converter.convert(peter, PersonRecord)
    print("1. Converted record:")
    for name in ("name", "age", "gender", "height", "wealth"):
        print(f"   {name:<7} {getattr(record, name)!r}")
    print()

    print("2. Cached copy plans:")
    print(f"   {len(converter.plan_cache)} plan(s): {converter.plan_for(Person, PersonRecord).field_names}")


if __name__ == "__main__":
    main()
