"""
Example 01: Copying Properties

This example demonstrates plain property copying with the bean_utils helpers,
which need no setup and apply no custom conversion.
"""

from dataclasses import dataclass
from decimal import Decimal

from bean_mapper import bean_utils


@dataclass
class Employee:
    """Domain entity"""
    name: str
    title: str
    salary: Decimal
    manager_id: int | None = None


@dataclass
class EmployeeRow:
    """Storage row with the same shape"""
    name: str = ""
    title: str = ""
    salary: Decimal = Decimal("0")
    manager_id: int | None = None


@dataclass
class EmployeeCard:
    """View model with a differently typed field"""
    name: str = ""
    salary: str = "hidden"


def main():
    alice = Employee(name="Alice", title="Engineer", salary=Decimal("8200.00"), manager_id=7)

    print("=== Copying Properties ===\n")

    # Convert into a new instance
    print("1. Convert to a new row:")
    row = bean_utils.convert(alice, EmployeeRow)
    print(f"   {row}\n")

    # Copy onto an existing instance
    print("2. Copy onto an existing row:")
    existing = EmployeeRow(name="Bob", title="Manager", salary=Decimal("9100.00"))
    bean_utils.copy_properties(alice, existing)
    print(f"   {existing}\n")

    # Mismatched types are written as None, not raised
    print("3. Mismatched property types:")
    card = bean_utils.convert(alice, EmployeeCard)
    print(f"   name={card.name!r} salary={card.salary!r}\n")


if __name__ == "__main__":
    main()
