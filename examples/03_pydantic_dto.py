"""
Example 03: Pydantic DTOs

This example demonstrates mapping a domain dataclass to a Pydantic response
model, with a renamed field and an excluded secret.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

from pydantic import BaseModel

from bean_mapper import bean_converter


@dataclass
class User:
    """Domain entity"""
    id: UUID
    username: str
    email: str
    password_hash: str


class UserResponse(BaseModel):
    """API response model"""
    id: str
    name: str
    email: str
    password_hash: str | None = None


def uuid_to_str(source: UUID) -> str:
    return str(source)


def main():
    converter = (
        bean_converter()
        .register_converter(uuid_to_str)
        .alias("username", "name")
        .exclude("password_hash")
        .build()
    )

    users = [
        User(uuid4(), "alice", "alice@example.com", "$2b$12$abc"),
        User(uuid4(), "bob", "bob@example.com", "$2b$12$def"),
    ]

    print("=== Pydantic DTOs ===\n")

    responses = converter.convert_all(users, UserResponse)
    for response in responses:
        print(f"   {response.model_dump()}")


if __name__ == "__main__":
    main()
