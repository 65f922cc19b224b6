"""
Author GraphQL type definitions
"""

from __future__ import annotations

import strawberry

from ...store.models import Author as AuthorRecord


@strawberry.type
class Author:
    """Author type for GraphQL API."""

    id: int
    name: str
    username: str
    password: str

    @classmethod
    def from_record(cls, record: AuthorRecord) -> Author:
        return cls(
            id=record.id,
            name=record.name,
            username=record.username,
            password=record.password,
        )
