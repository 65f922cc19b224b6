"""
Book GraphQL type definitions
"""

from __future__ import annotations

import strawberry

from ...store.models import Book as BookRecord


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    id: int
    title: str
    author_id: int

    @classmethod
    def from_record(cls, record: BookRecord) -> Book:
        return cls(id=record.id, title=record.title, author_id=record.author_id)
