"""Read-only entity store interface."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .models import Author, Book


class EntityStore(Protocol):
    """Read-only access to authors and books.

    Lookups by id return ``None`` when nothing matches; that is the only
    failure mode a store exposes.
    """

    def list_authors(self) -> Sequence[Author]:
        """Return every author in insertion order."""
        ...

    def get_author(self, id: int) -> Author | None:
        """Return the author with the given id, or None."""
        ...

    def list_books(self) -> Sequence[Book]:
        """Return every book in insertion order."""
        ...

    def get_book(self, id: int) -> Book | None:
        """Return the book with the given id, or None."""
        ...
