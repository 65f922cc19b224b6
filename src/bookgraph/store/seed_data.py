"""
Seed records loaded into the store at process start.
"""

from __future__ import annotations

from .memory import InMemoryEntityStore
from .models import Author, Book

AUTHORS: tuple[Author, ...] = (
    Author(id=1, name="J.K. Rowling", username="jkrowling", password="password"),
    Author(id=2, name="Michael Crichton", username="michaelcrichton", password="password"),
)

BOOKS: tuple[Book, ...] = (
    Book(id=1, title="Harry Potter and the Sorcerer's Stone", author_id=1),
    Book(id=2, title="Jurassic Park", author_id=2),
)


def create_seeded_store() -> InMemoryEntityStore:
    """Build a store holding the bundled authors and books."""
    return InMemoryEntityStore(AUTHORS, BOOKS)
