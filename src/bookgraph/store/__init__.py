"""Entity storage for authors and books."""

from .base import EntityStore
from .memory import InMemoryEntityStore
from .models import Author, Book
from .seed_data import create_seeded_store

__all__ = [
    "Author",
    "Book",
    "EntityStore",
    "InMemoryEntityStore",
    "create_seeded_store",
]
