"""In-memory entity store, populated once and never mutated."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from types import MappingProxyType

from ..logging import get_logger
from .models import Author, Book

logger = get_logger(__name__)


class InMemoryEntityStore:
    """Entity store backed by tuples and id indexes built at construction."""

    def __init__(self, authors: Iterable[Author], books: Iterable[Book]):
        self._authors = tuple(authors)
        self._books = tuple(books)
        self._authors_by_id = MappingProxyType(_index_by_id(self._authors, "author"))
        self._books_by_id = MappingProxyType(_index_by_id(self._books, "book"))

        usernames = [author.username for author in self._authors]
        if len(set(usernames)) != len(usernames):
            raise ValueError("Author usernames must be unique")

        # Referential integrity is assumed, not enforced
        dangling = [book.id for book in self._books if book.author_id not in self._authors_by_id]
        if dangling:
            logger.warning("Books reference unknown authors", book_ids=dangling)

        logger.debug(
            "Entity store initialized",
            authors=len(self._authors),
            books=len(self._books),
        )

    def list_authors(self) -> Sequence[Author]:
        return self._authors

    def get_author(self, id: int) -> Author | None:
        return self._authors_by_id.get(id)

    def list_books(self) -> Sequence[Book]:
        return self._books

    def get_book(self, id: int) -> Book | None:
        return self._books_by_id.get(id)


def _index_by_id(records, kind: str) -> dict:
    index = {}
    for record in records:
        if record.id in index:
            raise ValueError(f"Duplicate {kind} id: {record.id}")
        index[record.id] = record
    return index
