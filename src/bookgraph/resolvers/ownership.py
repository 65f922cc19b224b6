"""Layer that keeps authors away from books they did not write."""

from __future__ import annotations

from ..auth.context import Identity
from ..errors import ForbiddenError, UnauthenticatedError
from ..logging import get_logger
from ..store.models import Book
from .layer import Args, Delegation, Layer, ResolverSet, override

logger = get_logger(__name__)


def require_identity(identity: Identity | None, operation: str) -> Identity:
    """Return ``identity`` or raise UnauthenticatedError if the caller is anonymous."""
    if identity is None:
        logger.info("Unauthenticated access denied", operation=operation)
        raise UnauthenticatedError()
    return identity


class DenyAccessToUnownedBooks(Layer):
    """Restrict ``books`` and ``book`` to the calling author's own books."""

    name = "deny-access-to-unowned-books"

    @override("books", Delegation.FILTERED)
    def books(self, previous: ResolverSet, args: Args, identity: Identity | None) -> list[Book]:
        caller = require_identity(identity, "books")
        results = previous["books"](args, identity)
        return [book for book in results if book.author_id == caller.author_id]

    @override("book", Delegation.FILTERED)
    def book(self, previous: ResolverSet, args: Args, identity: Identity | None) -> Book | None:
        caller = require_identity(identity, "book")

        book = previous["book"](args, identity)
        if book is None:
            return None

        if book.author_id != caller.author_id:
            logger.info(
                "Access denied to book",
                book_id=book.id,
                owner_id=book.author_id,
            )
            raise ForbiddenError()

        return book
