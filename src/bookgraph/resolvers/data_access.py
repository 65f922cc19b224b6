"""
Base resolvers: plain data access against the entity store.

These are the innermost resolvers of every stack. They ignore the caller's
identity and never fail beyond returning None for unknown ids.
"""

from __future__ import annotations

from types import MappingProxyType

from ..auth.context import AuthenticationResult, Credentials, Identity
from ..auth.tokens import TokenService
from ..logging import get_logger
from ..store.base import EntityStore
from ..store.models import Author, Book
from .layer import Args, ResolverSet

logger = get_logger(__name__)

OPERATIONS = ("authenticate", "books", "book", "authors", "author")


def create_data_access(store: EntityStore, tokens: TokenService) -> ResolverSet:
    """Build the base resolver set over ``store``, issuing tokens with ``tokens``."""

    def authenticate(args: Args, identity: Identity | None) -> AuthenticationResult:
        _ = identity  # Unused but required by the resolver interface
        credentials: Credentials = args["credentials"]

        author = next(
            (
                candidate
                for candidate in store.list_authors()
                if candidate.username == credentials.username
                and candidate.password == credentials.password
            ),
            None,
        )
        if author is None:
            logger.info("Authentication failed", username=credentials.username)
            return AuthenticationResult(token=None)

        logger.info("Author authenticated", author_id=author.id)
        return AuthenticationResult(token=tokens.issue_token(author))

    def books(args: Args, identity: Identity | None) -> list[Book]:
        return list(store.list_books())

    def book(args: Args, identity: Identity | None) -> Book | None:
        return store.get_book(args["id"])

    def authors(args: Args, identity: Identity | None) -> list[Author]:
        return list(store.list_authors())

    def author(args: Args, identity: Identity | None) -> Author | None:
        return store.get_author(args["id"])

    return MappingProxyType(
        {
            "authenticate": authenticate,
            "books": books,
            "book": book,
            "authors": authors,
            "author": author,
        }
    )
