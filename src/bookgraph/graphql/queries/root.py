"""
Root GraphQL query definitions
"""

import strawberry

from ...auth.context import Credentials
from ..context import resolve_operation
from ..types.auth import AuthenticationResult, AuthorCredentials
from ..types.author import Author
from ..types.book import Book


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def authenticate(
        self, info: strawberry.Info, credentials: AuthorCredentials
    ) -> AuthenticationResult:
        """Exchange author credentials for a token."""
        result = resolve_operation(
            info,
            "authenticate",
            credentials=Credentials(username=credentials.username, password=credentials.password),
        )
        return AuthenticationResult(token=result.token)

    @strawberry.field
    def books(self, info: strawberry.Info) -> list[Book]:
        """Get the books written by the current author."""
        return [Book.from_record(book) for book in resolve_operation(info, "books")]

    @strawberry.field
    def book(self, info: strawberry.Info, id: int) -> Book | None:
        """Get a book by ID."""
        record = resolve_operation(info, "book", id=id)
        return Book.from_record(record) if record else None

    @strawberry.field
    def authors(self, info: strawberry.Info) -> list[Author]:
        """Get all authors."""
        return [Author.from_record(author) for author in resolve_operation(info, "authors")]

    @strawberry.field
    def author(self, info: strawberry.Info, id: int) -> Author | None:
        """Get an author by ID."""
        record = resolve_operation(info, "author", id=id)
        return Author.from_record(record) if record else None
