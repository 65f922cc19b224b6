"""
Authentication GraphQL types
"""

import strawberry


@strawberry.input
class AuthorCredentials:
    """Username and password of an author."""

    username: str
    password: str


@strawberry.type
class AuthenticationResult:
    """Result of an authentication attempt; token is null when credentials do not match."""

    token: str | None
