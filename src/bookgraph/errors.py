"""
Error kinds surfaced by resolvers and the composition engine.

Resolver errors carry an ``extensions`` mapping; the GraphQL executor copies
it onto the error it reports, so clients can branch on ``extensions.code``.
"""

from __future__ import annotations

from typing import ClassVar

UNAUTHENTICATED_MESSAGE = "This resource requires an authentication token"
ACCESS_DENIED_MESSAGE = "You are not authorized to access this resource"


class ResolverError(Exception):
    """Base class for policy failures raised inside resolvers."""

    code: ClassVar[str] = "INTERNAL_SERVER_ERROR"
    default_message: ClassVar[str] = "Resolver failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)

    @property
    def extensions(self) -> dict[str, str]:
        return {"code": self.code}


class UnauthenticatedError(ResolverError):
    """Raised when an operation requires an identity and none was supplied."""

    code = "UNAUTHENTICATED"
    default_message = UNAUTHENTICATED_MESSAGE


class ForbiddenError(ResolverError):
    """Raised when the caller is known but may not see the requested resource."""

    code = "FORBIDDEN"
    default_message = ACCESS_DENIED_MESSAGE


class TokenVerificationError(Exception):
    """Raised when a token is malformed, expired or signed with another secret."""

    pass


class CompositionError(Exception):
    """Raised when a layer stack cannot be composed."""

    pass
