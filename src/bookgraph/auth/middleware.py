"""Identity extraction for FastAPI requests."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import HTTPException, Request

from ..errors import TokenVerificationError
from ..logging import get_logger, set_author_context
from .context import Identity
from .tokens import TokenService

logger = get_logger(__name__)


def resolve_identity(tokens: TokenService, token: str | None) -> Identity | None:
    """
    Turn a raw header value into an identity.

    A missing or empty token yields an anonymous request (None). A token that
    fails verification rejects the request with 401 instead of falling back
    to anonymous access.
    """
    if not token:
        set_author_context(None)
        return None

    try:
        identity = tokens.verify_token(token)
    except TokenVerificationError as e:
        logger.warning("Token verification failed", error=str(e))
        raise HTTPException(
            status_code=401,
            detail=str(e),
            headers={"WWW-Authenticate": "Token"},
        ) from e

    set_author_context(identity.author_id)
    logger.debug("Request authenticated", author_id=identity.author_id)
    return identity


def identity_dependency(
    tokens: TokenService, header_name: str = "Token"
) -> Callable[[Request], Awaitable[Identity | None]]:
    """Build a FastAPI dependency that reads ``header_name`` and verifies it."""

    async def get_identity(request: Request) -> Identity | None:
        identity = resolve_identity(tokens, request.headers.get(header_name))
        # Request state is shared with LoggingContextMiddleware, context variables are not
        request.state.author_id = identity.author_id if identity else None
        return identity

    return get_identity
