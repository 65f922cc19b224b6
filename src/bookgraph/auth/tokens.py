"""Signed token issuance and verification for authors."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import InvalidTokenError

from ..config import DEFAULT_JWT_SECRET, Settings
from ..errors import TokenVerificationError
from ..logging import get_logger
from ..store.models import Author
from .context import Identity

logger = get_logger(__name__)


class TokenService:
    """Issues and verifies HMAC-signed JWTs naming an author.

    Tokens carry only the author id as ``sub``; credentials never enter the
    payload. Without an expiry the token is a pure function of the author id
    and the secret.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "bookgraph",
        audience: str = "bookgraph-api",
        expiry_seconds: int | None = None,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.audience = audience
        self.expiry_seconds = expiry_seconds

    @classmethod
    def from_settings(cls, config: Settings) -> TokenService:
        if config.jwt_secret == DEFAULT_JWT_SECRET:
            if config.is_production:
                raise RuntimeError(
                    "The default JWT secret cannot be used in production. "
                    "Set BOOKGRAPH_JWT_SECRET."
                )
            logger.warning(
                "Using the default JWT secret; set BOOKGRAPH_JWT_SECRET outside development",
                environment=config.environment,
            )

        return cls(
            secret_key=config.jwt_secret,
            algorithm=config.jwt_algorithm,
            issuer=config.jwt_issuer,
            audience=config.jwt_audience,
            expiry_seconds=config.token_expiry_seconds,
        )

    def issue_token(self, author: Author) -> str:
        """Issue a token identifying the given author."""
        payload: dict = {
            "sub": str(author.id),
            "iss": self.issuer,
            "aud": self.audience,
        }

        if self.expiry_seconds is not None:
            now = datetime.now(UTC)
            payload["iat"] = now
            payload["exp"] = now + timedelta(seconds=self.expiry_seconds)

        logger.debug("Issued token", subject=author.id)
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Identity:
        """Verify a token and return the identity it names.

        Raises:
            TokenVerificationError: If the token is malformed, expired, signed
                with another key or does not name an author id
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
                options={"require": ["sub"]},
            )
        except InvalidTokenError as e:
            raise TokenVerificationError("Invalid token") from e

        try:
            author_id = int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise TokenVerificationError("Token subject is not an author id") from e

        return Identity(author_id=author_id)
