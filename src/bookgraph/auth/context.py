"""Authentication values passed between the request boundary and resolvers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, rebuilt from the token on every request."""

    author_id: int


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


@dataclass(frozen=True)
class AuthenticationResult:
    """Outcome of ``authenticate``; ``token`` is None when no author matched."""

    token: str | None

    @property
    def succeeded(self) -> bool:
        return self.token is not None
