"""Token authentication for bookgraph."""

from .context import AuthenticationResult, Credentials, Identity
from .middleware import identity_dependency, resolve_identity
from .tokens import TokenService

__all__ = [
    "AuthenticationResult",
    "Credentials",
    "Identity",
    "TokenService",
    "identity_dependency",
    "resolve_identity",
]
