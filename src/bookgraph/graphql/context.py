"""
Access to the composed resolvers from GraphQL field resolvers
"""

from typing import Any

import strawberry

from ..auth.context import Identity
from ..logging import get_logger
from ..resolvers.layer import ResolverSet
from ..resolvers.stack import resolve

logger = get_logger(__name__)


def get_identity_from_info(info: strawberry.Info) -> Identity | None:
    """Identity attached to the request context, or None for anonymous callers."""
    return info.context.get("identity")


def get_resolvers_from_info(info: strawberry.Info) -> ResolverSet:
    resolvers = info.context.get("resolvers")
    if resolvers is None:
        logger.error("Resolver stack not found in GraphQL context")
        raise RuntimeError("GraphQL context is missing the resolver stack")
    return resolvers


def resolve_operation(info: strawberry.Info, operation: str, **args: Any) -> Any:
    """Run ``operation`` through the composed resolver stack for this request."""
    return resolve(
        get_resolvers_from_info(info),
        operation,
        args,
        get_identity_from_info(info),
    )
