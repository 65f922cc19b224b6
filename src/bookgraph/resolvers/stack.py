"""
Composition of resolver layers.

``stack_resolvers`` folds layers over a base set from left to right. A later
layer sees, and may wrap, everything composed before it; earlier layers
never see later ones. The result is read-only and meant to be built once.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from ..auth.context import Identity
from ..auth.tokens import TokenService
from ..errors import CompositionError
from ..logging import get_logger
from ..store.base import EntityStore
from .data_access import create_data_access
from .layer import Delegation, Layer, ResolverSet
from .masking import DEFAULT_REDACTION_MARKER, MaskSensitiveFields
from .ownership import DenyAccessToUnownedBooks

logger = get_logger(__name__)


def stack_resolvers(base: ResolverSet, layers: Sequence[Layer]) -> ResolverSet:
    """Fold ``layers`` over ``base`` and return the composed resolver set.

    For each operation, the latest layer that overrides it wins and holds a
    reference to the set composed before it.

    Raises:
        CompositionError: If a layer overrides an operation that nothing
            beneath it defines
    """
    stack: ResolverSet = MappingProxyType(dict(base))

    for layer in layers:
        unknown = sorted(set(layer.overrides) - set(stack))
        if unknown:
            raise CompositionError(
                f"Layer '{layer.name}' overrides unknown operations: {', '.join(unknown)}"
            )

        stack = MappingProxyType({**stack, **layer.wrap(stack)})
        logger.debug(
            "Resolver layer applied",
            layer=layer.name,
            overrides=sorted(layer.overrides),
        )

    return stack


def describe_stack(
    operations: Sequence[str], layers: Sequence[Layer]
) -> dict[str, list[tuple[str, Delegation]]]:
    """List, per operation, the layers that wrap it from outermost to innermost."""
    chains: dict[str, list[tuple[str, Delegation]]] = {operation: [] for operation in operations}
    for layer in reversed(layers):
        for operation, spec in layer.overrides.items():
            if operation in chains:
                chains[operation].append((layer.name, spec.delegation))
    return chains


def resolve(
    resolvers: ResolverSet,
    operation: str,
    args: Mapping[str, Any] | None = None,
    identity: Identity | None = None,
) -> Any:
    """Invoke ``operation`` on the outermost resolver with a read-only copy of ``args``."""
    try:
        resolver = resolvers[operation]
    except KeyError:
        raise CompositionError(f"Unknown operation: {operation}") from None

    return resolver(MappingProxyType(dict(args or {})), identity)


def default_layers(redaction_marker: str = DEFAULT_REDACTION_MARKER) -> list[Layer]:
    """The production layer order: masking first, ownership checks outermost."""
    return [
        MaskSensitiveFields(marker=redaction_marker),
        DenyAccessToUnownedBooks(),
    ]


def build_resolvers(
    store: EntityStore,
    tokens: TokenService,
    layers: Sequence[Layer] | None = None,
) -> ResolverSet:
    """Build the data access set over ``store`` and compose ``layers`` on top."""
    if layers is None:
        layers = default_layers()

    resolvers = stack_resolvers(create_data_access(store, tokens), layers)
    logger.info("Resolver stack composed", layers=[layer.name for layer in layers])
    return resolvers
