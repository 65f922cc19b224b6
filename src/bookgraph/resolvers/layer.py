"""
Resolver sets and the layer protocol.

A resolver set maps operation names to resolvers, each called as
``resolver(args, identity)``. A layer wraps the set beneath it: every method
it marks with :func:`override` replaces one operation and receives the
previous set, so it can call through, filter, or refuse.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar

from ..auth.context import Identity

Args = Mapping[str, Any]
Resolver = Callable[[Args, Identity | None], Any]
ResolverSet = Mapping[str, Resolver]


class Delegation(Enum):
    """How much of the previous layer's behavior an override keeps."""

    FULL = "full"  # always calls through; every record is returned, possibly transformed
    FILTERED = "filtered"  # calls through, but may drop results or deny the call
    REPLACED = "replaced"  # never calls through


@dataclass(frozen=True)
class Override:
    operation: str
    delegation: Delegation
    handler: Callable[..., Any]


def override(operation: str, delegation: Delegation) -> Callable[[Callable], Callable]:
    """Mark a layer method as the replacement for ``operation``.

    The method is called as ``method(self, previous, args, identity)``.
    """

    def decorator(fn: Callable) -> Callable:
        fn.__layer_override__ = Override(operation, delegation, fn)  # type: ignore[attr-defined]
        return fn

    return decorator


class Layer:
    """Base class for resolver middleware layers.

    Subclasses declare overrides with :func:`override`; they are collected
    when the subclass is created and exposed through ``overrides``.
    """

    name: ClassVar[str] = "layer"
    overrides: ClassVar[Mapping[str, Override]] = MappingProxyType({})

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        if "name" not in vars(cls):
            cls.name = cls.__name__

        collected = dict(cls.overrides)
        declared: set[str] = set()
        for attr in vars(cls).values():
            spec = getattr(attr, "__layer_override__", None)
            if spec is None:
                continue
            if spec.operation in declared:
                raise TypeError(f"{cls.__name__} overrides '{spec.operation}' more than once")
            declared.add(spec.operation)
            collected[spec.operation] = spec

        cls.overrides = MappingProxyType(collected)

    def delegation_for(self, operation: str) -> Delegation | None:
        """Declared delegation for ``operation``, or None if not overridden."""
        spec = self.overrides.get(operation)
        return spec.delegation if spec else None

    def wrap(self, previous: ResolverSet) -> dict[str, Resolver]:
        """Produce this layer's resolvers, each bound to ``previous``."""
        return {operation: self._bind(spec, previous) for operation, spec in self.overrides.items()}

    def _bind(self, spec: Override, previous: ResolverSet) -> Resolver:
        handler = spec.handler.__get__(self, type(self))

        def resolver(args: Args, identity: Identity | None) -> Any:
            return handler(previous, args, identity)

        resolver.__name__ = spec.operation
        resolver.__qualname__ = f"{type(self).__name__}.{spec.operation}"
        return resolver

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} overrides={sorted(self.overrides)}>"
