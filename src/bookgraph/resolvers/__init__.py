"""Resolver sets and the layers composed over them."""

from .data_access import OPERATIONS, create_data_access
from .layer import Delegation, Layer, Override, Resolver, ResolverSet, override
from .masking import MaskSensitiveFields
from .ownership import DenyAccessToUnownedBooks
from .stack import build_resolvers, default_layers, describe_stack, resolve, stack_resolvers

__all__ = [
    "OPERATIONS",
    "Delegation",
    "DenyAccessToUnownedBooks",
    "Layer",
    "MaskSensitiveFields",
    "Override",
    "Resolver",
    "ResolverSet",
    "build_resolvers",
    "create_data_access",
    "default_layers",
    "describe_stack",
    "override",
    "resolve",
    "stack_resolvers",
]
