"""Entity records held by the store."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Author:
    """An author; ``password`` is a plaintext credential."""

    id: int
    name: str
    username: str
    password: str


@dataclass(frozen=True)
class Book:
    id: int
    title: str
    author_id: int
