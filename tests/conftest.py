"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from bookgraph.auth.context import Identity
from bookgraph.auth.tokens import TokenService
from bookgraph.resolvers import build_resolvers, create_data_access
from bookgraph.resolvers.layer import ResolverSet
from bookgraph.store import Author, Book, InMemoryEntityStore

SECRET_KEY = "test-secret-key-for-testing-only"


@pytest.fixture
def authors() -> list[Author]:
    return [
        Author(id=1, name="J.K. Rowling", username="jkrowling", password="password"),
        Author(id=2, name="Michael Crichton", username="michaelcrichton", password="hunter2"),
        Author(id=3, name="Ursula K. Le Guin", username="ursula", password="earthsea"),
    ]


@pytest.fixture
def books() -> list[Book]:
    return [
        Book(id=1, title="Harry Potter and the Sorcerer's Stone", author_id=1),
        Book(id=2, title="Jurassic Park", author_id=2),
        Book(id=3, title="Harry Potter and the Chamber of Secrets", author_id=1),
        Book(id=4, title="A Wizard of Earthsea", author_id=3),
        Book(id=5, title="Sphere", author_id=2),
    ]


@pytest.fixture
def store(authors: list[Author], books: list[Book]) -> InMemoryEntityStore:
    return InMemoryEntityStore(authors, books)


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(
        secret_key=SECRET_KEY,
        algorithm="HS256",
        issuer="test-bookgraph",
        audience="test-api",
    )


@pytest.fixture
def data_access(store: InMemoryEntityStore, tokens: TokenService) -> ResolverSet:
    return create_data_access(store, tokens)


@pytest.fixture
def resolvers(store: InMemoryEntityStore, tokens: TokenService) -> ResolverSet:
    """The production layer stack over the test store."""
    return build_resolvers(store, tokens)


@pytest.fixture
def rowling() -> Identity:
    return Identity(author_id=1)


@pytest.fixture
def crichton() -> Identity:
    return Identity(author_id=2)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
