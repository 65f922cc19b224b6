"""Tests for the GraphQL schema executed against the composed resolvers."""

import pytest

from bookgraph.errors import ForbiddenError, UnauthenticatedError
from bookgraph.graphql.schema import schema, validate_schema

AUTHENTICATE = """
query Authenticate($username: String!, $password: String!) {
  authenticate(credentials: {username: $username, password: $password}) {
    token
  }
}
"""

BOOKS = "query { books { id title authorId } }"
BOOK = "query Book($id: Int!) { book(id: $id) { id title authorId } }"
AUTHORS = "query { authors { id name username password } }"
AUTHOR = "query Author($id: Int!) { author(id: $id) { id username password } }"


@pytest.fixture
def execute(resolvers):
    def run(query, identity=None, **variables):
        return schema.execute_sync(
            query,
            variable_values=variables or None,
            context_value={"identity": identity, "resolvers": resolvers},
        )

    return run


class TestSchemaShape:
    def test_validate_schema(self):
        validate_schema()

    def test_field_names(self):
        sdl = schema.as_str()

        assert "authenticate(credentials: AuthorCredentials!): AuthenticationResult!" in sdl
        assert "book(id: Int!): Book" in sdl
        assert "books: [Book!]!" in sdl
        assert "authors: [Author!]!" in sdl
        assert "author(id: Int!): Author" in sdl
        assert "authorId: Int!" in sdl
        assert "token: String\n" in sdl


class TestAuthenticate:
    def test_valid_credentials(self, execute, tokens):
        result = execute(AUTHENTICATE, username="jkrowling", password="password")

        assert result.errors is None
        token = result.data["authenticate"]["token"]
        assert tokens.verify_token(token).author_id == 1

    def test_invalid_credentials(self, execute):
        result = execute(AUTHENTICATE, username="jkrowling", password="wrong")

        assert result.errors is None
        assert result.data == {"authenticate": {"token": None}}


class TestBooks:
    def test_own_books_only(self, execute, rowling):
        result = execute(BOOKS, identity=rowling)

        assert result.errors is None
        assert result.data["books"] == [
            {"id": 1, "title": "Harry Potter and the Sorcerer's Stone", "authorId": 1},
            {"id": 3, "title": "Harry Potter and the Chamber of Secrets", "authorId": 1},
        ]

    def test_anonymous(self, execute):
        result = execute(BOOKS)

        assert result.data is None
        assert len(result.errors) == 1
        assert result.errors[0].message == "This resource requires an authentication token"
        assert isinstance(result.errors[0].original_error, UnauthenticatedError)

    def test_own_book(self, execute, crichton):
        result = execute(BOOK, identity=crichton, id=5)

        assert result.data == {"book": {"id": 5, "title": "Sphere", "authorId": 2}}

    def test_unowned_book(self, execute, crichton):
        result = execute(BOOK, identity=crichton, id=1)

        assert result.data == {"book": None}
        assert isinstance(result.errors[0].original_error, ForbiddenError)
        assert result.errors[0].path == ["book"]

    def test_missing_book(self, execute, crichton):
        result = execute(BOOK, identity=crichton, id=404)

        assert result.errors is None
        assert result.data == {"book": None}


class TestAuthors:
    def test_passwords_masked(self, execute):
        result = execute(AUTHORS)

        assert result.errors is None
        assert [a["username"] for a in result.data["authors"]] == [
            "jkrowling",
            "michaelcrichton",
            "ursula",
        ]
        assert {a["password"] for a in result.data["authors"]} == {"****"}

    def test_author_masked(self, execute):
        result = execute(AUTHOR, id=3)

        assert result.data == {"author": {"id": 3, "username": "ursula", "password": "****"}}

    def test_missing_author(self, execute):
        assert execute(AUTHOR, id=404).data == {"author": None}


def test_missing_resolver_stack_is_reported():
    result = schema.execute_sync(BOOKS, context_value={"identity": None})

    assert result.errors is not None
    assert "missing the resolver stack" in result.errors[0].message


@pytest.mark.asyncio
async def test_async_execution(resolvers, rowling):
    result = await schema.execute(
        BOOKS, context_value={"identity": rowling, "resolvers": resolvers}
    )

    assert result.errors is None
    assert [book["id"] for book in result.data["books"]] == [1, 3]
