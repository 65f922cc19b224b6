"""Unit tests for the token service."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from bookgraph.auth.context import Identity
from bookgraph.auth.tokens import TokenService
from bookgraph.config import Settings
from bookgraph.errors import TokenVerificationError
from bookgraph.store import Author

SECRET = "test-secret-key-for-testing-only"


@pytest.fixture
def author():
    return Author(id=1, name="J.K. Rowling", username="jkrowling", password="password")


class TestTokenService:
    """Test issuing and verifying author tokens."""

    def test_round_trip(self, tokens, author):
        token = tokens.issue_token(author)

        assert tokens.verify_token(token) == Identity(author_id=1)

    def test_payload_carries_only_the_subject(self, tokens, author):
        token = tokens.issue_token(author)
        payload = jwt.decode(token, options={"verify_signature": False})

        assert payload == {"sub": "1", "iss": "test-bookgraph", "aud": "test-api"}
        assert "password" not in token
        assert author.password not in str(payload)

    def test_tokens_are_deterministic_without_expiry(self, tokens, author):
        assert tokens.issue_token(author) == tokens.issue_token(author)

    def test_expiring_token(self, author):
        service = TokenService(SECRET, issuer="test-bookgraph", audience="test-api", expiry_seconds=60)
        token = service.issue_token(author)
        payload = jwt.decode(token, options={"verify_signature": False})

        assert payload["exp"] - payload["iat"] == 60
        assert service.verify_token(token).author_id == 1

    def test_expired_token_rejected(self, tokens):
        past = datetime.now(UTC) - timedelta(hours=2)
        token = jwt.encode(
            {"sub": "1", "iss": "test-bookgraph", "aud": "test-api", "exp": past},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(TokenVerificationError, match="Invalid token"):
            tokens.verify_token(token)

    def test_wrong_secret_rejected(self, tokens, author):
        other = TokenService("another-secret", issuer="test-bookgraph", audience="test-api")

        with pytest.raises(TokenVerificationError):
            tokens.verify_token(other.issue_token(author))

    def test_wrong_audience_rejected(self, tokens, author):
        other = TokenService(SECRET, issuer="test-bookgraph", audience="someone-else")

        with pytest.raises(TokenVerificationError):
            tokens.verify_token(other.issue_token(author))

    def test_garbage_rejected(self, tokens):
        with pytest.raises(TokenVerificationError):
            tokens.verify_token("not-a-jwt")

    def test_missing_subject_rejected(self, tokens):
        token = jwt.encode({"iss": "test-bookgraph", "aud": "test-api"}, SECRET, algorithm="HS256")

        with pytest.raises(TokenVerificationError):
            tokens.verify_token(token)

    def test_non_numeric_subject_rejected(self, tokens):
        token = jwt.encode(
            {"sub": "jkrowling", "iss": "test-bookgraph", "aud": "test-api"},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(TokenVerificationError, match="not an author id"):
            tokens.verify_token(token)


class TestFromSettings:
    def test_uses_configured_values(self, author):
        config = Settings(jwt_secret="configured", jwt_issuer="iss", jwt_audience="aud")
        service = TokenService.from_settings(config)
        payload = jwt.decode(service.issue_token(author), "configured", algorithms=["HS256"], audience="aud")

        assert payload["iss"] == "iss"

    def test_default_secret_refused_in_production(self):
        config = Settings(environment="production")

        with pytest.raises(RuntimeError, match="default JWT secret"):
            TokenService.from_settings(config)

    def test_default_secret_allowed_in_development(self):
        config = Settings(environment="development")

        assert TokenService.from_settings(config).secret_key == "secret"
