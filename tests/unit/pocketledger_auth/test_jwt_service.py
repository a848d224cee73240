"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from pocketledger_auth.exceptions import InvalidTokenError, TokenExpiredError
from pocketledger_auth.services import JWTService


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_valid_secret(self):
        service = JWTService(secret_key="test-secret-key")
        assert service is not None

    def test_init_with_empty_secret_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")


class TestAccessTokens:
    """Tests for access token creation and verification."""

    def setup_method(self):
        self.service = JWTService(secret_key="test-secret-key-12345")
        self.user_id = uuid4()

    def test_create_access_token(self):
        token = self.service.create_access_token(user_id=self.user_id)

        assert isinstance(token, str)
        assert len(token) > 0

    def test_token_carries_standard_claims(self):
        token = self.service.create_access_token(user_id=self.user_id)

        claims = jwt.decode(token, options={"verify_signature": False})

        assert claims["sub"] == str(self.user_id)
        assert claims["exp"] - claims["iat"] == 24 * 3600

    def test_verify_valid_access_token(self):
        token = self.service.create_access_token(user_id=self.user_id)

        payload = self.service.verify_token(token)

        assert payload.user_id == self.user_id
        assert payload.exp > payload.issued_at
        assert payload.exp - payload.issued_at == timedelta(hours=24)

    def test_verify_returns_user_id(self):
        token = self.service.create_access_token(user_id=self.user_id)

        assert self.service.verify(token) == self.user_id

    def test_verify_expired_token_raises(self):
        token = self.service.create_access_token(
            user_id=self.user_id,
            expires_delta=timedelta(seconds=-1),  # Already expired
        )

        with pytest.raises(TokenExpiredError):
            self.service.verify_token(token)

    def test_expired_is_an_invalid_token(self):
        """Callers catching InvalidTokenError also catch expiry."""
        token = self.service.create_access_token(
            user_id=self.user_id,
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_verify_invalid_token_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("invalid.token.string")

    def test_verify_token_signed_with_other_secret_raises(self):
        other = JWTService(secret_key="a-different-secret")
        token = other.create_access_token(user_id=self.user_id)

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_verify_tampered_token_raises(self):
        token = self.service.create_access_token(user_id=self.user_id)
        header, payload, signature = token.split(".")
        tampered = f"{header}.{payload}.{signature[::-1]}"

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(tampered)

    def test_verify_non_uuid_subject_raises(self):
        token = jwt.encode(
            {"sub": "not-a-uuid", "exp": 4102444800},
            "test-secret-key-12345",
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)

    def test_verify_token_without_expiry_raises(self):
        token = jwt.encode(
            {"sub": str(self.user_id)},
            "test-secret-key-12345",
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)
