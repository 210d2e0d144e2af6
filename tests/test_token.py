"""Tests for Token."""

import time

import pytest
from pydantic import ValidationError

from authorized_client import AuthServerResponseError, Token, safe_display_token


class TestToken:
    """Test Token behaviour."""

    def test_authorization_header_normalizes_type(self):
        """Test that the header always uses the Bearer scheme."""
        token = Token(access_token="tok123", token_type="bearer")
        assert token.get_authorization_header() == "Bearer tok123"

    def test_no_expiry(self):
        """Test a token without expires_in."""
        token = Token(access_token="tok")
        assert token.expires_at is None
        assert not token.is_expired()

    def test_expires_at(self):
        """Test that expires_at is issued_at plus expires_in."""
        token = Token(access_token="tok", expires_in=3600, issued_at=1000.0)
        assert token.expires_at == 4600.0

    def test_is_expired(self):
        """Test expiry detection."""
        fresh = Token(access_token="tok", expires_in=3600)
        stale = Token(access_token="tok", expires_in=60, issued_at=time.time() - 120)
        assert not fresh.is_expired()
        assert stale.is_expired()

    def test_frozen(self):
        """Test that the token cannot be mutated."""
        token = Token(access_token="tok")
        with pytest.raises(ValidationError):
            token.access_token = "other"

    def test_access_token_not_in_repr(self):
        """Test that the access token is hidden from repr."""
        token = Token(access_token="super-secret-value")
        assert "super-secret-value" not in repr(token)


class TestTokenFromResponse:
    """Test parsing token endpoint payloads."""

    def test_minimal_payload(self):
        """Test a payload with only an access token."""
        token = Token.from_response({"access_token": "tok123", "token_type": "bearer"})
        assert token.access_token == "tok123"
        assert token.token_type == "bearer"
        assert token.expires_in is None

    def test_full_payload(self):
        """Test a payload with expiry and scope."""
        token = Token.from_response(
            {
                "access_token": "tok",
                "token_type": "Bearer",
                "expires_in": 3600,
                "scope": "profile email",
                "ext_expires_in": 3600,
            }
        )
        assert token.expires_in == 3600
        assert token.scope == "profile email"
        assert token.expires_at is not None

    def test_null_optional_fields(self):
        """Test that null optional fields fall back to defaults."""
        token = Token.from_response(
            {"access_token": "tok", "token_type": None, "expires_in": None}
        )
        assert token.token_type == "Bearer"
        assert token.expires_in is None

    def test_missing_access_token(self):
        """Test that a payload without access_token is rejected."""
        with pytest.raises(AuthServerResponseError, match="missing 'access_token'"):
            Token.from_response({"token_type": "bearer"})

    def test_empty_access_token(self):
        """Test that an empty access token is rejected."""
        with pytest.raises(AuthServerResponseError, match="Malformed token response"):
            Token.from_response({"access_token": ""})

    def test_non_string_access_token(self):
        """Test that a non-string access token is rejected."""
        with pytest.raises(AuthServerResponseError):
            Token.from_response({"access_token": 12345})

    def test_invalid_expires_in(self):
        """Test that a mistyped expires_in is rejected."""
        with pytest.raises(AuthServerResponseError):
            Token.from_response({"access_token": "tok", "expires_in": "soon"})

    @pytest.mark.parametrize("payload", [["tok"], "tok", 42])
    def test_non_object_payload(self, payload):
        """Test that non-object payloads are rejected."""
        with pytest.raises(AuthServerResponseError, match="must be a JSON object"):
            Token.from_response(payload)


class TestSafeDisplayToken:
    """Test token display redaction."""

    def test_short_token(self):
        """Test redaction of short tokens."""
        assert safe_display_token("short123") == "sh...********"

    @pytest.mark.parametrize("token", ["a", "tok123", "short123", "x" * 26])
    def test_short_token_never_shown_in_full(self, token):
        """Test that short tokens are never revealed in full."""
        result = safe_display_token(token)
        assert token not in result
        assert result.endswith("*" * 8)

    def test_long_token(self):
        """Test redaction of long tokens."""
        token = "x" * 100
        result = safe_display_token(token, prefix_len=10, suffix_len=4)
        assert result.startswith("x" * 10)
        assert result.endswith("x" * 4)
        assert "*" * 20 in result
