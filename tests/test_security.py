import pytest
from datetime import timedelta

from student_records.core.security import (
    create_access_token,
    create_token,
    create_verification_token,
    decode_token,
)


def test_create_access_token():
    """Test creating an access token."""
    token = create_access_token("123")

    assert isinstance(token, str)
    assert len(token) > 0


def test_decode_valid_access_token():
    """Test decoding a valid access token."""
    token = create_access_token("123")
    payload = decode_token(token, "access")

    assert payload["sub"] == "123"
    assert payload["type"] == "access"


def test_verification_token_carries_email():
    """Test the verification token claims."""
    token = create_verification_token(7, "ana@example.com")
    payload = decode_token(token, "verify")

    assert payload["sub"] == "7"
    assert payload["email"] == "ana@example.com"
    assert payload["exp"] > payload["iat"]


def test_verification_token_is_not_an_access_token():
    """A verification link must not authenticate API calls."""
    token = create_verification_token(7, "ana@example.com")

    with pytest.raises(ValueError):
        decode_token(token, "access")


def test_decode_expired_token():
    """Test decoding an expired token."""
    token = create_token("123", "access", timedelta(seconds=-10))

    with pytest.raises(ValueError):
        decode_token(token, "access")


def test_decode_invalid_token():
    """Test decoding an invalid token."""
    with pytest.raises(ValueError):
        decode_token("invalid.token.string", "access")
