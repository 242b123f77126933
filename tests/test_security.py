"""Tests for password hashing and JWT helpers (storefront_auth.auth.security)."""

import jwt
import pytest

from storefront_auth.auth.security import (
    TOKEN_EXPIRED,
    TOKEN_INVALID,
    TOKEN_OK,
    create_access_token,
    hash_password,
    verify_access_token,
    verify_password,
)


SECRET = "unit-test-secret"


def _tamper(token: str) -> str:
    header, payload, sig = token.split(".")
    i = len(sig) // 2
    flipped = "A" if sig[i] != "A" else "B"
    return ".".join([header, payload, sig[:i] + flipped + sig[i + 1 :]])


class TestPasswordHashing:

    def test_hash_is_bcrypt_with_cost_12(self):
        hashed = hash_password("TestPassword123!")

        assert hashed.startswith("$2b$12$")
        assert "TestPassword123!" not in hashed

    def test_same_password_hashes_differently_and_both_verify(self):
        h1 = hash_password("TestPassword123!")
        h2 = hash_password("TestPassword123!")

        assert h1 != h2
        assert verify_password("TestPassword123!", h1) is True
        assert verify_password("TestPassword123!", h2) is True

    def test_wrong_password_is_rejected(self):
        hashed = hash_password("TestPassword123!")

        assert verify_password("WrongPassword123!", hashed) is False

    def test_verify_never_raises_on_garbage(self):
        assert verify_password("x", "not-a-hash") is False
        assert verify_password("", "$2b$12$abc") is False
        assert verify_password("x", "") is False

    def test_blank_password_cannot_be_hashed(self):
        with pytest.raises(ValueError):
            hash_password("")


class TestAccessTokens:

    def test_round_trip_carries_user_id_and_email(self):
        token = create_access_token(secret=SECRET, user_id=7, email="bob@example.com")

        result = verify_access_token(token=token, secret=SECRET)

        assert result.status == TOKEN_OK
        assert result.ok
        assert result.claims["userId"] == 7
        assert result.claims["email"] == "bob@example.com"

    def test_default_ttl_is_two_hours(self):
        token = create_access_token(secret=SECRET, user_id=1, email="a@b.c")
        claims = jwt.decode(token, SECRET, algorithms=["HS256"])

        assert claims["exp"] - claims["iat"] == 2 * 60 * 60

    def test_negative_ttl_is_expired(self):
        token = create_access_token(secret=SECRET, user_id=1, email="a@b.c", expires_seconds=-1)

        result = verify_access_token(token=token, secret=SECRET)

        assert result.status == TOKEN_EXPIRED
        assert result.claims == {}

    def test_wrong_secret_is_invalid(self):
        token = create_access_token(secret=SECRET, user_id=1, email="a@b.c")

        assert verify_access_token(token=token, secret="other").status == TOKEN_INVALID

    def test_tampered_signature_is_invalid(self):
        token = create_access_token(secret=SECRET, user_id=1, email="a@b.c")

        assert verify_access_token(token=_tamper(token), secret=SECRET).status == TOKEN_INVALID

    @pytest.mark.parametrize("token", ["", "abc", "a.b.c"])
    def test_malformed_token_is_invalid(self, token):
        assert verify_access_token(token=token, secret=SECRET).status == TOKEN_INVALID

    def test_token_without_user_id_is_invalid(self):
        token = jwt.encode({"email": "a@b.c", "exp": 4102444800}, SECRET, algorithm="HS256")

        assert verify_access_token(token=token, secret=SECRET).status == TOKEN_INVALID

    def test_blank_secret_is_refused(self):
        with pytest.raises(ValueError):
            create_access_token(secret="", user_id=1, email="a@b.c")
