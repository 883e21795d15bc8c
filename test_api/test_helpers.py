"""
Unit Tests for Helper Functions

This module contains tests for password hashing, access tokens and the
refresh token generator.
"""

import pytest
from datetime import datetime, timedelta, timezone


class TestHashModule:
    """Tests for the Hash class in hashing.py."""

    def test_generate_hash_returns_string(self):
        from authentication.helper.hashing import Hash

        password = "TestPassword123"
        hashed = Hash.generate_hash(password)

        assert isinstance(hashed, str)
        assert hashed != password

    def test_generate_hash_different_for_same_password(self):
        from authentication.helper.hashing import Hash

        # bcrypt generates different hashes due to random salt
        assert Hash.generate_hash("TestPassword123") != Hash.generate_hash("TestPassword123")

    def test_generate_hash_empty_password_raises_error(self):
        from authentication.helper.hashing import Hash

        with pytest.raises(ValueError):
            Hash.generate_hash("")

    @pytest.mark.asyncio
    async def test_whitespace_password_is_hashed(self):
        from authentication.helper.hashing import Hash

        hashed = Hash.generate_hash("      ")
        assert await Hash.verify(hashed, "      ") is True

    def test_generate_hash_accepts_long_password(self):
        from authentication.helper.hashing import Hash

        assert Hash.generate_hash("x" * 128)

    @pytest.mark.asyncio
    async def test_verify_correct_password(self):
        from authentication.helper.hashing import Hash

        hashed = Hash.generate_hash("TestPassword123")
        assert await Hash.verify(hashed, "TestPassword123") is True

    @pytest.mark.asyncio
    async def test_verify_incorrect_password(self):
        from authentication.helper.hashing import Hash

        hashed = Hash.generate_hash("TestPassword123")
        assert await Hash.verify(hashed, "WrongPassword456") is False

    @pytest.mark.asyncio
    async def test_verify_none_inputs_returns_false(self):
        from authentication.helper.hashing import Hash

        assert await Hash.verify(None, "test") is False
        assert await Hash.verify("test", None) is False

    @pytest.mark.asyncio
    async def test_verify_malformed_hash_returns_false(self):
        from authentication.helper.hashing import Hash

        assert await Hash.verify("not-a-bcrypt-hash", "test") is False


class TestAuthToken:
    """Tests for access token creation and decoding."""

    def test_access_token_round_trip(self):
        from authentication.helper.auth_helper.auth_token import create_access_token, decode_access_token

        token = create_access_token("5947397b323ae82d8c3a333b", "admin")
        data = decode_access_token(token)

        assert data.member_id == "5947397b323ae82d8c3a333b"
        assert data.role == "admin"

    def test_access_token_expiry_matches_lifetime(self):
        from jose import jwt
        from authentication.helper.auth_helper.auth_token import create_access_token

        token = create_access_token("member", "user")
        claims = jwt.get_unverified_claims(token)

        assert claims["exp"] - claims["iat"] == 15 * 60

    def test_expired_token_rejected(self):
        import os
        from jose import jwt
        from authentication.helper.auth_helper.auth_token import decode_access_token
        from authentication.helper.exceptions import InvalidAccessToken

        expired = jwt.encode(
            {"sub": "member", "exp": datetime.now(timezone.utc) - timedelta(hours=1)},
            os.environ["SECRET_KEY"],
            algorithm="HS256",
        )
        with pytest.raises(InvalidAccessToken):
            decode_access_token(expired)

    def test_tampered_token_rejected(self):
        from jose import jwt
        from authentication.helper.auth_helper.auth_token import decode_access_token
        from authentication.helper.exceptions import InvalidAccessToken

        forged = jwt.encode({"sub": "member", "role": "admin"}, "another-secret", algorithm="HS256")
        with pytest.raises(InvalidAccessToken):
            decode_access_token(forged)

    def test_token_without_subject_rejected(self):
        import os
        from jose import jwt
        from authentication.helper.auth_helper.auth_token import decode_access_token
        from authentication.helper.exceptions import InvalidAccessToken

        token = jwt.encode({"role": "user"}, os.environ["SECRET_KEY"], algorithm="HS256")
        with pytest.raises(InvalidAccessToken):
            decode_access_token(token)


class TestRefreshTokenGenerator:
    """Tests for generate_refresh_token in utils.py."""

    def test_prefixed_with_member_id(self):
        from authentication.helper.utils import generate_refresh_token

        token = generate_refresh_token("5947397b323ae82d8c3a333b")
        member_id, secret = token.split(".")

        assert member_id == "5947397b323ae82d8c3a333b"
        assert len(secret) == 80

    def test_unique(self):
        from authentication.helper.utils import generate_refresh_token

        assert generate_refresh_token("m") != generate_refresh_token("m")


class TestLogging:
    def test_setup_logging_attaches_handlers_once(self):
        from authentication.helper.utils import setup_logging

        first = setup_logging()
        second = setup_logging()

        assert first is second
        assert len(first.handlers) == 2
