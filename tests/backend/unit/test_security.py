"""
Unit tests for core.security module.
Tests password hashing, JWT token creation/validation and claim variants.
"""
import datetime as dt

import jwt
import pytest

from fitstore.core.security import (
    ACCESS_TOKEN_EXPIRE_HOURS,
    JWT_ALG,
    JWT_SECRET,
    AdminClaims,
    UserClaims,
    claims_from_payload,
    create_access_token,
    decode_access_token,
    hash_password,
    read_claims,
    verify_password,
)


class TestPasswordHashing:
    """Tests for password hashing and verification."""

    def test_hash_password_returns_different_hash_each_time(self):
        """Password hashing should produce different hashes (salt included)."""
        password = "TestPassword123"
        assert hash_password(password) != hash_password(password)

    def test_hash_password_is_not_plain_text(self):
        password = "TestPassword123"
        hashed = hash_password(password)
        assert isinstance(hashed, str)
        assert hashed != password
        assert hashed.startswith("$argon2")

    def test_verify_password_correct_password(self):
        hashed = hash_password("TestPassword123")
        assert verify_password("TestPassword123", hashed) is True

    def test_verify_password_incorrect_password(self):
        hashed = hash_password("TestPassword123")
        assert verify_password("WrongPassword456", hashed) is False


class TestJWTTokens:
    """Tests for JWT token creation and validation."""

    def test_user_token_payload_shape(self):
        token = create_access_token(UserClaims(id="u-1", email="ana@fitstore.io", name="Ana"))
        payload = decode_access_token(token)
        assert payload["id"] == "u-1"
        assert payload["email"] == "ana@fitstore.io"
        assert payload["name"] == "Ana"
        assert payload["admin"] is False

    def test_admin_token_payload_has_no_id(self):
        token = create_access_token(AdminClaims(email="admin@fitnessmvp.com"))
        payload = decode_access_token(token)
        assert payload["admin"] is True
        assert payload["email"] == "admin@fitnessmvp.com"
        assert "id" not in payload

    def test_token_expires_after_configured_hours(self):
        token = create_access_token(UserClaims(id="u-2", email="b@fitstore.io", name="Bo"))
        payload = decode_access_token(token)
        diff_hours = (payload["exp"] - payload["iat"]) / 3600
        assert ACCESS_TOKEN_EXPIRE_HOURS == 12
        assert abs(diff_hours - ACCESS_TOKEN_EXPIRE_HOURS) < 0.01

    def test_expired_token_is_rejected(self):
        past = dt.datetime.now(dt.timezone.utc) - dt.timedelta(hours=13)
        token = jwt.encode(
            {"id": "u-3", "email": "c@fitstore.io", "name": "Cy", "admin": False,
             "iat": past, "exp": past + dt.timedelta(hours=12)},
            JWT_SECRET,
            algorithm=JWT_ALG,
        )
        with pytest.raises(jwt.ExpiredSignatureError):
            decode_access_token(token)

    def test_token_signed_with_other_secret_is_rejected(self):
        token = jwt.encode({"email": "x@fitstore.io", "admin": True}, "not-the-secret", algorithm="HS256")
        with pytest.raises(jwt.InvalidSignatureError):
            decode_access_token(token)

    def test_garbage_token_is_rejected(self):
        with pytest.raises(jwt.InvalidTokenError):
            decode_access_token("invalid.token.here")


class TestClaims:
    def test_round_trip_returns_matching_variant(self):
        user = UserClaims(id="u-9", email="d@fitstore.io", name="Di")
        admin = AdminClaims(email="admin@fitnessmvp.com")
        assert read_claims(create_access_token(user)) == user
        assert read_claims(create_access_token(admin)) == admin

    def test_roles(self):
        assert UserClaims(id="1", email="e@fitstore.io", name="E").role == "user"
        assert AdminClaims(email="admin@fitnessmvp.com").role == "admin"

    def test_user_payload_without_id_is_invalid(self):
        with pytest.raises(jwt.InvalidTokenError):
            claims_from_payload({"email": "f@fitstore.io", "admin": False})

    def test_payload_without_email_is_invalid(self):
        with pytest.raises(jwt.InvalidTokenError):
            claims_from_payload({"admin": True})

    def test_truthy_non_bool_admin_flag_is_not_admin(self):
        claims = claims_from_payload({"id": "u-5", "email": "g@fitstore.io", "name": "G", "admin": "yes"})
        assert isinstance(claims, UserClaims)
