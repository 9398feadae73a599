# fitstore/core/security.py
"""
Security module for authentication and authorization.
Handles password hashing, JWT token creation/validation and the claim
variants carried inside tokens.
"""
import datetime as dt
from dataclasses import dataclass
from typing import Union

import jwt  # PyJWT
from passlib.context import CryptContext

from fitstore.config import settings

# Password hashing context
# Argon2 is a modern, secure password hashing algorithm
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

# JWT configuration
JWT_SECRET = settings.jwt_secret
JWT_ALG = settings.jwt_alg
ACCESS_TOKEN_EXPIRE_HOURS = settings.access_token_expire_hours


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Args:
        plain: Plain text password to verify
        hashed: Hashed password from database

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain, hashed)


# A verifiable hash used when the email is unknown, so a failed login costs
# the same whether or not the account exists.
_DUMMY_HASH = hash_password("fitstore-placeholder-password")


def burn_verification(plain: str) -> None:
    pwd_context.verify(plain, _DUMMY_HASH)


# ------------------------------------------------------------------------------
# Claims
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class UserClaims:
    """Identity of a stored user; `admin` is always false on the wire."""

    id: str
    email: str
    name: str

    role = "user"

    def to_payload(self) -> dict:
        return {"id": self.id, "email": self.email, "name": self.name, "admin": False}


@dataclass(frozen=True)
class AdminClaims:
    """The configured administrator. There is no stored user behind it, hence no id."""

    email: str

    role = "admin"

    def to_payload(self) -> dict:
        return {"email": self.email, "admin": True}


Claims = Union[UserClaims, AdminClaims]


def claims_from_payload(payload: dict) -> Claims:
    """
    Rebuild the claim variant from a decoded token payload.

    Raises:
        jwt.InvalidTokenError: If the payload matches neither variant
    """
    email = payload.get("email")
    if not isinstance(email, str) or not email:
        raise jwt.InvalidTokenError("token carries no email")
    if payload.get("admin") is True:
        return AdminClaims(email=email)
    user_id = payload.get("id")
    if not isinstance(user_id, str) or not user_id:
        raise jwt.InvalidTokenError("user token carries no id")
    return UserClaims(id=user_id, email=email, name=str(payload.get("name") or ""))


def create_access_token(claims: Claims) -> str:
    """
    Create a JWT access token for the given claims.

    Token payload includes the claim fields plus:
        - iat: Issued at timestamp
        - exp: Expiration timestamp (ACCESS_TOKEN_EXPIRE_HOURS later)
    """
    now = dt.datetime.now(dt.timezone.utc)
    payload = claims.to_payload()
    payload["iat"] = now
    payload["exp"] = now + dt.timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS)
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALG)


def decode_access_token(token: str) -> dict:
    """
    Decode and validate a JWT access token.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or malformed
    """
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALG])


def read_claims(token: str) -> Claims:
    """Decode a token and return its claim variant."""
    return claims_from_payload(decode_access_token(token))
