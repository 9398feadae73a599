"""
Signup and login.

Login walks an ordered list of authentication methods. The configured
administrator credential is one method; stored users are another. The
first method that recognizes the email decides the outcome, so the
credential store stays the only source of truth for ordinary users.
"""
from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from tortoise.exceptions import IntegrityError

from fitstore.config import settings
from fitstore.core.errors import AuthError, ConflictError
from fitstore.core.security import (
    AdminClaims,
    Claims,
    UserClaims,
    burn_verification,
    create_access_token,
    hash_password,
    verify_password,
)
from fitstore.core.store import normalize_email, write_gate
from fitstore.models.activity import ActivityType
from fitstore.models.user import User
from fitstore.services import activity_log

logger = logging.getLogger("uvicorn.error")

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass
class AuthResult:
    claims: Claims
    token: str
    user: Optional[User] = None

    @property
    def is_admin(self) -> bool:
        return isinstance(self.claims, AdminClaims)


class AuthenticationMethod(Protocol):
    async def authenticate(self, email: str, password: str) -> Optional[AuthResult]:
        """Return a result, None when the email is not handled here, or raise AuthError."""


def user_claims(user: User) -> UserClaims:
    return UserClaims(id=str(user.id), email=user.email, name=user.name)


class AdminCredentialMethod:
    """The administrator: an exact match against the configured email/password."""

    def __init__(self, email: str, password: str):
        self.email = email
        self.password = password

    async def authenticate(self, email: str, password: str) -> Optional[AuthResult]:
        if not self.email or not self.password:
            return None
        if not hmac.compare_digest(email.encode(), self.email.encode()):
            return None
        if not hmac.compare_digest(password.encode(), self.password.encode()):
            # Not the admin after all; a stored user may share the address.
            return None
        claims = AdminClaims(email=self.email)
        await activity_log.record(ActivityType.ADMIN_LOGIN, self.email)
        logger.warning("[auth] admin login email=%s", self.email)
        return AuthResult(claims=claims, token=create_access_token(claims))


class StoredUserMethod:
    """Users from the credential store, verified against their Argon2 hash."""

    async def authenticate(self, email: str, password: str) -> Optional[AuthResult]:
        user = await User.get_or_none(email=normalize_email(email))
        if user is None:
            # Same hashing cost as a real check, same error as a wrong password
            burn_verification(password)
            raise AuthError(INVALID_CREDENTIALS)
        if not verify_password(password, user.password_hash):
            raise AuthError(INVALID_CREDENTIALS)
        await activity_log.record(ActivityType.LOGIN, user.email)
        claims = user_claims(user)
        return AuthResult(claims=claims, token=create_access_token(claims), user=user)


class AuthService:
    """Handles registration and login flows."""

    def __init__(self, methods: Sequence[AuthenticationMethod] | None = None):
        if methods is None:
            methods = (
                AdminCredentialMethod(settings.admin_email, settings.admin_password),
                StoredUserMethod(),
            )
        self.methods = list(methods)

    async def signup(self, name: str, email: str, password: str) -> AuthResult:
        """
        Create a user with an empty profile and log them in.

        Raises:
            ConflictError: If the (normalized) email is already registered
        """
        address = normalize_email(email)
        password_hash = hash_password(password)  # outside the gate, it is slow
        async with write_gate.exclusive():
            if await User.filter(email=address).exists():
                raise ConflictError("Email already exists")
            try:
                user = await User.create(name=name, email=address, password_hash=password_hash, profile=None)
            except IntegrityError as exc:
                raise ConflictError("Email already exists") from exc
            await activity_log.record(ActivityType.SIGNUP, address, {"name": user.name})
        logger.info("[auth] signup id=%s email=%s", user.id, address)
        claims = user_claims(user)
        return AuthResult(claims=claims, token=create_access_token(claims), user=user)

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Authenticate with the first method that recognizes the email.

        Raises:
            AuthError: "Invalid credentials", whatever the reason
        """
        for method in self.methods:
            result = await method.authenticate(email, password)
            if result is not None:
                return result
        raise AuthError(INVALID_CREDENTIALS)


auth_service = AuthService()
