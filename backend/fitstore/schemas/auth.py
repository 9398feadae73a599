# fitstore/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines request/response models for signup and login.
"""
from typing import Annotated, Optional

from pydantic import BaseModel, EmailStr, Field, StringConstraints

__all__ = ["DisplayName", "SignupRequest", "LoginRequest", "UserOut", "AuthResponse"]

# Trimmed before the length check
DisplayName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2)]


class SignupRequest(BaseModel):
    """
    Request model for account creation.
    """
    name: DisplayName
    email: EmailStr  # Login identity, must be unique (case-insensitive)
    password: str = Field(min_length=6)  # Plain text, hashed server-side


class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    """
    email: str = Field(min_length=1)  # Kept as a plain string: the admin credential is matched verbatim
    password: str = Field(min_length=1)


class UserOut(BaseModel):
    """
    User information returned in authentication responses.
    Contains basic user details without sensitive information.
    """
    id: str
    name: str
    email: str


class AuthResponse(BaseModel):
    """
    Response model for signup and login.
    Regular users get `user`; the administrator gets `admin` and `email`.
    """
    success: bool = True
    user: Optional[UserOut] = None
    admin: Optional[bool] = None
    email: Optional[str] = None
    token: str
