# fitstore/schemas/profile.py
"""
Pydantic schemas for the profile endpoint.
"""
from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field

from fitstore.schemas.auth import DisplayName

__all__ = ["ProfileIn", "ProfileOut", "ProfileResponse"]


class ProfileIn(BaseModel):
    name: DisplayName
    gender: Literal["male", "female", "other"]
    age: int = Field(ge=10, le=120)
    heightCm: float = Field(ge=50, le=260)
    weightKg: float = Field(ge=20, le=500)
    email: Optional[EmailStr] = None  # New login email; omitted or unchanged keeps the current one


class ProfileOut(BaseModel):
    name: str
    gender: str
    age: int
    heightCm: float
    weightKg: float
    bmi: float  # One decimal place
    fitness_age: int
    updatedAt: str  # ISO timestamp


class ProfileResponse(BaseModel):
    success: bool = True
    profile: ProfileOut
    token: Optional[str] = None  # Present only when the email changed
