# fitstore/schemas/admin.py
"""
Pydantic schemas for admin endpoints.
Defines request/response models for user management and the activity log.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, EmailStr

from fitstore.schemas.auth import DisplayName

__all__ = [
    "AdminUserOut",
    "AdminUserUpdateIn",
    "AdminUserUpdateOut",
    "AdminUserDeleteOut",
    "ActivityOut",
]


class AdminUserOut(BaseModel):
    """
    User as seen by the administrator. Never carries the password hash.
    """
    id: str
    name: str
    email: str
    profile: Optional[Dict[str, Any]] = None
    createdAt: Optional[str] = None


class AdminUserUpdateIn(BaseModel):
    """
    Partial update; only provided fields change.
    """
    name: Optional[DisplayName] = None
    email: Optional[EmailStr] = None  # Must stay unique if provided


class AdminUserUpdateOut(BaseModel):
    success: bool = True
    user: AdminUserOut


class AdminUserDeleteOut(BaseModel):
    success: bool = True
    removed: AdminUserOut


class ActivityOut(BaseModel):
    id: int
    time: Optional[str] = None
    type: str
    email: str
    details: Dict[str, Any] = {}
