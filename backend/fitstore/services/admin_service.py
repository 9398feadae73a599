"""
Admin use cases: user search/edit/delete.

Role checks live in the router dependency; these functions assume the
caller is the administrator and take its claims only for the audit trail.
"""
from __future__ import annotations

import logging
import uuid
from typing import Optional

from tortoise.exceptions import IntegrityError
from tortoise.expressions import Q

from fitstore.core.errors import ConflictError, NotFoundError
from fitstore.core.security import Claims
from fitstore.core.store import normalize_email, write_gate
from fitstore.models.activity import ActivityType
from fitstore.models.user import User
from fitstore.services import activity_log

logger = logging.getLogger("uvicorn.error")


def _user_to_dict(u: User) -> dict:
    """User fields for admin responses; the password hash is never included."""
    return {
        "id": str(u.id),
        "name": u.name,
        "email": u.email,
        "profile": u.profile,
        "createdAt": u.created_at.isoformat() if u.created_at else None,
    }


async def _get_user(user_id: str) -> User:
    try:
        uuid.UUID(str(user_id))
    except ValueError:
        raise NotFoundError("User not found") from None
    u = await User.get_or_none(id=user_id)
    if not u:
        raise NotFoundError("User not found")
    return u


async def list_users(q: str | None = None) -> list[dict]:
    """Case-insensitive substring match on name or email; empty query lists everyone."""
    qs = User.all().order_by("created_at")
    needle = (q or "").strip()
    if needle:
        qs = qs.filter(Q(name__icontains=needle) | Q(email__icontains=needle))
    return [_user_to_dict(u) for u in await qs]


async def update_user(
    admin: Claims,
    user_id: str,
    name: Optional[str] = None,
    email: Optional[str] = None,
) -> dict:
    """
    Partial update of name and/or email.

    Raises:
        NotFoundError: Unknown user id
        ConflictError: The new email belongs to another user
    """
    async with write_gate.exclusive():
        u = await _get_user(user_id)

        if email:
            address = normalize_email(email)
            if address != u.email:
                taken = await User.filter(email=address).exclude(id=u.id).exists()
                if taken:
                    raise ConflictError("Email already used")
                u.email = address
        if name:
            u.name = name

        try:
            await u.save(update_fields=["name", "email"])
        except IntegrityError as exc:
            raise ConflictError("Email already used") from exc
        await activity_log.record(
            ActivityType.ADMIN_UPDATE_USER,
            admin.email,
            {"id": str(u.id), "name": name, "email": normalize_email(email) if email else None},
        )
    return _user_to_dict(u)


async def delete_user(admin: Claims, user_id: str) -> dict:
    """
    Remove a user irreversibly and return the removed record.

    Raises:
        NotFoundError: Unknown user id (also on a repeated delete)
    """
    async with write_gate.exclusive():
        u = await _get_user(user_id)
        removed = _user_to_dict(u)
        await u.delete()
        await activity_log.record(ActivityType.ADMIN_DELETE_USER, admin.email, {"id": removed["id"]})
    logger.warning("[admin] user deleted id=%s email=%s by=%s", removed["id"], removed["email"], admin.email)
    return removed
