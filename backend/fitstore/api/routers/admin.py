# fitstore/api/routers/admin.py
from __future__ import annotations

import json
from typing import List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from fitstore.api.deps import require_admin
from fitstore.core.security import Claims
from fitstore.schemas.admin import (
    ActivityOut,
    AdminUserDeleteOut,
    AdminUserOut,
    AdminUserUpdateIn,
    AdminUserUpdateOut,
)
from fitstore.services import activity_log, admin_service

# The role gate is declared once here and covers every route below.
router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


# ==============================================================================
# I. User Management Interface
#     Prefix: /api/admin/user(s)
# ==============================================================================
@router.get("/users", response_model=List[AdminUserOut])
async def list_users(
    q: str | None = Query(default=None, description="Case-insensitive search by name/email"),
):
    """
    List users (admin only), oldest account first. No pagination.
    """
    return await admin_service.list_users(q)


@router.put("/user/{user_id}", response_model=AdminUserUpdateOut)
async def update_user(
    user_id: str,
    body: AdminUserUpdateIn,
    admin: Claims = Depends(require_admin),
):
    """
    Update a user's name and/or email (admin only).

    Errors:
        - 400 CONFLICT: email already used by another account
        - 404 NOT_FOUND: unknown user id
    """
    user = await admin_service.update_user(admin, user_id, name=body.name, email=body.email)
    return {"success": True, "user": user}


@router.delete("/user/{user_id}", response_model=AdminUserDeleteOut)
async def delete_user(user_id: str, admin: Claims = Depends(require_admin)):
    """
    Permanently delete a user (admin only). A repeated delete is a 404.
    """
    removed = await admin_service.delete_user(admin, user_id)
    return {"success": True, "removed": removed}


# ==============================================================================
# II. Activity Log
#     Prefix: /api/admin/activities
# ==============================================================================
@router.get("/activities", response_model=List[ActivityOut])
async def list_activities(
    q: str | None = Query(default=None, description="Match against type, email or details"),
):
    """
    Activity records, most recent first (admin only).
    """
    return await activity_log.list_activities(q)


@router.get("/activities/export")
async def export_activities():
    """
    Download the full, unfiltered log in creation order as activities.json.
    """
    items = await activity_log.export_activities()
    return Response(
        content=json.dumps(items, ensure_ascii=False, indent=2),
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="activities.json"'},
    )
