# fitstore/models/activity.py
"""
Database model for the activity log.
One row per state-changing action; rows are only ever inserted.
"""
from enum import Enum

from tortoise import fields, models


class ActivityType(str, Enum):
    SIGNUP = "signup"
    LOGIN = "login"
    ADMIN_LOGIN = "admin_login"
    PROFILE_UPDATE = "profile_update"
    CHECKOUT = "checkout"
    ADMIN_UPDATE_USER = "admin_update_user"
    ADMIN_DELETE_USER = "admin_delete_user"


class Activity(models.Model):
    id = fields.IntField(pk=True)  # Auto-increment, so id order is creation order
    time = fields.DatetimeField(auto_now_add=True)
    type = fields.CharEnumField(ActivityType, max_length=32)
    email = fields.CharField(max_length=256, index=True)  # Actor
    details = fields.JSONField(default=dict)

    class Meta:
        table = "activities"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "time": self.time.isoformat() if self.time else None,
            "type": self.type.value if isinstance(self.type, ActivityType) else self.type,
            "email": self.email,
            "details": self.details or {},
        }
