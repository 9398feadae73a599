# fitstore/models/user.py
"""
Database model for users.
The credential store: identity, hashed password and the optional body profile.
"""
import uuid
from tortoise import fields, models


class User(models.Model):
    """
    User database model.

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Email is unique across all users (stored lower-cased)
    - The administrator is not a row in this table
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    name = fields.CharField(max_length=128)
    email = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # Login identity (unique, indexed for fast lookups)
    password_hash = fields.CharField(max_length=255)  # Argon2 hash, never exposed
    # Body metrics and derived values, replaced as a whole on every save:
    # {name, gender, age, heightCm, weightKg, bmi, fitness_age, updatedAt}
    profile = fields.JSONField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name

    def public_dict(self) -> dict:
        return {"id": str(self.id), "name": self.name, "email": self.email}
