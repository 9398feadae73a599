# fitstore/models/__init__.py
"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- User: Credential store (identity, password hash, body profile)
- Product: Read-only product catalog
- Activity: Append-only activity log entry
"""
from .user import User
from .product import Product
from .activity import Activity, ActivityType
