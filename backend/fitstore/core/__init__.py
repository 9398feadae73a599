# fitstore/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Startup tasks such as seeding the product catalog
- db: Database configuration and connection management
- errors: Domain error taxonomy and HTTP exception handlers
- security: Password hashing, JWT tokens and claim variants
- store: Write serialization and email normalization
"""
