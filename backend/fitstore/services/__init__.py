"""
Services Module

Use cases behind the HTTP routes:
- auth_service: signup and login (administrator and stored-user methods)
- profile: BMI / fitness age calculator and profile save
- billing: cart pricing against the product catalog
- admin_service: user search, edit and delete
- activity_log: append-only audit trail
"""
