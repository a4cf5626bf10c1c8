# todoauth/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- db: Database configuration and connection management
- errors: Error taxonomy rendered by the API exception handlers
- security: Password hashing, token issuance and token verification
"""
