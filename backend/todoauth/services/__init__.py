# todoauth/services/__init__.py
"""
Business logic layer.

- AuthService: registration, login, account info, password change
- TodoService: owner-scoped todo operations
"""
from .auth import AuthService, LoginResult
from .todos import TodoService

__all__ = ["AuthService", "LoginResult", "TodoService"]
