# todoauth/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- User: Account and credentials
- Todo: Owner-scoped todo item
"""
from .user import User
from .todo import Todo
