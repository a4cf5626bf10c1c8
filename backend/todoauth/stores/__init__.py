# todoauth/stores/__init__.py
"""
Persistence adapters over Tortoise ORM.
Stores are the only place that touches the ORM.

- UserStore: credential store (user records)
- TodoStore: resource store (owner-scoped todo items)
"""
from .users import UserStore
from .todos import TodoStore
