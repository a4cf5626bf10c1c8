# todoauth/models/user.py
"""
Database model for users.
Represents a registered account and the credentials used to log in.
"""
from tortoise import fields, models


class User(models.Model):
    """
    User database model.

    Relationships:
    - Has many Todos (one-to-many, via related_name="todos")

    Security:
    - Password is stored as an argon2 hash (never store plain text passwords)
    - Username and email must be unique across all users; the database
      constraint is what settles concurrent registrations
    """
    id = fields.IntField(primary_key=True)  # Primary key: auto-incrementing user identifier
    username = fields.CharField(max_length=64, unique=True, db_index=True)  # Display/login name
    email = fields.CharField(max_length=256, unique=True, db_index=True)  # Login identifier, stored lower-cased
    password_hash = fields.CharField(max_length=255)  # Argon2 hash, never returned to clients
    created_at = fields.DatetimeField(auto_now_add=True)  # Timestamp when account was created

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"
