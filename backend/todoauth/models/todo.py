# todoauth/models/todo.py
"""
Database model for todo items, the owner-scoped resource of the API.
"""
from tortoise import fields, models


class Todo(models.Model):
    """
    Todo database model.

    Relationships:
    - Belongs to a User (many-to-one); deleting the user deletes their todos
    """
    id = fields.IntField(primary_key=True)
    owner = fields.ForeignKeyField(
        "models.User",
        related_name="todos",
        on_delete=fields.CASCADE,
    )  # Only requests authenticated as this user may see or change the item
    title = fields.CharField(max_length=200)
    notes = fields.TextField(null=True)
    done = fields.BooleanField(default=False)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "todos"
