# todoauth/stores/users.py
"""
Credential store: persistence for user records.
"""
from todoauth.models.user import User
from todoauth.stores.base import storage_errors


class UserStore:
    async def get_by_id(self, user_id: int) -> User | None:
        with storage_errors("user lookup by id"):
            return await User.get_or_none(id=user_id)

    async def get_by_email(self, email: str) -> User | None:
        with storage_errors("user lookup by email"):
            return await User.get_or_none(email=email)

    async def get_by_username(self, username: str) -> User | None:
        with storage_errors("user lookup by username"):
            return await User.get_or_none(username=username)

    async def insert(self, username: str, email: str, password_hash: str) -> User:
        """
        Create a user row.

        Raises:
            Conflict: Username or email is already taken (unique constraint)
        """
        with storage_errors("user insert", conflict_message="Username or email already registered"):
            return await User.create(
                username=username,
                email=email,
                password_hash=password_hash,
            )

    async def update_password_hash(self, user: User, password_hash: str) -> None:
        with storage_errors("user password update"):
            user.password_hash = password_hash
            await user.save(update_fields=["password_hash"])
