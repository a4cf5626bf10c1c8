# todoauth/services/auth.py
"""
Registration, login and account operations.

Composes the password hasher, the token issuer and the credential store.
Login failures are deliberately uniform: an unknown email and a wrong
password produce the same InvalidCredentials error.
"""
import logging
from dataclasses import dataclass

from todoauth.core.errors import Conflict, Forbidden, InvalidCredentials, Unauthorized
from todoauth.core.security import Identity, PasswordHasher, TokenIssuer
from todoauth.models.user import User
from todoauth.stores.users import UserStore

logger = logging.getLogger("uvicorn.error")


def normalize_email(email: str) -> str:
    return email.strip().lower()


@dataclass(frozen=True)
class LoginResult:
    token: str
    expires_in: int  # seconds


class AuthService:
    def __init__(self, users: UserStore, hasher: PasswordHasher, issuer: TokenIssuer):
        self.users = users
        self.hasher = hasher
        self.issuer = issuer

    async def register(self, username: str, email: str, password: str) -> User:
        """
        Create a new account.

        Duplicates are checked up front for a friendly message; the unique
        constraint in the store still settles concurrent registrations.

        Raises:
            Conflict: Username or email already registered
        """
        username = username.strip()
        email = normalize_email(email)
        if await self.users.get_by_username(username):
            raise Conflict("Username already exists")
        if await self.users.get_by_email(email):
            raise Conflict("Email already registered")
        user = await self.users.insert(
            username=username,
            email=email,
            password_hash=self.hasher.hash(password),
        )
        logger.info("[auth] registered user id=%s", user.id)
        return user

    async def login(self, email: str, password: str) -> LoginResult:
        """
        Check credentials and issue an access token.

        Raises:
            InvalidCredentials: Unknown email or wrong password
        """
        email = normalize_email(email)
        user = await self.users.get_by_email(email)
        if user is None:
            # Keep response time close to the wrong-password path
            self.hasher.dummy_verify()
            logger.info("[auth] failed login for email=%s", email)
            raise InvalidCredentials()
        if not self.hasher.verify(password, user.password_hash):
            logger.info("[auth] failed login for email=%s", email)
            raise InvalidCredentials()
        token = self.issuer.issue(user.id)
        return LoginResult(token=token, expires_in=int(self.issuer.default_ttl.total_seconds()))

    async def get_user(self, identity: Identity) -> User:
        """Load the account behind a verified identity."""
        user = await self.users.get_by_id(identity.user_id)
        if user is None:
            raise Unauthorized("User no longer exists", code="AUTH_USER_NOT_FOUND")
        return user

    async def change_password(self, identity: Identity, current_password: str, new_password: str) -> None:
        """
        Replace the caller's password after re-checking the current one.

        Tokens issued before the change stay valid until they expire.
        """
        user = await self.get_user(identity)
        if not self.hasher.verify(current_password, user.password_hash):
            raise Forbidden("Current password is incorrect", code="PASSWORD_MISMATCH")
        await self.users.update_password_hash(user, self.hasher.hash(new_password))
        logger.info("[auth] password changed for user id=%s", user.id)
