# todoauth/core/security.py
"""
Security module for authentication and authorization.
Handles password hashing, JWT token issuance and JWT token verification.

Nothing here reads the environment: the signing secret and token lifetime are
passed in by the application factory so each handle is explicit.
"""
import datetime as dt
import logging
from dataclasses import dataclass

import jwt  # PyJWT
from passlib.context import CryptContext

from todoauth.core.errors import (
    ConfigurationError,
    HashingError,
    TokenExpired,
    TokenInvalid,
    TokenMalformed,
    Unauthorized,
    VerificationError,
)

logger = logging.getLogger("uvicorn.error")

REQUIRED_CLAIMS = ["sub", "iat", "exp"]


@dataclass(frozen=True)
class Identity:
    """Verified caller identity handed to protected operations."""

    user_id: int


class PasswordHasher:
    """
    One-way salted password hashing using Argon2.

    Every call to hash() draws a fresh salt, so two hashes of the same
    password differ and stored hashes cannot be compared for equality.
    """

    def __init__(self, schemes: list[str] | None = None):
        self._context = CryptContext(
            schemes=schemes or ["argon2"],
            deprecated="auto",
        )

    def hash(self, plain: str) -> str:
        """
        Hash a plain text password.

        Raises:
            HashingError: If the hashing backend fails
        """
        try:
            return self._context.hash(plain)
        except (ValueError, TypeError, RuntimeError) as exc:
            logger.error("[security] password hashing failed: %s", type(exc).__name__)
            raise HashingError() from exc

    def verify(self, plain: str, hashed: str) -> bool:
        """
        Verify a plain text password against a stored hash.

        Returns False on mismatch. Only a stored hash that cannot be parsed
        raises (VerificationError).
        """
        try:
            return self._context.verify(plain, hashed)
        except (ValueError, TypeError) as exc:
            logger.error("[security] stored password hash is malformed: %s", type(exc).__name__)
            raise VerificationError() from exc

    def dummy_verify(self) -> None:
        """Spend roughly the time of a real verify; used when no user matched."""
        self._context.dummy_verify()


class TokenIssuer:
    """Creates signed, time-limited access tokens."""

    def __init__(self, secret: str | None, algorithm: str = "HS256",
                 default_ttl: dt.timedelta = dt.timedelta(minutes=60)):
        if not secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        self._secret = secret
        self._algorithm = algorithm
        self.default_ttl = default_ttl

    def issue(self, subject_id: int, ttl: dt.timedelta | None = None) -> str:
        """
        Create an access token for a user.

        Token payload:
            - sub: Subject (user id, as a string)
            - iat: Issued at timestamp
            - exp: Expiration timestamp (iat + ttl)

        A ttl of zero produces a token that is already expired.
        """
        now = dt.datetime.now(dt.timezone.utc)
        payload = {
            "sub": str(subject_id),
            "iat": now,
            "exp": now + (self.default_ttl if ttl is None else ttl),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)


class TokenVerifier:
    """Stateless check of tokens created by TokenIssuer."""

    def __init__(self, secret: str | None, algorithm: str = "HS256"):
        if not secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        self._secret = secret
        self._algorithm = algorithm

    def verify(self, token: str | None) -> int:
        """
        Validate a token and return its subject (user id).

        Raises:
            Unauthorized: No token was presented
            TokenMalformed: Token cannot be parsed or lacks required claims
            TokenInvalid: Signature does not verify
            TokenExpired: Current time is at or past exp
        """
        if not token:
            raise Unauthorized()
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpired() from exc
        except jwt.InvalidSignatureError as exc:
            raise TokenInvalid() from exc
        except (jwt.DecodeError, jwt.MissingRequiredClaimError, jwt.exceptions.InvalidSubjectError) as exc:
            raise TokenMalformed() from exc
        except jwt.InvalidTokenError as exc:
            raise TokenInvalid() from exc

        try:
            return int(payload["sub"])
        except (TypeError, ValueError) as exc:
            raise TokenMalformed() from exc
