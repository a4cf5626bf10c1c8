# todoauth/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines request/response models for registration, login and account info.
"""
from pydantic import BaseModel, Field, field_validator

# Deliberately loose: one "@", no whitespace, a dot in the domain
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterIn(BaseModel):
    """
    Request model for the registration endpoint.
    """
    username: str = Field(min_length=1, max_length=64)
    email: str = Field(min_length=3, max_length=256, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=1, max_length=1024)  # Plain text, hashed server-side

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("username must not be blank")
        return v.strip()


class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    Contains credentials for authentication.
    """
    email: str = Field(min_length=1, max_length=256)
    password: str = Field(min_length=1, max_length=1024)


class ChangePasswordIn(BaseModel):
    currentPassword: str = Field(min_length=1, max_length=1024)
    newPassword: str = Field(min_length=1, max_length=1024)


class UserOut(BaseModel):
    """
    User information returned to clients.
    Never includes the password hash.
    """
    id: int
    username: str
    email: str
    createdAt: str | None = None

    @classmethod
    def from_model(cls, user) -> "UserOut":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            createdAt=user.created_at.isoformat() if user.created_at else None,
        )


class LoginResponse(BaseModel):
    """
    Response model for successful login.
    """
    token: str  # JWT access token, send as "Authorization: Bearer <token>"
    tokenType: str = "bearer"
    expiresIn: int  # Token lifetime in seconds
