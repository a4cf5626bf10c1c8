# todoauth/api/v1/routers/auth.py
from fastapi import APIRouter, Depends, status

from todoauth.api.v1.deps import get_auth_service, get_identity
from todoauth.core.security import Identity
from todoauth.schemas.auth import ChangePasswordIn, LoginRequest, LoginResponse, RegisterIn, UserOut
from todoauth.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterIn, auth: AuthService = Depends(get_auth_service)):
    """
    Register a new user account.

    The password is hashed before storage. Username and email must be unique
    across all users.

    Returns:
        dict: 201 with data: {id, username, email, createdAt}

    Error codes:
        - INPUT_INVALID (400): Missing or malformed field
        - CONFLICT (409): Username or email already registered
    """
    user = await auth.register(body.username, body.email, body.password)
    return {"success": True, "data": UserOut.from_model(user).model_dump()}


@router.post("/login")
async def login(payload: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    """
    Authenticate by email and password and return an access token.

    Returns:
        dict: data: {token, tokenType: "bearer", expiresIn}

    Error codes:
        - AUTH_INVALID_CREDENTIALS (401): Same response whether the email is
          unknown or the password is wrong
    """
    result = await auth.login(payload.email, payload.password)
    out = LoginResponse(token=result.token, expiresIn=result.expires_in)
    return {"success": True, "data": out.model_dump()}


@router.get("/me")
async def me(identity: Identity = Depends(get_identity), auth: AuthService = Depends(get_auth_service)):
    """
    Get the account behind the presented token.

    Error codes:
        - AUTH_* (401): Missing/invalid token, or the user no longer exists
    """
    user = await auth.get_user(identity)
    return {"success": True, "data": UserOut.from_model(user).model_dump()}


@router.post("/change-password")
async def change_password(
    body: ChangePasswordIn,
    identity: Identity = Depends(get_identity),
    auth: AuthService = Depends(get_auth_service),
):
    """
    Change the password of the authenticated user.

    The current password must be supplied. Tokens issued earlier remain
    valid until they expire; there is no server-side revocation.

    Error codes:
        - PASSWORD_MISMATCH (403): currentPassword is wrong
    """
    await auth.change_password(identity, body.currentPassword, body.newPassword)
    return {"success": True, "data": {"ok": True}}
