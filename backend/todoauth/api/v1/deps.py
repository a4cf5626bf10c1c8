# todoauth/api/v1/deps.py
from fastapi import Header, Request

from todoauth.core.errors import Unauthorized
from todoauth.core.security import Identity, TokenVerifier
from todoauth.services.auth import AuthService
from todoauth.services.todos import TodoService


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_todo_service(request: Request) -> TodoService:
    return request.app.state.todo_service


def _bearer_token(authorization: str | None) -> str | None:
    if authorization and authorization.lower().startswith("bearer "):
        return authorization.split(" ", 1)[1].strip() or None
    return None


async def get_identity(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Identity:
    """
    FastAPI dependency guarding protected routes.

    Extracts the token from "Authorization: Bearer <token>", verifies it and
    returns the caller's Identity, which route handlers pass on to services
    explicitly. Verification is stateless: no database lookup happens here.

    Raises:
        Unauthorized (401, AUTH_REQUIRED): No Bearer token in the request
        TokenMalformed (401, AUTH_MALFORMED_TOKEN): Token cannot be parsed
        TokenInvalid (401, AUTH_INVALID_TOKEN): Signature does not verify
        TokenExpired (401, AUTH_TOKEN_EXPIRED): Token lifetime is over

    Because this runs as a dependency, a failure means the route handler is
    never called.

    Usage:
        @router.get("/protected")
        async def protected_route(identity: Identity = Depends(get_identity)):
            return {"user_id": identity.user_id}
    """
    token = _bearer_token(authorization)
    if not token:
        raise Unauthorized()
    verifier: TokenVerifier = request.app.state.token_verifier
    return Identity(user_id=verifier.verify(token))
