# todoauth/core/errors.py
"""
Error taxonomy shared by the security primitives, stores, services and routers.

Every AppError carries the HTTP status and the machine-readable code it is
rendered with by the exception handlers registered in todoauth.main.
Internal errors always reach the client with a generic message; the real
cause stays in the server log.
"""


class ConfigurationError(RuntimeError):
    """Raised while building the application when required configuration is missing."""


class AppError(Exception):
    status_code = 500
    code = "INTERNAL"
    message = "Internal server error"

    def __init__(self, message: str | None = None, *, code: str | None = None):
        self.message = message or self.message
        if code:
            self.code = code
        super().__init__(self.message)

    @property
    def headers(self) -> dict[str, str] | None:
        return None


class InputInvalid(AppError):
    status_code = 400
    code = "INPUT_INVALID"
    message = "Invalid request"


class Unauthorized(AppError):
    status_code = 401
    code = "AUTH_REQUIRED"
    message = "Authentication required"

    @property
    def headers(self) -> dict[str, str] | None:
        return {"WWW-Authenticate": "Bearer"}


class InvalidCredentials(Unauthorized):
    code = "AUTH_INVALID_CREDENTIALS"
    message = "Incorrect email or password"


class TokenMalformed(Unauthorized):
    code = "AUTH_MALFORMED_TOKEN"
    message = "Token could not be parsed"


class TokenInvalid(Unauthorized):
    code = "AUTH_INVALID_TOKEN"
    message = "Token is invalid"


class TokenExpired(Unauthorized):
    code = "AUTH_TOKEN_EXPIRED"
    message = "Token has expired"


class Forbidden(AppError):
    status_code = 403
    code = "FORBIDDEN"
    message = "Not allowed to access this resource"


class NotFound(AppError):
    status_code = 404
    code = "NOT_FOUND"
    message = "Not found"


class Conflict(AppError):
    status_code = 409
    code = "CONFLICT"
    message = "Resource already exists"


class Internal(AppError):
    """Base for failures the client must not see the details of."""


class HashingError(Internal):
    pass


class VerificationError(Internal):
    pass


class StorageError(Internal):
    pass
