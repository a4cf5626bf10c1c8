# todoauth/main.py
import datetime as dt
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from todoauth.api.v1.routers import auth, todos
from todoauth.config import Settings, load_settings
from todoauth.core.db import close_db, init_db
from todoauth.core.errors import AppError, InputInvalid, Internal
from todoauth.core.security import PasswordHasher, TokenIssuer, TokenVerifier
from todoauth.services.auth import AuthService
from todoauth.services.todos import TodoService
from todoauth.stores import TodoStore, UserStore

logger = logging.getLogger("uvicorn.error")


def _error_body(code: str, message: str) -> dict:
    return {"success": False, "error": {"code": code, "message": message}}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """
    Render an AppError in the response envelope.

    Internal errors are logged with their cause; the client only gets the
    generic code and message.
    """
    if isinstance(exc, Internal):
        logger.error("[app] %s on %s %s", type(exc).__name__, request.method, request.url.path,
                     exc_info=exc)
        return JSONResponse(status_code=500, content=_error_body(Internal.code, Internal.message))
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.code, exc.message),
        headers=exc.headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request shape errors as 400 INPUT_INVALID without echoing input values."""
    problems = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())[1:]) or "body"
        problems.append(f"{loc}: {err.get('msg', 'invalid')}")
    return JSONResponse(
        status_code=InputInvalid.status_code,
        content=_error_body(InputInvalid.code, "; ".join(problems) or InputInvalid.message),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("[app] unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=_error_body(Internal.code, Internal.message))


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Security handles and stores are created here, once, and attached to
    app.state; dependencies in todoauth.api.v1.deps hand them to routes.
    A missing JWT_SECRET raises ConfigurationError before any request can
    be served.
    """
    settings = settings or load_settings()
    logger.setLevel(settings.log_level.upper())

    hasher = PasswordHasher()
    issuer = TokenIssuer(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        default_ttl=dt.timedelta(minutes=settings.access_token_expire_minutes),
    )
    verifier = TokenVerifier(settings.jwt_secret, algorithm=settings.jwt_algorithm)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_db(settings.database_url, generate_schemas=settings.generate_schemas)
        logger.info("[app] %s started (env=%s)", settings.APP_NAME, settings.env)
        yield
        await close_db()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.token_verifier = verifier
    app.state.auth_service = AuthService(UserStore(), hasher, issuer)
    app.state.todo_service = TodoService(TodoStore())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # REST
    app.include_router(auth.router, prefix="/api/v1")
    app.include_router(todos.router, prefix="/api/v1")

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn using settings from the environment."""
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
    )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
