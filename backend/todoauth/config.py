# todoauth/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Todo Auth API"
    env: str = "dev"

    # Host & Port settings
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS origins for frontend
    CORS_ORIGINS: list[str] = DEFAULT_CORS_ORIGINS

    # Database (Tortoise connection URL)
    database_url: str = "sqlite://db.sqlite3"
    generate_schemas: bool = False  # Create tables on startup; use aerich migrations otherwise

    # JWT settings
    jwt_secret: str | None = None  # Required: the app refuses to start without it
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Build a Settings instance from the environment.

    Variables from a local .env file are loaded first; real environment
    variables win over the file.
    """
    load_dotenv()
    cors = os.getenv("CORS_ORIGINS")
    return Settings(
        env=os.getenv("ENV", "dev"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        CORS_ORIGINS=[o.strip() for o in cors.split(",") if o.strip()] if cors else DEFAULT_CORS_ORIGINS,
        database_url=os.getenv("DATABASE_URL", "sqlite://db.sqlite3"),
        generate_schemas=_env_flag("GENERATE_SCHEMAS"),
        jwt_secret=os.getenv("JWT_SECRET") or None,
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        access_token_expire_minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
