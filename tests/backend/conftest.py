import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from todoauth.config import Settings
from todoauth.core.db import build_tortoise_config
from todoauth.core.security import PasswordHasher, TokenIssuer, TokenVerifier
from todoauth.main import create_app
from todoauth.models.user import User


TEST_DB_URL = "sqlite://:memory:"
TEST_SECRET = "test-secret-0123456789abcdef0123456789abcdef"


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=build_tortoise_config(TEST_DB_URL))
    await Tortoise.generate_schemas()


@pytest.fixture
def settings():
    return Settings(jwt_secret=TEST_SECRET, database_url=TEST_DB_URL)


@pytest.fixture
def hasher():
    return PasswordHasher()


@pytest.fixture
def issuer():
    return TokenIssuer(TEST_SECRET)


@pytest.fixture
def verifier():
    return TokenVerifier(TEST_SECRET)


@pytest_asyncio.fixture
async def db():
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app, db):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    The app lifespan is not run; the db fixture owns the connection.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def create_user(db, hasher):
    """
    Factory fixture to create users directly via the ORM.
    """

    async def _create_user(password: str = "UserPass!23") -> tuple[User, str]:
        tag = uuid.uuid4().hex[:6]
        user = await User.create(
            username=f"user_{tag}",
            email=f"{tag}@example.com",
            password_hash=hasher.hash(password),
        )
        return user, password

    return _create_user


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    """

    async def _get_headers(email: str, password: str) -> dict[str, str]:
        resp = await client.post(
            "/api/v1/auth/login",
            json={"email": email, "password": password},
        )
        assert resp.status_code == 200, resp.text
        token = resp.json()["data"]["token"]
        return {"Authorization": f"Bearer {token}"}

    return _get_headers
