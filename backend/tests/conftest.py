"""
Shared pytest fixtures.

Every test gets its own SQLite file and its own Database, and API tests get
a freshly built application with that Database injected. Environment
overrides are applied before the package is imported because settings are
read once at import time.
"""

import os

os.environ["APP_ENV"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./exploring_india_test.db"

from typing import AsyncIterator, List  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from exploring_india.api.main import create_application  # noqa: E402
from exploring_india.scripts.seed_places import PLACES  # noqa: E402
from exploring_india.shared.db import Database  # noqa: E402
from exploring_india.shared.models import Place, User  # noqa: E402
from exploring_india.shared.repositories import PlaceRepository, UserRepository  # noqa: E402
from exploring_india.shared.services import PlaceService  # noqa: E402
from exploring_india.shared.utils.security import SecurityUtils  # noqa: E402


@pytest.fixture
async def database(tmp_path) -> AsyncIterator[Database]:
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()
    yield db
    await db.disconnect()


@pytest.fixture
async def session(database: Database) -> AsyncIterator[AsyncSession]:
    """A transactional session for repository and service tests."""
    async with database.session() as db_session:
        yield db_session


@pytest.fixture
async def places(database: Database) -> List[Place]:
    """The curated destinations, seeded and committed."""
    async with database.session() as db_session:
        await PlaceService(db_session).seed_places(PLACES)
    async with database.session() as db_session:
        return await PlaceRepository(db_session).get_all_places()


@pytest.fixture
def place_by_name(places: List[Place]) -> dict[str, Place]:
    return {place.name: place for place in places}


@pytest.fixture
async def user(database: Database) -> User:
    """A committed user 'alice' with password 'secret1'."""
    async with database.session() as db_session:
        return await UserRepository(db_session).create_user(
            username="alice",
            password_hash=SecurityUtils.hash_password("secret1"),
        )


@pytest.fixture
def app(database: Database):
    return create_application(database=database)


@pytest.fixture
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


async def register_and_login(
    client: AsyncClient,
    username: str = "alice",
    password: str = "secret1",
) -> dict:
    """Register a user, log in (storing the session cookie), return the user JSON."""
    response = await client.post(
        "/api/auth/register",
        json={"username": username, "password": password},
    )
    assert response.status_code == 201, response.text
    response = await client.post(
        "/api/auth/login",
        json={"username": username, "password": password},
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
async def logged_in(client: AsyncClient) -> dict:
    """Client holding a session cookie for 'alice'."""
    return await register_and_login(client)


@pytest.fixture
def login_as(client: AsyncClient):
    """Factory fixture: await login_as("bob", "pw") to switch the client's session."""

    async def _login_as(username: str, password: str = "secret1") -> dict:
        return await register_and_login(client, username, password)

    return _login_as
