from datetime import datetime, timedelta, timezone

from sqlalchemy import delete, func, select

from exploring_india.config.settings import settings
from exploring_india.shared.models import User, UserSession
from exploring_india.shared.repositories import UserSessionRepository
from exploring_india.shared.utils.security import SecurityUtils


async def test_register_login_me(client):
    response = await client.post("/api/auth/register", json={"username": "alice", "password": "secret1"})
    assert response.status_code == 201
    registered = response.json()
    assert set(registered) == {"id", "username"}
    assert registered["username"] == "alice"

    response = await client.post("/api/auth/login", json={"username": "alice", "password": "secret1"})
    assert response.status_code == 200
    assert response.json() == registered

    set_cookie = response.headers["set-cookie"].lower()
    assert f"{settings.SESSION_COOKIE_NAME}=" in set_cookie
    assert "httponly" in set_cookie
    assert "samesite=lax" in set_cookie
    assert f"max-age={settings.SESSION_EXPIRE_MINUTES * 60}" in set_cookie

    response = await client.get("/api/auth/me")
    assert response.status_code == 200
    assert response.json() == {"id": registered["id"], "username": "alice"}


async def test_register_does_not_log_in(client):
    await client.post("/api/auth/register", json={"username": "alice", "password": "secret1"})

    response = await client.get("/api/auth/me")

    assert response.status_code == 401


async def test_register_duplicate_username_is_400(client, database):
    await client.post("/api/auth/register", json={"username": "alice", "password": "secret1"})

    response = await client.post("/api/auth/register", json={"username": "alice", "password": "other"})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Username already taken"
    async with database.session() as session:
        count = await session.scalar(select(func.count()).select_from(User).where(User.username == "alice"))
    assert count == 1


async def test_register_invalid_shape_is_400(client):
    response = await client.post("/api/auth/register", json={"username": "alice"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"]["errors"][0]["field"] == "password"


async def test_register_overlong_password_is_400(client, database):
    response = await client.post("/api/auth/register", json={"username": "alice", "password": "x" * 73})

    assert response.status_code == 400
    assert response.json()["error"]["details"]["errors"][0]["field"] == "password"
    async with database.session() as session:
        assert await session.scalar(select(func.count()).select_from(User)) == 0


async def test_login_with_longer_password_sharing_prefix_is_401(client):
    password = "x" * 72
    await client.post("/api/auth/register", json={"username": "alice", "password": password})

    response = await client.post("/api/auth/login", json={"username": "alice", "password": password + "B"})

    assert response.status_code == 401


async def test_login_missing_fields_is_400(client):
    response = await client.post("/api/auth/login", json={"username": "alice", "password": ""})

    assert response.status_code == 400


async def test_login_bad_credentials_is_401(client, user):
    wrong_password = await client.post("/api/auth/login", json={"username": "alice", "password": "nope"})
    unknown_user = await client.post("/api/auth/login", json={"username": "bob", "password": "secret1"})

    for response in (wrong_password, unknown_user):
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"
        assert "set-cookie" not in response.headers


async def test_me_without_cookie_is_401(client):
    response = await client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Unauthorized"


async def test_me_with_forged_cookie_is_401(client, logged_in):
    token = client.cookies.get(settings.SESSION_COOKIE_NAME)
    session_id = SecurityUtils.decode_session_token(token, settings.SECRET_KEY)
    forged = SecurityUtils.create_session_token(
        session_id,
        "attacker-secret",
        datetime.now(timezone.utc) + timedelta(hours=1),
    )
    client.cookies.clear()
    client.cookies.set(settings.SESSION_COOKIE_NAME, forged)

    response = await client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Unauthorized"


async def test_expired_session_row_is_401(client, database, user):
    now = datetime.now(timezone.utc)
    async with database.session() as session:
        await UserSessionRepository(session).create_session("expired", user.id, now - timedelta(minutes=1))
    token = SecurityUtils.create_session_token("expired", settings.SECRET_KEY, now + timedelta(hours=1))
    client.cookies.set(settings.SESSION_COOKIE_NAME, token)

    response = await client.get("/api/auth/me")

    assert response.status_code == 401


async def test_logout_clears_session(client, database, logged_in):
    token = client.cookies.get(settings.SESSION_COOKIE_NAME)

    response = await client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully", "success": True}

    async with database.session() as session:
        assert await session.scalar(select(func.count()).select_from(UserSession)) == 0

    # Replaying the old cookie no longer works
    client.cookies.set(settings.SESSION_COOKIE_NAME, token)
    response = await client.get("/api/auth/me")
    assert response.status_code == 401


async def test_logout_without_session_is_401(client):
    response = await client.post("/api/auth/logout")

    assert response.status_code == 401


async def test_deleting_user_ends_their_sessions(client, database, logged_in):
    async with database.session() as session:
        await session.execute(delete(User).where(User.id == logged_in["id"]))

    response = await client.get("/api/auth/me")

    assert response.status_code == 401
