from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from exploring_india.config.settings import settings
from exploring_india.shared.core.context import RequestContext
from exploring_india.shared.core.exceptions import (
    AuthenticationError,
    DuplicateResourceError,
    PlaceNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from exploring_india.shared.models import ContactMessage, Review, User, UserPlace, UserPlaceStatus, UserSession
from exploring_india.shared.repositories import UserSessionRepository
from exploring_india.shared.services import (
    AuthService,
    ContactService,
    PlaceService,
    ReviewService,
    UserPlaceService,
)
from exploring_india.shared.utils.security import SecurityUtils
from exploring_india.scripts.seed_places import PLACES


async def _count(session, model) -> int:
    return await session.scalar(select(func.count()).select_from(model))


def _ctx(user) -> RequestContext:
    return RequestContext(user_id=user.id, session_id="test-session")


# ═══════════════════════════════════════════════════════════════════════════════
# AUTH
# ═══════════════════════════════════════════════════════════════════════════════


async def test_register_hashes_password(session):
    user = await AuthService(session).register_user("alice", "secret1")

    assert user.username == "alice"
    assert user.password_hash != "secret1"
    assert SecurityUtils.verify_password("secret1", user.password_hash)


async def test_register_duplicate_username_conflicts(session):
    service = AuthService(session)
    await service.register_user("alice", "secret1")

    with pytest.raises(DuplicateResourceError):
        await service.register_user("alice", "another")

    assert await session.scalar(select(func.count()).select_from(User).where(User.username == "alice")) == 1


async def test_register_rejects_empty_fields(session):
    with pytest.raises(ValidationError) as exc_info:
        await AuthService(session).register_user("", "secret1")

    assert exc_info.value.status_code == 400
    assert exc_info.value.details["errors"][0]["field"] == "username"
    assert await _count(session, User) == 0


async def test_login_success_creates_session(session, user):
    logged_in, token, max_age = await AuthService(session).login_user("alice", "secret1")

    assert logged_in.id == user.id
    assert max_age == settings.SESSION_EXPIRE_MINUTES * 60
    session_id = SecurityUtils.decode_session_token(token, settings.SECRET_KEY)
    stored = await UserSessionRepository(session).get(session_id)
    assert stored.user_id == user.id


@pytest.mark.parametrize("username,password", [("alice", "wrong"), ("nobody", "secret1")])
async def test_login_failures_are_authentication_errors(session, user, username, password):
    with pytest.raises(AuthenticationError) as exc_info:
        await AuthService(session).login_user(username, password)

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Invalid username or password"
    assert await _count(session, UserSession) == 0


async def test_login_missing_fields_is_validation_error(session):
    with pytest.raises(ValidationError):
        await AuthService(session).login_user("alice", "")


async def test_login_purges_expired_sessions(session, user):
    await UserSessionRepository(session).create_session(
        "stale", user.id, datetime.now(timezone.utc) - timedelta(minutes=1)
    )

    await AuthService(session).login_user("alice", "secret1")

    assert await UserSessionRepository(session).get("stale") is None
    assert await _count(session, UserSession) == 1


async def test_resolve_session_round_trip(session, user):
    service = AuthService(session)
    _, token, _ = await service.login_user("alice", "secret1")

    ctx = await service.resolve_session(token)

    assert ctx.user_id == user.id
    assert (await service.get_current_user(ctx)).username == "alice"


@pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
async def test_resolve_session_rejects_bad_tokens(session, token):
    with pytest.raises(AuthenticationError) as exc_info:
        await AuthService(session).resolve_session(token)

    assert exc_info.value.message == "Unauthorized"


async def test_resolve_session_rejects_expired_session_row(session, user):
    await UserSessionRepository(session).create_session(
        "expired-row", user.id, datetime.now(timezone.utc) - timedelta(seconds=1)
    )
    # Signature and exp claim are still valid; only the stored row has lapsed
    token = SecurityUtils.create_session_token(
        "expired-row",
        settings.SECRET_KEY,
        datetime.now(timezone.utc) + timedelta(hours=1),
    )

    with pytest.raises(AuthenticationError):
        await AuthService(session).resolve_session(token)


async def test_logout_invalidates_session(session, user):
    service = AuthService(session)
    _, token, _ = await service.login_user("alice", "secret1")
    ctx = await service.resolve_session(token)

    assert await service.logout(ctx) is True
    with pytest.raises(AuthenticationError):
        await service.resolve_session(token)


async def test_get_current_user_for_vanished_user(session):
    with pytest.raises(UserNotFoundError):
        await AuthService(session).get_current_user(RequestContext(user_id="gone", session_id="s"))


# ═══════════════════════════════════════════════════════════════════════════════
# PLACES
# ═══════════════════════════════════════════════════════════════════════════════


async def test_get_place_unknown_raises(session, places):
    with pytest.raises(PlaceNotFoundError) as exc_info:
        await PlaceService(session).get_place("missing")

    assert exc_info.value.status_code == 404


async def test_seed_places_is_idempotent(session):
    service = PlaceService(session)

    assert await service.seed_places(PLACES) == 8
    assert await service.seed_places(PLACES) == 0
    assert len(await service.list_places()) == 8


async def test_seed_places_validates_before_inserting(session):
    records = [PLACES[0], {"name": "Hampi"}]

    with pytest.raises(ValidationError) as exc_info:
        await PlaceService(session).seed_places(records)

    assert exc_info.value.details["index"] == 1
    assert await PlaceService(session).list_places() == []


# ═══════════════════════════════════════════════════════════════════════════════
# REVIEWS
# ═══════════════════════════════════════════════════════════════════════════════


async def test_create_review(session, user, place_by_name):
    taj = place_by_name["Taj Mahal"]

    review = await ReviewService(session).create_review(_ctx(user), taj.id, 5, "Amazing trip overall")

    assert review.user_id == user.id
    assert review.place_id == taj.id
    assert review.created_at is not None


async def test_create_review_unknown_place(session, user, places):
    with pytest.raises(PlaceNotFoundError):
        await ReviewService(session).create_review(_ctx(user), "missing", 5, "Amazing trip overall")

    assert await _count(session, Review) == 0


@pytest.mark.parametrize(
    "rating,comment",
    [
        (0, "Amazing trip overall"),
        (6, "Amazing trip overall"),
        (3, "short"),
        (True, "Amazing trip overall"),
        ("5", "Amazing trip overall"),
        (4.0, "Amazing trip overall"),
        (4.5, "Amazing trip overall"),
    ],
)
async def test_create_review_invalid_input(session, user, place_by_name, rating, comment):
    taj = place_by_name["Taj Mahal"]

    with pytest.raises(ValidationError):
        await ReviewService(session).create_review(_ctx(user), taj.id, rating, comment)

    assert await _count(session, Review) == 0


async def test_invalid_review_is_reported_before_place_lookup(session, user):
    # No places seeded: validation still wins over not-found
    with pytest.raises(ValidationError):
        await ReviewService(session).create_review(_ctx(user), "missing", 9, "Amazing trip overall")


async def test_list_reviews(session, user, place_by_name):
    service = ReviewService(session)
    goa = place_by_name["Goa Beaches"]
    await service.create_review(_ctx(user), goa.id, 4, "Sunsets were unreal")

    user_reviews = await service.list_user_reviews(_ctx(user))
    place_reviews = await service.list_place_reviews(goa.id)

    assert [(review.comment, place.name) for review, place in user_reviews] == [
        ("Sunsets were unreal", "Goa Beaches")
    ]
    assert [review.rating for review in place_reviews] == [4]


# ═══════════════════════════════════════════════════════════════════════════════
# USER PLACES
# ═══════════════════════════════════════════════════════════════════════════════


async def test_add_user_place_twice_creates_two_rows(session, user, place_by_name):
    service = UserPlaceService(session)
    taj = place_by_name["Taj Mahal"]

    first = await service.add_user_place(_ctx(user), taj.id, "explored")
    second = await service.add_user_place(_ctx(user), taj.id, "explored")

    assert first.id != second.id
    assert first.status is UserPlaceStatus.EXPLORED
    assert len(await service.list_user_places(_ctx(user))) == 2


async def test_add_user_place_invalid_status(session, user, place_by_name):
    with pytest.raises(ValidationError):
        await UserPlaceService(session).add_user_place(
            _ctx(user), place_by_name["Varanasi"].id, "visited"
        )

    assert await _count(session, UserPlace) == 0


async def test_add_user_place_unknown_place(session, user, places):
    with pytest.raises(PlaceNotFoundError):
        await UserPlaceService(session).add_user_place(_ctx(user), "missing", UserPlaceStatus.UPCOMING)

    assert await _count(session, UserPlace) == 0


# ═══════════════════════════════════════════════════════════════════════════════
# CONTACT
# ═══════════════════════════════════════════════════════════════════════════════


async def test_submit_contact_message(session):
    message = await ContactService(session).submit_message(
        "Bob", "bob@example.com", "Please add Hampi to the list"
    )

    assert message.email == "bob@example.com"
    assert await _count(session, ContactMessage) == 1


async def test_submit_contact_message_invalid(session):
    with pytest.raises(ValidationError) as exc_info:
        await ContactService(session).submit_message("Bob", "not-an-email", "hello")

    fields = {error["field"] for error in exc_info.value.details["errors"]}
    assert fields == {"email", "message"}
    assert await _count(session, ContactMessage) == 0
