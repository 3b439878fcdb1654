from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import delete, func, select

from exploring_india.shared.core.exceptions import DuplicateResourceError
from exploring_india.shared.models import Place, Review, User, UserPlace, UserPlaceStatus, UserSession
from exploring_india.shared.repositories import (
    ContactMessageRepository,
    PlaceRepository,
    ReviewRepository,
    UserPlaceRepository,
    UserRepository,
    UserSessionRepository,
)


BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


async def test_get_all_places_returns_seed_order(session, places):
    names = [place.name for place in await PlaceRepository(session).get_all_places()]

    assert len(names) == 8
    assert names[0] == "Taj Mahal"
    assert names[-1] == "Rajasthan Forts"


async def test_get_place_by_unknown_id_is_none(session, places):
    assert await PlaceRepository(session).get("does-not-exist") is None


async def test_user_lookup_by_username(session):
    repo = UserRepository(session)
    created = await repo.create_user(username="alice", password_hash="hash")

    assert (await repo.get_by_username("alice")).id == created.id
    assert await repo.get_by_username("Alice") is None
    assert await repo.username_exists("alice")
    assert (await repo.get(created.id)).username == "alice"


async def test_unique_constraint_maps_to_duplicate_error(database):
    async with database.session() as session:
        await UserRepository(session).create_user(username="alice", password_hash="hash")

    with pytest.raises(DuplicateResourceError):
        async with database.session() as session:
            await UserRepository(session).create_user(username="alice", password_hash="other")

    async with database.session() as session:
        count = await session.scalar(select(func.count()).select_from(User).where(User.username == "alice"))
    assert count == 1


async def test_reviews_by_place_newest_first(session, user, place_by_name):
    taj = place_by_name["Taj Mahal"]
    goa = place_by_name["Goa Beaches"]
    repo = ReviewRepository(session)
    for offset, place in enumerate([taj, goa, taj]):
        await repo.create(
            user_id=user.id,
            place_id=place.id,
            rating=4,
            comment=f"Review number {offset}",
            created_at=BASE_TIME + timedelta(minutes=offset),
        )

    reviews = await repo.get_by_place_id(taj.id)

    assert [review.comment for review in reviews] == ["Review number 2", "Review number 0"]
    assert await repo.get_by_place_id("unknown") == []


async def test_reviews_by_user_join_place_newest_first(session, user, place_by_name):
    repo = ReviewRepository(session)
    for offset, name in enumerate(["Varanasi", "Himalayas", "Goa Beaches"]):
        await repo.create(
            user_id=user.id,
            place_id=place_by_name[name].id,
            rating=5,
            comment=f"Loved visiting {name}",
            created_at=BASE_TIME + timedelta(hours=offset),
        )

    rows = await repo.get_by_user_id(user.id)

    assert [place.name for _, place in rows] == ["Goa Beaches", "Himalayas", "Varanasi"]
    assert all(review.place_id == place.id for review, place in rows)


async def test_user_places_newest_first_and_duplicates_kept(session, user, place_by_name):
    repo = UserPlaceRepository(session)
    taj = place_by_name["Taj Mahal"]
    await repo.create(user_id=user.id, place_id=taj.id, status=UserPlaceStatus.EXPLORED, created_at=BASE_TIME)
    await repo.create(
        user_id=user.id,
        place_id=taj.id,
        status=UserPlaceStatus.UPCOMING,
        created_at=BASE_TIME + timedelta(seconds=1),
    )

    rows = await repo.get_user_places(user.id)

    assert [entry.status for entry, _ in rows] == [UserPlaceStatus.UPCOMING, UserPlaceStatus.EXPLORED]
    assert rows[0][0].id != rows[1][0].id
    assert all(place.name == "Taj Mahal" for _, place in rows)


async def test_deleting_place_cascades_to_dependents(database, user, place_by_name):
    taj = place_by_name["Taj Mahal"]
    async with database.session() as session:
        await ReviewRepository(session).create_review(user.id, taj.id, 5, "Amazing trip overall")
        await UserPlaceRepository(session).create_user_place(user.id, taj.id, UserPlaceStatus.EXPLORED)

    async with database.session() as session:
        await session.execute(delete(Place).where(Place.id == taj.id))

    async with database.session() as session:
        assert await session.scalar(select(func.count()).select_from(Review)) == 0
        assert await session.scalar(select(func.count()).select_from(UserPlace)) == 0


async def test_deleting_user_cascades_to_sessions_and_reviews(database, user, place_by_name):
    async with database.session() as session:
        await ReviewRepository(session).create_review(
            user.id, place_by_name["Varanasi"].id, 4, "Spiritual and calm"
        )
        await UserSessionRepository(session).create_session(
            "sid-1", user.id, datetime.now(timezone.utc) + timedelta(days=1)
        )

    async with database.session() as session:
        await session.execute(delete(User).where(User.id == user.id))

    async with database.session() as session:
        assert await session.scalar(select(func.count()).select_from(Review)) == 0
        assert await session.scalar(select(func.count()).select_from(UserSession)) == 0


async def test_session_expiry_and_purge(session, user):
    repo = UserSessionRepository(session)
    now = datetime.now(timezone.utc)
    await repo.create_session("live", user.id, now + timedelta(hours=1))
    await repo.create_session("dead", user.id, now - timedelta(hours=1))

    assert (await repo.get_active("live", now)).user_id == user.id
    assert await repo.get_active("dead", now) is None
    assert await repo.get_active("missing", now) is None

    assert await repo.purge_expired(now) == 1
    assert await repo.get("dead") is None
    assert await repo.delete_session("live") is True
    assert await repo.delete_session("live") is False


async def test_contact_message_is_stored(session):
    message = await ContactMessageRepository(session).create_message(
        name="Bob",
        email="bob@example.com",
        message="Please add Hampi to the list",
    )

    assert message.id
    assert message.created_at is not None
