from datetime import datetime, timedelta

import pytest
from sqlalchemy import func, select

from exploring_india.shared.models import Review


async def _review_count(database) -> int:
    async with database.session() as session:
        return await session.scalar(select(func.count()).select_from(Review))


async def test_list_places_is_public(client, places):
    response = await client.get("/api/places")

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 8
    assert set(body[0]) == {"id", "name", "description", "importance", "image_url", "location", "category"}
    assert body[0]["name"] == "Taj Mahal"
    assert body[0]["image_url"].startswith("/generated_images/")


async def test_list_places_empty(client):
    response = await client.get("/api/places")

    assert response.status_code == 200
    assert response.json() == []


async def test_get_place(client, place_by_name):
    taj = place_by_name["Taj Mahal"]

    response = await client.get(f"/api/places/{taj.id}")

    assert response.status_code == 200
    assert response.json()["location"] == "Agra, Uttar Pradesh"


async def test_get_unknown_place_is_404(client, places):
    response = await client.get("/api/places/not-a-place")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


async def test_review_flow(client, logged_in, place_by_name):
    taj = place_by_name["Taj Mahal"]

    response = await client.post(
        "/api/reviews",
        json={"place_id": taj.id, "rating": 5, "comment": "Amazing trip overall"},
    )
    assert response.status_code == 201
    review = response.json()
    assert review["user_id"] == logged_in["id"]
    assert review["rating"] == 5
    assert "created_at" in review

    response = await client.get("/api/reviews/user")
    assert response.status_code == 200
    mine = response.json()
    assert len(mine) == 1
    assert mine[0]["id"] == review["id"]
    assert mine[0]["place"]["name"] == "Taj Mahal"

    response = await client.get(f"/api/reviews/place/{taj.id}")
    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [review["id"]]


async def test_review_author_comes_from_session(client, logged_in, place_by_name):
    response = await client.post(
        "/api/reviews",
        json={
            "place_id": place_by_name["Goa Beaches"].id,
            "rating": 4,
            "comment": "Sunsets were unreal",
            "user_id": "someone-else",
        },
    )

    assert response.status_code == 201
    assert response.json()["user_id"] == logged_in["id"]


async def test_anonymous_review_is_401_and_not_stored(client, database, place_by_name):
    response = await client.post(
        "/api/reviews",
        json={"place_id": place_by_name["Taj Mahal"].id, "rating": 5, "comment": "Amazing trip overall"},
    )

    assert response.status_code == 401
    assert await _review_count(database) == 0


async def test_invalid_review_is_400(client, database, logged_in, place_by_name):
    taj = place_by_name["Taj Mahal"]

    bad_rating = await client.post(
        "/api/reviews",
        json={"place_id": taj.id, "rating": 6, "comment": "Amazing trip overall"},
    )
    short_comment = await client.post(
        "/api/reviews",
        json={"place_id": taj.id, "rating": 3, "comment": "meh"},
    )

    assert bad_rating.status_code == 400
    assert short_comment.status_code == 400
    assert short_comment.json()["error"]["details"]["errors"][0]["field"] == "comment"
    assert await _review_count(database) == 0


@pytest.mark.parametrize("rating", [True, "5", 4.0, 4.5])
async def test_non_integer_rating_is_400(client, database, logged_in, place_by_name, rating):
    taj = place_by_name["Taj Mahal"]

    response = await client.post(
        "/api/reviews",
        json={"place_id": taj.id, "rating": rating, "comment": "Amazing trip overall"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["details"]["errors"][0]["field"] == "rating"
    assert await _review_count(database) == 0


async def test_review_timestamps_carry_utc_offset(client, logged_in, place_by_name):
    taj = place_by_name["Taj Mahal"]
    await client.post(
        "/api/reviews",
        json={"place_id": taj.id, "rating": 4, "comment": "Amazing trip overall"},
    )

    created = await client.get(f"/api/reviews/place/{taj.id}")
    mine = await client.get("/api/reviews/user")

    for stamp in (created.json()[0]["created_at"], mine.json()[0]["created_at"]):
        parsed = datetime.fromisoformat(stamp.replace("Z", "+00:00"))
        assert parsed.utcoffset() == timedelta(0)
    assert await _review_count(database) == 0


async def test_review_unknown_place_is_404(client, database, logged_in, places):
    response = await client.post(
        "/api/reviews",
        json={"place_id": "missing", "rating": 5, "comment": "Amazing trip overall"},
    )

    assert response.status_code == 404
    assert await _review_count(database) == 0


async def test_place_reviews_are_public_and_newest_first(client, login_as, place_by_name):
    varanasi = place_by_name["Varanasi"]
    await login_as("alice")
    await client.post("/api/reviews", json={"place_id": varanasi.id, "rating": 5, "comment": "Evening aarti was moving"})
    await login_as("bob")
    await client.post("/api/reviews", json={"place_id": varanasi.id, "rating": 3, "comment": "Crowded but worth it"})
    client.cookies.clear()

    response = await client.get(f"/api/reviews/place/{varanasi.id}")

    assert response.status_code == 200
    assert [item["comment"] for item in response.json()] == [
        "Crowded but worth it",
        "Evening aarti was moving",
    ]


async def test_reviews_for_unknown_place_is_empty(client):
    response = await client.get("/api/reviews/place/nowhere")

    assert response.status_code == 200
    assert response.json() == []


async def test_my_reviews_only_lists_mine(client, login_as, place_by_name):
    goa = place_by_name["Goa Beaches"]
    await login_as("alice")
    await client.post("/api/reviews", json={"place_id": goa.id, "rating": 5, "comment": "Best beach holiday"})
    await login_as("bob")

    response = await client.get("/api/reviews/user")

    assert response.status_code == 200
    assert response.json() == []


async def test_my_reviews_requires_session(client):
    response = await client.get("/api/reviews/user")

    assert response.status_code == 401
