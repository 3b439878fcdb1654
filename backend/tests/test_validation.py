from exploring_india.shared.models.enums import UserPlaceStatus
from exploring_india.shared.schemas import (
    ContactMessageCreate,
    ReviewCreate,
    UserCreate,
    UserPlaceCreate,
    validate_payload,
)


def test_valid_review_payload_is_parsed():
    result = validate_payload(
        ReviewCreate,
        {"place_id": "p1", "rating": 5, "comment": "Amazing trip overall"},
    )

    assert result.ok
    assert result.errors == []
    assert result.value.rating == 5
    assert result.message == ""


def test_rating_out_of_range_is_rejected():
    for rating in (0, 6, -1):
        result = validate_payload(
            ReviewCreate,
            {"place_id": "p1", "rating": rating, "comment": "Amazing trip overall"},
        )
        assert not result.ok
        assert result.value is None
        assert [error["field"] for error in result.errors] == ["rating"]


def test_short_comment_is_rejected_with_readable_message():
    result = validate_payload(
        ReviewCreate,
        {"place_id": "p1", "rating": 3, "comment": "too short"},
    )

    assert not result.ok
    assert result.errors[0]["field"] == "comment"
    assert result.message.startswith("comment: ")


def test_comment_of_exactly_ten_characters_is_accepted():
    result = validate_payload(
        ReviewCreate,
        {"place_id": "p1", "rating": 1, "comment": "0123456789"},
    )

    assert result.ok


def test_unknown_user_place_status_is_rejected():
    result = validate_payload(UserPlaceCreate, {"place_id": "p1", "status": "visited"})

    assert not result.ok
    assert result.errors[0]["field"] == "status"


def test_user_place_status_parses_to_enum():
    result = validate_payload(UserPlaceCreate, {"place_id": "p1", "status": "upcoming"})

    assert result.ok
    assert result.value.status is UserPlaceStatus.UPCOMING


def test_contact_collects_every_failing_field():
    result = validate_payload(
        ContactMessageCreate,
        {"name": "Bob", "email": "not-an-email", "message": "hello"},
    )

    assert not result.ok
    assert {error["field"] for error in result.errors} == {"email", "message"}
    assert "email" in result.message
    assert "message" in result.message


def test_missing_fields_are_reported():
    result = validate_payload(ReviewCreate, {})

    assert not result.ok
    assert {error["field"] for error in result.errors} == {"place_id", "rating", "comment"}
    assert all(error["type"] == "missing" for error in result.errors)


def test_rating_must_be_a_real_integer():
    for rating in (True, "5", 4.0, 4.5):
        result = validate_payload(
            ReviewCreate,
            {"place_id": "p1", "rating": rating, "comment": "Amazing trip overall"},
        )
        assert not result.ok, rating
        assert [error["field"] for error in result.errors] == ["rating"]


def test_registration_password_is_capped_at_72_bytes():
    assert validate_payload(UserCreate, {"username": "alice", "password": "x" * 72}).ok

    too_long = validate_payload(UserCreate, {"username": "alice", "password": "x" * 73})
    # 37 two-byte characters: 74 bytes
    multibyte = validate_payload(UserCreate, {"username": "alice", "password": "é" * 37})

    assert [error["field"] for error in too_long.errors] == ["password"]
    assert not multibyte.ok
