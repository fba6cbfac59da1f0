"""Tests for the user, property and reservation repositories."""

from datetime import date

import pytest

from errors import ExecutionError, ValidationError
from models.property import COLUMNS, INSERT_COLUMNS, Property
from models.search import SearchCriteria
from models.user import User
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository
from tests.conftest import RecordingDatabase

ALICE = (1, "Alice Example", "alice@example.com", "$2a$10$hash")


def _user_lookup(statement, params):
    if "lower(email)" in statement and params == ["alice@example.com"]:
        return [ALICE]
    return []


# ── Users ─────────────────────────────────────────────────


def test_get_user_by_email_ignores_case() -> None:
    repo = UserRepository(RecordingDatabase(rows=_user_lookup))
    canonical = repo.get_by_email("alice@example.com")
    shouted = repo.get_by_email("  Alice@Example.COM ")
    assert canonical is not None
    assert canonical == shouted
    assert canonical.id == 1


def test_get_user_by_email_not_found_is_none() -> None:
    repo = UserRepository(RecordingDatabase(rows=_user_lookup))
    assert repo.get_by_email("bob@example.com") is None


def test_get_user_by_id() -> None:
    db = RecordingDatabase(rows=[ALICE])
    user = UserRepository(db).get_by_id(1)
    assert user == User(id=1, name="Alice Example", email="alice@example.com", password="$2a$10$hash")
    assert db.calls[0][1] == [1]


@pytest.mark.parametrize(
    "call",
    [
        lambda db: UserRepository(db).get_by_id(1),
        lambda db: UserRepository(db).get_by_email("alice@example.com"),
        lambda db: UserRepository(db).add(User(name="Bob", email="bob@example.com", password="x")),
        lambda db: PropertyRepository(db).get_by_id(1),
        lambda db: PropertyRepository(db).search({"city": "Sotboske"}),
        lambda db: ReservationRepository(db).get_all_for_guest(1),
    ],
    ids=["user_by_id", "user_by_email", "add_user", "property_by_id", "search", "reservations"],
)
def test_store_failure_is_not_reported_as_missing(call) -> None:
    """A failing store raises instead of looking like an empty result."""
    db = RecordingDatabase(error=ExecutionError("connection lost"))
    with pytest.raises(ExecutionError):
        call(db)
    assert len(db.calls) == 1


def test_add_property_store_failure_propagates(sample_property) -> None:
    db = RecordingDatabase(error=ExecutionError("duplicate key"))
    with pytest.raises(ExecutionError):
        PropertyRepository(db).add(sample_property)


def test_get_user_by_email_rejects_missing_email(recording_db) -> None:
    with pytest.raises(ValidationError):
        UserRepository(recording_db).get_by_email(None)
    assert recording_db.calls == []


def test_add_user_binds_name_email_password() -> None:
    db = RecordingDatabase(rows=lambda sql, params: [(12, *params)])
    created = UserRepository(db).add(User(name="Bob", email="Bob@Example.com", password="secret"))
    statement, params = db.calls[0]
    assert "RETURNING" in statement
    assert params == ["Bob", "bob@example.com", "secret"]
    assert created.id == 12
    assert created.email == "bob@example.com"


def test_add_user_rejects_blank_fields_before_store(recording_db) -> None:
    with pytest.raises(ValidationError, match="email"):
        UserRepository(recording_db).add(User(name="Bob", email=" ", password="secret"))
    assert recording_db.calls == []


# ── Properties ────────────────────────────────────────────


def _echo_insert(statement, params):
    return [(101, *params)]


def test_add_property_round_trips_all_fields(sample_property) -> None:
    db = RecordingDatabase(rows=_echo_insert)
    created = PropertyRepository(db).add(sample_property)

    statement, params = db.calls[0]
    assert statement.count("%s") == 14
    assert params == list(sample_property.insert_values())
    assert created.id == 101
    for column in INSERT_COLUMNS:
        assert getattr(created, column) == getattr(sample_property, column)


def test_add_property_rejects_missing_field(sample_property, recording_db) -> None:
    sample_property.title = ""
    sample_property.cost_per_night = 12.5
    with pytest.raises(ValidationError) as excinfo:
        PropertyRepository(recording_db).add(sample_property)
    assert "title" in str(excinfo.value)
    assert "cost_per_night" in str(excinfo.value)
    assert recording_db.calls == []


def test_get_property_by_id_missing_is_none(recording_db) -> None:
    assert PropertyRepository(recording_db).get_by_id(404) is None


def test_search_maps_average_rating(sample_property) -> None:
    row = (5, *sample_property.insert_values(), 4.25)
    db = RecordingDatabase(rows=[row])
    results = PropertyRepository(db).search(SearchCriteria(city="Sotb"), limit=5)

    assert len(results) == 1
    assert results[0].id == 5
    assert results[0].average_rating == 4.25
    assert results[0].city == "Sotboske"
    assert db.calls[0][1] == ["%Sotb%", 5]


def test_search_accepts_options_mapping(recording_db) -> None:
    assert PropertyRepository(recording_db).search({"owner_id": 3}) == []
    assert recording_db.calls[0][1] == [3, 10]


def test_row_mapping_without_rating() -> None:
    row = tuple(range(len(COLUMNS)))
    prop = PropertyRepository._row_to_property(row)
    assert prop.average_rating is None
    assert prop.number_of_bedrooms == len(COLUMNS) - 1


# ── Reservations ──────────────────────────────────────────


def test_list_reservations_for_guest() -> None:
    row = (
        8, 1, 5, date(2023, 3, 1), date(2023, 3, 4),
        "Speed Lamp", "https://images.example.com/thumb.jpeg", 93061,
        "Sotboske", 8, 4, 6, 4.5,
    )
    db = RecordingDatabase(rows=[row])
    reservations = ReservationRepository(db).get_all_for_guest(1)

    statement, params = db.calls[0]
    assert params == [1, 10]
    assert "reservations.end_date < now()::date" in statement
    assert "ORDER BY reservations.start_date" in statement
    assert reservations[0].title == "Speed Lamp"
    assert reservations[0].nights == 3
    assert reservations[0].average_rating == 4.5


def test_list_reservations_empty(recording_db) -> None:
    assert ReservationRepository(recording_db).get_all_for_guest(2, limit=3) == []
    assert recording_db.calls[0][1] == [2, 3]
