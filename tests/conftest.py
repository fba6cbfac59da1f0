"""Shared fixtures: a recording stand-in for the Database executor."""

from typing import Callable, Optional, Sequence, Union

import pytest

from models.property import Property

Rows = Union[list, Callable[[str, list], list]]


class RecordingDatabase:
    """Records every (statement, params) pair and answers with canned rows."""

    def __init__(self, rows: Rows = None, error: Optional[Exception] = None):
        self.rows = rows if rows is not None else []
        self.error = error
        self.calls: list[tuple[str, list]] = []

    def execute(self, statement: str, params: Sequence = ()) -> list:
        params = list(params)
        self.calls.append((statement, params))
        if self.error is not None:
            raise self.error
        return self.rows(statement, params) if callable(self.rows) else self.rows


@pytest.fixture
def recording_db() -> RecordingDatabase:
    return RecordingDatabase()


@pytest.fixture
def sample_property() -> Property:
    return Property(
        owner_id=3,
        title="Speed Lamp",
        description="Description of a cosy flat",
        thumbnail_photo_url="https://images.example.com/2086676/thumb.jpeg",
        cover_photo_url="https://images.example.com/2086676/cover.jpeg",
        cost_per_night=93061,
        street="536 Namsub Highway",
        city="Sotboske",
        province="Quebec",
        post_code="28142",
        country="Canada",
        parking_spaces=6,
        number_of_bathrooms=4,
        number_of_bedrooms=8,
    )
