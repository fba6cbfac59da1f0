"""
models/property.py
------------------
Domain model for rentable properties.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from errors import ValidationError
from models.money import cents_to_dollars

# Column order for INSERT; placeholder N binds INSERT_COLUMNS[N - 1].
INSERT_COLUMNS: tuple[str, ...] = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)

COLUMNS: tuple[str, ...] = ("id",) + INSERT_COLUMNS

_INT_FIELDS = ("owner_id", "cost_per_night", "parking_spaces", "number_of_bathrooms", "number_of_bedrooms")


@dataclass
class Property:
    """
    Represents a listing in the properties table.

    Attributes:
        owner_id: ID of the user who owns the listing.
        title: Listing headline.
        description: Free-text description.
        thumbnail_photo_url: Small photo shown in search results.
        cover_photo_url: Large photo on the listing page.
        cost_per_night: Nightly price in integer cents.
        street, city, province, post_code, country: Address parts.
        parking_spaces, number_of_bathrooms, number_of_bedrooms: Counts.
        id: Database primary key (None for new records).
        average_rating: Mean review rating; only set by searches.
    """
    owner_id: int
    title: str
    description: str
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    street: str
    city: str
    province: str
    post_code: str
    country: str
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    id: Optional[int] = None
    average_rating: Optional[float] = None

    @property
    def price_per_night(self) -> Decimal:
        """Nightly price in dollars."""
        return cents_to_dollars(self.cost_per_night)

    def insert_values(self) -> tuple:
        """Values in INSERT_COLUMNS order."""
        return tuple(getattr(self, c) for c in INSERT_COLUMNS)

    def validate(self) -> None:
        """Check that every insertable column is present and correctly typed."""
        problems = []
        for name in INSERT_COLUMNS:
            value = getattr(self, name)
            if name in _INT_FIELDS:
                # bool is an int subclass but never a valid count or price
                if not isinstance(value, int) or isinstance(value, bool):
                    problems.append(f"{name} must be an integer")
                elif value < 0:
                    problems.append(f"{name} must not be negative")
            elif value is None or not str(value).strip():
                problems.append(f"{name} is required")
        if problems:
            raise ValidationError("Invalid property: " + "; ".join(problems))
