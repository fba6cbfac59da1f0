"""
models/reservation.py
---------------------
Domain model for a guest's reservation, flattened with a summary of the
reserved property as returned by the listing query.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Reservation:
    """
    Represents a reservation row joined with its property.

    Attributes:
        guest_id: ID of the user who made the reservation.
        property_id: ID of the reserved property.
        start_date: First night of the stay.
        end_date: Checkout date.
        id: Database primary key.
        title .. parking_spaces: Copied from the reserved property row.
        cost_per_night: Nightly price of the property, in integer cents.
        average_rating: Mean review rating of the property.
    """
    guest_id: int
    property_id: int
    start_date: date
    end_date: date
    id: Optional[int] = None
    title: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cost_per_night: Optional[int] = None
    city: Optional[str] = None
    number_of_bedrooms: Optional[int] = None
    number_of_bathrooms: Optional[int] = None
    parking_spaces: Optional[int] = None
    average_rating: Optional[float] = None

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days
