"""
repositories/reservation_repo.py
--------------------------------
Data access layer for reservations.
"""

from config import DEFAULT_RESULT_LIMIT
from db.connection import Database
from models.reservation import Reservation
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """Repository for reading a guest's reservations."""

    def __init__(self, db: Database):
        self.db = db

    def get_all_for_guest(self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT) -> list[Reservation]:
        """
        List a guest's past reservations (end date before today) with the
        reserved property's average rating, earliest stay first.

        Args:
            guest_id: ID of the guest user.
            limit: Maximum number of reservations to return.

        Returns:
            List of Reservation objects; empty when the guest has none.
        """
        sql = """
            SELECT reservations.id, reservations.guest_id, reservations.property_id,
                   reservations.start_date, reservations.end_date,
                   properties.title, properties.thumbnail_photo_url, properties.cost_per_night,
                   properties.city, properties.number_of_bedrooms,
                   properties.number_of_bathrooms, properties.parking_spaces,
                   avg(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON properties.id = reservations.property_id
            JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = %s
              AND reservations.end_date < now()::date
            GROUP BY properties.id, reservations.id
            ORDER BY reservations.start_date
            LIMIT %s;
        """
        rows = self.db.execute(sql, (guest_id, limit))
        logger.info(f"Found {len(rows)} past reservations for guest {guest_id}")
        return [self._row_to_reservation(r) for r in rows]

    @staticmethod
    def _row_to_reservation(row: tuple) -> Reservation:
        """Convert a listing row tuple to a Reservation domain object."""
        return Reservation(
            id=row[0],
            guest_id=row[1],
            property_id=row[2],
            start_date=row[3],
            end_date=row[4],
            title=row[5],
            thumbnail_photo_url=row[6],
            cost_per_night=row[7],
            city=row[8],
            number_of_bedrooms=row[9],
            number_of_bathrooms=row[10],
            parking_spaces=row[11],
            average_rating=float(row[12]) if row[12] is not None else None,
        )
