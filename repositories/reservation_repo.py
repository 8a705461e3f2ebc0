"""
repositories/reservation_repo.py
---------------------------------
Data access layer for a guest's reservations.
"""

from config import DEFAULT_SEARCH_LIMIT
from models.reservation import ReservationListing
from repositories.base import BaseRepository


class ReservationRepository(BaseRepository):
    """Repository for reading reservations joined with their properties."""

    def get_for_guest(self, guest_id: int, limit: int = DEFAULT_SEARCH_LIMIT) -> list[ReservationListing]:
        """
        Fetch a guest's reservations with the reserved property and its rating.

        Reservations ending today are left out. Results are ordered by start
        date, earliest first.
        """
        sql = """
            SELECT reservations.id AS reservation_id,
                   reservations.guest_id,
                   reservations.start_date,
                   reservations.end_date,
                   properties.*,
                   AVG(rating) AS average_rating
            FROM property_reviews
            JOIN reservations ON reservations.id = property_reviews.reservation_id
            JOIN properties ON properties.id = reservations.property_id
            WHERE reservations.guest_id = %s
            AND reservations.end_date <> now()::date
            GROUP BY reservations.id, properties.id
            ORDER BY reservations.start_date
            LIMIT %s;
        """
        rows = self._fetch_all("get_all_reservations", sql, (guest_id, limit))
        return [ReservationListing.from_dict(r) for r in rows]
