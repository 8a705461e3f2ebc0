"""
models/reservation.py
---------------------
Domain models for reservations and the reservation listing shown to a guest.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from models.property import Property

_RESERVATION_COLUMNS = ("reservation_id", "guest_id", "start_date", "end_date")


@dataclass
class Reservation:
    """A guest's booked stay at a property."""
    guest_id: int
    property_id: int
    start_date: date
    end_date: date
    id: Optional[int] = None


@dataclass
class ReservationListing:
    """
    One row of a guest's reservation history: the reservation, the reserved
    property and that property's average review rating.
    """
    reservation: Reservation
    property: Property
    average_rating: Optional[float] = None

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "ReservationListing":
        """
        Split a joined reservations/properties row.

        The row carries the reservation id as ``reservation_id`` and the
        property columns under their own names.
        """
        prop = Property.from_dict({k: v for k, v in row.items() if k not in _RESERVATION_COLUMNS})
        reservation = Reservation(
            id=row["reservation_id"],
            guest_id=row["guest_id"],
            property_id=prop.id,
            start_date=row["start_date"],
            end_date=row["end_date"],
        )
        return cls(
            reservation=reservation,
            property=prop,
            average_rating=prop.average_rating,
        )

    def __str__(self) -> str:
        return f"{self.reservation.start_date} → {self.reservation.end_date} | {self.property}"
