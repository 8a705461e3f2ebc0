"""
models/property.py
------------------
Domain model for rental property listings.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


@dataclass
class Property:
    """
    A property listed for short-term rental.

    Attributes:
        owner_id: ID of the owning user.
        title: Listing headline.
        cost_per_night: Nightly price in cents.
        country, street, city, province, post_code: Address fields.
        description: Free-text listing description.
        thumbnail_photo_url: Small photo shown in search results.
        cover_photo_url: Large photo shown on the listing page.
        parking_spaces, number_of_bathrooms, number_of_bedrooms: Amenities.
        active: Whether the listing is visible.
        id: Database primary key (None for new records).
        average_rating: Mean review rating, only set on listing queries.
    """
    owner_id: int
    title: str
    cost_per_night: int
    country: str
    street: str
    city: str
    province: str
    post_code: str
    description: str = ""
    thumbnail_photo_url: str = ""
    cover_photo_url: str = ""
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    active: bool = True
    id: Optional[int] = None
    average_rating: Optional[float] = None

    @property
    def price_per_night(self) -> float:
        """Nightly price in whole currency units."""
        return self.cost_per_night / 100

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "Property":
        """Build a Property from a database row, ignoring unknown columns."""
        known = {f.name for f in fields(cls)}
        data = {key: value for key, value in row.items() if key in known}
        if data.get("average_rating") is not None:
            data["average_rating"] = float(data["average_rating"])
        return cls(**data)

    def __str__(self) -> str:
        rating = f" | {self.average_rating:.2f}★" if self.average_rating is not None else ""
        return f"#{self.id} {self.title} | {self.city} | ${self.price_per_night:.2f}/night{rating}"
