"""
repositories/property_repo.py
------------------------------
Data access layer for property listings.
All SQL queries related to the `properties` table live here.
"""

from typing import Optional

from config import DEFAULT_SEARCH_LIMIT
from models.property import Property
from models.search import PropertySearchOptions
from repositories.base import BaseRepository
from repositories.property_search import build_property_search
from utils.logger import get_logger

logger = get_logger(__name__)


class PropertyRepository(BaseRepository):
    """Repository for searching and inserting properties."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, prop: Property) -> Property:
        """
        Insert a new property.

        Args:
            prop: The Property to persist; id and average_rating are ignored.

        Returns:
            The inserted Property with its server-assigned id.
        """
        sql = """
            INSERT INTO properties (
                owner_id, title, description, thumbnail_photo_url, cover_photo_url,
                cost_per_night, parking_spaces, number_of_bathrooms, number_of_bedrooms,
                country, street, city, province, post_code)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING *;
        """
        row = self._insert_returning("add_property", sql, (
            prop.owner_id, prop.title, prop.description,
            prop.thumbnail_photo_url, prop.cover_photo_url,
            prop.cost_per_night, prop.parking_spaces,
            prop.number_of_bathrooms, prop.number_of_bedrooms,
            prop.country, prop.street, prop.city, prop.province, prop.post_code,
        ))
        created = Property.from_dict(row)
        logger.info(f"Added property #{created.id} '{created.title}' for owner {created.owner_id}")
        return created

    # ── READ ──────────────────────────────────────────────

    def search(
        self,
        options: Optional[PropertySearchOptions] = None,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> list[Property]:
        """
        Fetch reviewed properties matching the search options.

        Properties without any review are never returned, since the average
        rating comes from an inner join on property_reviews.

        Returns:
            Properties with `average_rating` populated.
        """
        query = build_property_search(options, limit)
        rows = self._fetch_all("get_all_properties", query.sql, query.params)
        logger.debug(f"Property search {options} returned {len(rows)} rows")
        return [Property.from_dict(r) for r in rows]
