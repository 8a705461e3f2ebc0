"""
services/listing_service.py
----------------------------
Caller-facing operations of the LightBnB data layer.

Every method returns a QueryResult instead of raising, so the web layer can
tell "no such row" apart from "the database failed".
"""

from typing import Any, Mapping, Optional, Union

from config import DEFAULT_SEARCH_LIMIT
from db.connection import Database
from models.property import Property
from models.reservation import ReservationListing
from models.result import QueryResult
from models.search import PropertySearchOptions
from models.user import User
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository
from utils.exceptions import InvalidInputError, LightBnBError
from utils.logger import get_logger

logger = get_logger(__name__)


class ListingService:
    """Users, reservations and property listings backed by one Database."""

    def __init__(self, db: Database):
        self.user_repo = UserRepository(db)
        self.property_repo = PropertyRepository(db)
        self.reservation_repo = ReservationRepository(db)

    # ── Users ─────────────────────────────────────────────

    def get_user_with_email(self, email: str) -> QueryResult[User]:
        """Get a single user given their email."""
        return self._lookup(self.user_repo.get_by_email, email)

    def get_user_with_id(self, user_id: int) -> QueryResult[User]:
        """Get a single user given their id."""
        return self._lookup(self.user_repo.get_by_id, user_id)

    def add_user(self, user: Union[User, Mapping[str, Any]]) -> QueryResult[User]:
        """Add a new user from a User or a {name, email, password} mapping."""
        return self._lookup(lambda: self.user_repo.add(_coerce(User, user)))

    # ── Reservations ──────────────────────────────────────

    def get_all_reservations(
        self, guest_id: int, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> QueryResult[list[ReservationListing]]:
        """Get all reservations for a single guest; an empty list is still FOUND."""
        return self._lookup(self.reservation_repo.get_for_guest, guest_id, limit)

    # ── Properties ────────────────────────────────────────

    def get_all_properties(
        self,
        options: Optional[Union[PropertySearchOptions, Mapping[str, Any]]] = None,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> QueryResult[list[Property]]:
        """Search properties with optional city, price range and rating filters."""
        return self._lookup(
            lambda: self.property_repo.search(_coerce(PropertySearchOptions, options), limit)
        )

    def add_property(self, prop: Union[Property, Mapping[str, Any]]) -> QueryResult[Property]:
        """Add a property from a Property or a mapping of its columns."""
        return self._lookup(lambda: self.property_repo.add(_coerce(Property, prop)))

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _lookup(func, *args) -> QueryResult:
        try:
            value = func(*args)
        except LightBnBError as e:
            logger.error(f"query error: {e}")
            return QueryResult.failed(e)
        if value is None:
            return QueryResult.not_found()
        return QueryResult.found(value)


def _coerce(model, data):
    """Return `data` as a `model` instance, building it from a mapping if needed."""
    if isinstance(data, model):
        return data
    try:
        return model.from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise InvalidInputError(model.__name__, e) from e
