"""
models/search.py
----------------
Search options accepted by the property listing query, and the rendered
query handed to the database.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional, Tuple, Union

Number = Union[int, float, str]


@dataclass
class PropertySearchOptions:
    """
    Optional search criteria for property listings.

    Values usually arrive straight from a search form, so numbers may be
    strings. ``None`` and ``""`` both mean "not supplied".

    Attributes:
        city: Case-insensitive substring of the property's city.
        minimum_price_per_night: Exclusive lower price bound, whole currency units.
        maximum_price_per_night: Exclusive upper price bound, whole currency units.
        minimum_rating: Inclusive lower bound on the average review rating.
    """
    city: Optional[str] = None
    minimum_price_per_night: Optional[Number] = None
    maximum_price_per_night: Optional[Number] = None
    minimum_rating: Optional[Number] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "PropertySearchOptions":
        """Build options from a mapping, ignoring keys that are not search criteria."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def is_empty(self) -> bool:
        """
        True when every criterion is None or an empty string.

        This is stricter than the JavaScript app's loose ``!= ''`` test: a
        numeric 0 counts as supplied here (it switches the query to the
        filtered, cost-ordered shape without adding a condition), and None
        counts as empty rather than supplied.
        """
        return all(getattr(self, f.name) in (None, "") for f in fields(self))


@dataclass(frozen=True)
class PropertySearchQuery:
    """A SQL template with positional placeholders and its bound values, in order."""
    sql: str
    params: Tuple[Any, ...] = field(default_factory=tuple)
