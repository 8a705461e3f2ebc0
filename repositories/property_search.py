"""
repositories/property_search.py
-------------------------------
Builds the parameterized property listing query from sparse search options.

Conditions are collected as (fragment, params) pairs and rendered once, so
placeholder order always matches parameter order. This module never talks
to the database.
"""

from typing import Any, List, Optional, Tuple

from config import DEFAULT_SEARCH_LIMIT
from models.search import PropertySearchOptions, PropertySearchQuery

Clause = Tuple[str, Tuple[Any, ...]]

_SELECT = """
    SELECT properties.*, AVG(property_reviews.rating) AS average_rating
    FROM properties
    JOIN property_reviews ON property_id = properties.id"""


def _city_clause(options: PropertySearchOptions) -> Optional[Clause]:
    # LOWER on both sides so "vancouver" matches "Vancouver"
    if not options.city:
        return None
    return "LOWER(city) LIKE LOWER(%s)", (f"%{options.city}%",)


def _price_clause(options: PropertySearchOptions) -> Optional[Clause]:
    # A single bound is ignored, not applied as a half-open range.
    low, high = options.minimum_price_per_night, options.maximum_price_per_night
    if not (low and high):
        return None
    return "cost_per_night / 100 > %s AND cost_per_night / 100 < %s", (low, high)


def _rating_clause(options: PropertySearchOptions) -> Optional[Clause]:
    if not options.minimum_rating:
        return None
    return "AVG(property_reviews.rating) >= %s", (options.minimum_rating,)


def _render(keyword: str, clauses: List[Clause]) -> Tuple[str, List[Any]]:
    if not clauses:
        return "", []
    text = f" {keyword} " + " AND ".join(fragment for fragment, _ in clauses)
    params = [value for _, values in clauses for value in values]
    return text, params


def build_property_search(
    options: Optional[PropertySearchOptions] = None,
    limit: int = DEFAULT_SEARCH_LIMIT,
) -> PropertySearchQuery:
    """
    Build the listing query for the given search options.

    With no options supplied the query is unfiltered and unordered. Otherwise
    the result is filtered by whichever criteria apply, grouped per property,
    optionally filtered on average rating, and ordered by nightly cost.

    Args:
        options: Search criteria; None behaves like all-empty options.
        limit: Maximum number of rows to return.

    Returns:
        The SQL text and its parameters. Bind order is city pattern, price
        bounds (min, max), minimum rating, limit.
    """
    options = options or PropertySearchOptions()

    if options.is_empty():
        sql = _SELECT + """
    GROUP BY properties.id
    LIMIT %s;
    """
        return PropertySearchQuery(sql, (limit,))

    where = [c for c in (_city_clause(options), _price_clause(options)) if c]
    having = [c for c in (_rating_clause(options),) if c]

    where_sql, where_params = _render("WHERE", where)
    having_sql, having_params = _render("HAVING", having)

    sql = _SELECT + where_sql + "\n    GROUP BY properties.id" + having_sql + """
    ORDER BY cost_per_night
    LIMIT %s;
    """
    params = (*where_params, *having_params, limit)
    return PropertySearchQuery(sql, params)
