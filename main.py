"""
main.py
-------
Command-line entry point for the LightBnB data layer.

Commands:
    init-db        Create the schema in the configured database.
    search         Search property listings.
    reservations   List a guest's reservations.
    user           Look up a user by email.
"""

import argparse
import sys

from config import DEFAULT_SEARCH_LIMIT
from db.connection import Database
from db.init_db import create_tables
from models.result import QueryStatus
from models.search import PropertySearchOptions
from services.listing_service import ListingService
from utils.logger import enable_sql_logging, get_logger

logger = get_logger(__name__)


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="LightBnB data layer")
    parser.add_argument("--sql", action="store_true", help="log each statement and its parameters")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="create tables if they do not exist")

    search = sub.add_parser("search", help="search property listings")
    search.add_argument("--city")
    search.add_argument("--min-price", type=float, dest="minimum_price_per_night")
    search.add_argument("--max-price", type=float, dest="maximum_price_per_night")
    search.add_argument("--min-rating", type=float, dest="minimum_rating")
    search.add_argument("--limit", type=int, default=DEFAULT_SEARCH_LIMIT)

    reservations = sub.add_parser("reservations", help="list a guest's reservations")
    reservations.add_argument("guest_id", type=int)
    reservations.add_argument("--limit", type=int, default=DEFAULT_SEARCH_LIMIT)

    user = sub.add_parser("user", help="look up a user by email")
    user.add_argument("email")

    return parser.parse_args(argv)


def run(args: argparse.Namespace, db: Database) -> int:
    """Execute one command against an open Database; returns the exit code."""
    if args.command == "init-db":
        create_tables(db)
        return 0

    service = ListingService(db)
    if args.command == "search":
        options = PropertySearchOptions(
            city=args.city,
            minimum_price_per_night=args.minimum_price_per_night,
            maximum_price_per_night=args.maximum_price_per_night,
            minimum_rating=args.minimum_rating,
        )
        result = service.get_all_properties(options, args.limit)
    elif args.command == "reservations":
        result = service.get_all_reservations(args.guest_id, args.limit)
    else:
        result = service.get_user_with_email(args.email)

    if result.status is QueryStatus.FAILED:
        print(f"Query failed: {result.error}", file=sys.stderr)
        return 1
    if result.status is QueryStatus.NOT_FOUND:
        print("Not found.")
        return 0

    rows = result.value if isinstance(result.value, list) else [result.value]
    if not rows:
        print("No results.")
    for row in rows:
        print(row)
    return 0


def main(argv=None) -> int:
    args = _parse_args(argv)
    if args.sql:
        enable_sql_logging()
    logger.info(f"Running command: {args.command}")
    with Database() as db:
        return run(args, db)


if __name__ == "__main__":
    sys.exit(main())
