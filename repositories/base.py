"""
repositories/base.py
--------------------
Shared query execution for the LightBnB repositories.
Each helper borrows one pooled connection, runs one statement and returns it.
Every driver failure, including failing to borrow a connection, surfaces as
QueryError.
"""

from typing import Any, Callable, Optional, Sequence

import psycopg2

from db.connection import Database
from utils.exceptions import DatabaseNotOpenError, QueryError
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseRepository:
    """Runs parameterized statements against an injected Database."""

    def __init__(self, db: Database):
        self.db = db

    def _fetch_one(self, operation: str, sql: str, params: Sequence[Any]) -> Optional[dict]:
        """Return the first row of a read query, or None when nothing matches."""
        return self._run(operation, sql, params, lambda cur: cur.fetchone())

    def _fetch_all(self, operation: str, sql: str, params: Sequence[Any]) -> list[dict]:
        """Return every row of a read query."""
        return self._run(operation, sql, params, lambda cur: cur.fetchall())

    def _insert_returning(self, operation: str, sql: str, params: Sequence[Any]) -> dict:
        """Run an INSERT ... RETURNING * and return the inserted row."""
        row = self._fetch_one(operation, sql, params)
        if row is None:
            raise QueryError(operation)
        return row

    def _run(self, operation: str, sql: str, params: Sequence[Any], fetch: Callable):
        try:
            conn = self.db.get_connection()
        except (psycopg2.Error, DatabaseNotOpenError) as e:
            logger.error(f"query error in {operation}: no connection available: {e}")
            raise QueryError(operation, e) from e

        try:
            logger.debug(f"{operation}: {' '.join(sql.split())} {tuple(params)}")
            with self.db.cursor(conn) as cur:
                cur.execute(sql, params)
                result = fetch(cur)
            conn.commit()
            return result
        except psycopg2.Error as e:
            self._rollback(conn, operation)
            logger.error(f"query error in {operation}: {e}")
            raise QueryError(operation, e) from e
        finally:
            self.db.release_connection(conn)

    @staticmethod
    def _rollback(conn, operation: str) -> None:
        # A dropped connection cannot roll back; the original error still wins.
        try:
            conn.rollback()
        except psycopg2.Error as e:
            logger.warning(f"Rollback after failed {operation} did not complete: {e}")
