"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.

A `Database` is constructed once at process start, opened, handed to the
repositories that need it, and closed at shutdown. Uses psycopg2's
ThreadedConnectionPool so concurrent web requests can share it.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2 import pool, extras

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.exceptions import DatabaseNotOpenError
from utils.logger import get_logger

logger = get_logger(__name__)


class Database:
    """Data-access handle owning a psycopg2 connection pool."""

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        min_conn: int = DB_POOL_MIN,
        max_conn: int = DB_POOL_MAX,
    ):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self._pool: Optional[pool.ThreadedConnectionPool] = None

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def open(self) -> None:
        """
        Initialize the connection pool. Calling it twice is a no-op.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.ThreadedConnectionPool(self.min_conn, self.max_conn, self.dsn)
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")

    def get_connection(self):
        """
        Borrow a connection from the pool.

        Raises:
            DatabaseNotOpenError: If the pool has not been opened.
        """
        if self._pool is None:
            raise DatabaseNotOpenError()
        return self._pool.getconn()

    def release_connection(self, conn) -> None:
        """Return a borrowed connection back to the pool; dead ones are discarded."""
        if self._pool is not None:
            self._pool.putconn(conn, close=bool(conn.closed))

    @contextmanager
    def connection(self) -> Iterator:
        """Borrow a connection for the duration of a `with` block."""
        conn = self.get_connection()
        try:
            yield conn
        finally:
            self.release_connection(conn)

    def cursor(self, conn):
        """Open a cursor that yields rows as column-name dicts."""
        return conn.cursor(cursor_factory=extras.RealDictCursor)

    def __enter__(self) -> "Database":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
