"""
Test configuration and fixtures for the LightBnB data layer.
Provides an in-memory stand-in for the Database handle so repositories and
services run without a PostgreSQL server.
"""

import itertools
from contextlib import contextmanager
from datetime import date

import pytest

from models.property import Property
from models.user import User

USER_COLUMNS = ("name", "email", "password")
PROPERTY_COLUMNS = (
    "owner_id", "title", "description", "thumbnail_photo_url", "cover_photo_url",
    "cost_per_night", "parking_spaces", "number_of_bathrooms", "number_of_bedrooms",
    "country", "street", "city", "province", "post_code",
)


class FakeCursor:
    """Records statements and serves rows from the database's responder."""

    def __init__(self, db):
        self.db = db
        self._rows = []

    def execute(self, sql, params=None):
        self.db.executed.append((sql, tuple(params or ())))
        result = self.db.responder(sql, tuple(params or ()))
        if isinstance(result, Exception):
            raise result
        self._rows = list(result or [])

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


class FakeConnection:
    def __init__(self, db):
        self.db = db
        self.closed = 0

    def cursor(self, cursor_factory=None):
        return FakeCursor(self.db)

    def commit(self):
        self.db.commits += 1

    def rollback(self):
        self.db.rollbacks += 1
        if self.db.rollback_error is not None:
            self.closed = 2
            raise self.db.rollback_error


class FakeDatabase:
    """
    Quacks like db.connection.Database.

    `responder(sql, params)` returns the rows for a statement, or an
    exception instance to raise from cursor.execute(). `borrow_error` is
    raised when a connection is requested, `rollback_error` from
    conn.rollback() (a connection the server already dropped).
    """

    def __init__(self, responder=None, borrow_error=None, rollback_error=None):
        self.responder = responder or (lambda sql, params: [])
        self.borrow_error = borrow_error
        self.rollback_error = rollback_error
        self.executed = []
        self.commits = 0
        self.rollbacks = 0
        self.borrowed = 0
        self.released = 0
        self.discarded = 0

    def get_connection(self):
        if self.borrow_error is not None:
            raise self.borrow_error
        self.borrowed += 1
        return FakeConnection(self)

    def release_connection(self, conn):
        self.released += 1
        if conn.closed:
            self.discarded += 1

    @contextmanager
    def connection(self):
        conn = self.get_connection()
        try:
            yield conn
        finally:
            self.release_connection(conn)

    def cursor(self, conn):
        return conn.cursor()

    @property
    def last_sql(self):
        return self.executed[-1][0]

    @property
    def last_params(self):
        return self.executed[-1][1]


class MemoryTables:
    """Serves the users/properties statements from in-memory lists."""

    def __init__(self):
        self.users = []
        self.properties = []
        self._ids = itertools.count(1)

    def __call__(self, sql, params):
        text = " ".join(sql.split())
        if text.startswith("INSERT INTO users"):
            row = {"id": next(self._ids), **dict(zip(USER_COLUMNS, params))}
            self.users.append(row)
            return [row]
        if text.startswith("INSERT INTO properties"):
            row = {"id": next(self._ids), **dict(zip(PROPERTY_COLUMNS, params)), "active": True}
            self.properties.append(row)
            return [row]
        if "FROM users WHERE email" in text:
            return [u for u in self.users if u["email"] == params[0]]
        if "FROM users WHERE id" in text:
            return [u for u in self.users if u["id"] == params[0]]
        return []


@pytest.fixture
def fake_db():
    """A database whose every statement returns no rows."""
    return FakeDatabase()


@pytest.fixture
def memory_db():
    """A database backed by in-memory users and properties tables."""
    return FakeDatabase(MemoryTables())


@pytest.fixture
def sample_user():
    return User(name="Devin Sanders", email="tristanjacobs@gmail.com", password="$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u.")


@pytest.fixture
def sample_property():
    return Property(
        owner_id=1,
        title="Speed lamp",
        description="description",
        thumbnail_photo_url="https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg?auto=compress&cs=tinysrgb&h=350",
        cover_photo_url="https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
        cost_per_night=93061,
        parking_spaces=6,
        number_of_bathrooms=4,
        number_of_bedrooms=8,
        country="Canada",
        street="536 Namsub Highway",
        city="Sotboske",
        province="Quebec",
        post_code="28142",
    )


def property_row(**overrides):
    """A `properties.*` row plus average_rating, as the listing query returns it."""
    row = {
        "id": 1,
        "owner_id": 1,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "thumb.jpg",
        "cover_photo_url": "cover.jpg",
        "cost_per_night": 93061,
        "parking_spaces": 6,
        "number_of_bathrooms": 4,
        "number_of_bedrooms": 8,
        "country": "Canada",
        "street": "536 Namsub Highway",
        "city": "Vancouver",
        "province": "British Columbia",
        "post_code": "28142",
        "active": True,
        "average_rating": 4.25,
    }
    row.update(overrides)
    return row


def reservation_row(**overrides):
    row = property_row()
    row.update({
        "reservation_id": 7,
        "guest_id": 3,
        "start_date": date(2018, 9, 11),
        "end_date": date(2018, 9, 26),
    })
    row.update(overrides)
    return row
