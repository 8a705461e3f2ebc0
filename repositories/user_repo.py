"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from models.user import User
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository(BaseRepository):
    """Repository for lookups and inserts on the users table."""

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Fetch a user by their email address (exact match).

        Returns:
            User or None.
        """
        sql = "SELECT * FROM users WHERE email = %s;"
        row = self._fetch_one("get_user_with_email", sql, (email,))
        logger.debug(f"User lookup by email {email!r}: {'hit' if row else 'miss'}")
        return User.from_dict(row) if row else None

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Fetch a user by primary key, or None."""
        sql = "SELECT * FROM users WHERE id = %s;"
        row = self._fetch_one("get_user_with_id", sql, (user_id,))
        return User.from_dict(row) if row else None

    def add(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: The User to persist; its id is ignored.

        Returns:
            The inserted User with its server-assigned id.
        """
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING *;
        """
        row = self._insert_returning("add_user", sql, (user.name, user.email, user.password))
        created = User.from_dict(row)
        logger.info(f"Added user #{created.id} ({created.email})")
        return created
