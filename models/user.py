"""
models/user.py
--------------
Domain model for LightBnB users (guests and property owners).
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class User:
    """
    A registered user.

    Attributes:
        name: Display name.
        email: Login email, unique across users.
        password: Opaque password hash, never the plain password.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "User":
        """Build a User from a database row or request payload."""
        return cls(
            id=row.get("id"),
            name=row["name"],
            email=row["email"],
            password=row["password"],
        )

    def __str__(self) -> str:
        return f"#{self.id} {self.name} <{self.email}>"
