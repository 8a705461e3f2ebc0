"""
utils/exceptions.py
-------------------
Exception types raised by the data-access layer.
"""

from typing import Optional


class LightBnBError(Exception):
    """Base class for all data-access errors."""


class DatabaseNotOpenError(LightBnBError):
    """Raised when a query is attempted on a closed or unopened Database."""

    def __init__(self):
        super().__init__("Database pool is not open. Call Database.open() first.")


class QueryError(LightBnBError):
    """
    A query failed to execute (connection loss, constraint violation, bad SQL).

    Attributes:
        operation: Short name of the repository operation that failed.
        original: The driver exception, if any.
    """

    def __init__(self, operation: str, original: Optional[BaseException] = None):
        self.operation = operation
        self.original = original
        detail = f": {original}" if original is not None else ""
        super().__init__(f"{operation} failed{detail}")


class InvalidInputError(LightBnBError):
    """A request payload could not be turned into a domain object."""

    def __init__(self, model: str, original: BaseException):
        self.model = model
        self.original = original
        super().__init__(f"invalid {model} input: {original!r}")
