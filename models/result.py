"""
models/result.py
----------------
Outcome of a service call: a value was found, nothing matched, or the
query failed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class QueryStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """
    Attributes:
        status: Which of the three outcomes occurred.
        value: The row(s) when found, otherwise None.
        error: The exception when the query failed.
    """
    status: QueryStatus
    value: Optional[T] = None
    error: Optional[Exception] = None

    @classmethod
    def found(cls, value: T) -> "QueryResult[T]":
        return cls(QueryStatus.FOUND, value)

    @classmethod
    def not_found(cls) -> "QueryResult[T]":
        return cls(QueryStatus.NOT_FOUND)

    @classmethod
    def failed(cls, error: Exception) -> "QueryResult[T]":
        return cls(QueryStatus.FAILED, error=error)

    @property
    def ok(self) -> bool:
        """True unless the query failed; not-found is a successful outcome."""
        return self.status is not QueryStatus.FAILED

    def unwrap(self) -> Optional[T]:
        """Return the value, re-raising the error if the query failed."""
        if self.error is not None:
            raise self.error
        return self.value
