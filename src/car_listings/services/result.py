"""Explicit success/failure results returned by the listing service."""

import enum
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from ..exceptions import ResultError

T = TypeVar("T")


class ErrorKind(enum.Enum):
    """Category of a failed operation."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


@dataclass
class ListingError:
    """Record of why an operation failed."""

    kind: ErrorKind
    message: str
    details: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class Result(Generic[T]):
    """Outcome of a service call: either a value or an error."""

    value: T | None = None
    error: ListingError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        details: list[dict[str, Any]] | None = None,
    ) -> "Result[T]":
        return cls(error=ListingError(kind=kind, message=message, details=details or []))

    def unwrap(self) -> T | None:
        """Return the value, raising ResultError if this is a failure."""
        if self.error is not None:
            raise ResultError(self.error)
        return self.value

    def __repr__(self) -> str:
        if self.error is not None:
            return f"Result(error={self.error.kind.value}: {self.error.message!r})"
        return f"Result(value={self.value!r})"
