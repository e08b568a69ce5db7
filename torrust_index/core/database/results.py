"""
Typed outcome of a single-row or single-list lookup.

A plain ``Optional`` cannot tell "no such row" apart from "the query failed".
``LookupResult`` keeps the two apart and carries the underlying exception when
the query failed, so callers that care can log or react to it while callers
that don't can still collapse it with ``unwrap_or_none()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class LookupStatus(str, Enum):
    FOUND = "found"
    MISSING = "missing"
    FAILED = "failed"


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """Outcome of a lookup: found with a value, missing, or failed with an error."""

    status: LookupStatus
    value: Optional[T] = None
    error: Optional[BaseException] = None

    @classmethod
    def found(cls, value: T) -> LookupResult[T]:
        return cls(status=LookupStatus.FOUND, value=value)

    @classmethod
    def missing(cls) -> LookupResult[T]:
        return cls(status=LookupStatus.MISSING)

    @classmethod
    def failed(cls, error: BaseException) -> LookupResult[T]:
        return cls(status=LookupStatus.FAILED, error=error)

    @classmethod
    def of(cls, value: Optional[T]) -> LookupResult[T]:
        """Wrap a query result, treating ``None`` as a miss."""
        return cls.missing() if value is None else cls.found(value)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def is_missing(self) -> bool:
        return self.status is LookupStatus.MISSING

    @property
    def is_failed(self) -> bool:
        return self.status is LookupStatus.FAILED

    def unwrap_or_none(self) -> Optional[T]:
        """Collapse to the value when found, ``None`` otherwise."""
        return self.value if self.is_found else None
