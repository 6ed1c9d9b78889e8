"""Result types threaded through repositories and services."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class SaveStatus(str, Enum):
    COMMITTED = "committed"
    NO_OP = "no_op"
    FAILED = "failed"


@dataclass(frozen=True)
class SaveResult:
    """Outcome of committing the changes staged on a repository.

    ``COMMITTED`` carries the number of rows the commit touched, ``NO_OP``
    means there was nothing to write, and ``FAILED`` carries the store
    exception that caused the rollback.
    """

    status: SaveStatus
    rows: int = 0
    cause: Exception | None = None

    @classmethod
    def committed(cls, rows: int) -> SaveResult:
        return cls(status=SaveStatus.COMMITTED, rows=rows)

    @classmethod
    def noop(cls) -> SaveResult:
        return cls(status=SaveStatus.NO_OP)

    @classmethod
    def failed(cls, cause: Exception) -> SaveResult:
        return cls(status=SaveStatus.FAILED, cause=cause)

    @property
    def is_committed(self) -> bool:
        return self.status is SaveStatus.COMMITTED

    @property
    def is_noop(self) -> bool:
        return self.status is SaveStatus.NO_OP

    @property
    def is_failed(self) -> bool:
        return self.status is SaveStatus.FAILED

    @property
    def succeeded(self) -> bool:
        """Legacy boolean view: true iff at least one row was affected."""
        return self.is_committed and self.rows > 0


class Outcome(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    FAILED = "failed"


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Outcome of a record service operation, consumed by the transport layer."""

    outcome: Outcome
    value: T | None = None
    message: str | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> OperationResult[T]:
        return cls(outcome=Outcome.OK, value=value)

    @classmethod
    def not_found(cls, message: str) -> OperationResult[T]:
        return cls(outcome=Outcome.NOT_FOUND, message=message)

    @classmethod
    def invalid(cls, message: str) -> OperationResult[T]:
        return cls(outcome=Outcome.INVALID, message=message)

    @classmethod
    def failed(cls, message: str) -> OperationResult[T]:
        return cls(outcome=Outcome.FAILED, message=message)

    @property
    def is_ok(self) -> bool:
        return self.outcome is Outcome.OK
