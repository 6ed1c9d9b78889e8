"""Translation of record operation outcomes into HTTP responses."""

from typing import TypeVar

from fastapi import HTTPException

from src.bookstore.core.exceptions import RecordOperationError
from src.bookstore.core.models.results import OperationResult, Outcome

T = TypeVar("T")

GENERIC_ERROR_DETAIL = "Something went wrong. Please contact the Administrator"


def unwrap(result: OperationResult[T]) -> T | None:
    """Return the value of an OK result, raise the matching HTTP error otherwise."""
    if result.outcome is Outcome.OK:
        return result.value
    if result.outcome is Outcome.NOT_FOUND:
        raise HTTPException(status_code=404, detail=result.message)
    if result.outcome is Outcome.INVALID:
        raise HTTPException(status_code=400, detail=result.message)
    raise RecordOperationError(result.message or "Record operation failed")
