"""Exceptions raised by the bookstore core.

Expected conditions (a missing record, a rejected update, a failed login) are
reported through result objects instead. Only faults the caller cannot branch
on are raised.
"""


class BookstoreError(Exception):
    """Base class for bookstore errors."""


class ConfigurationError(BookstoreError):
    """Required configuration is missing or invalid; fatal at startup."""


class StoreUnavailableError(BookstoreError):
    """The backing store could not be reached or timed out."""


class TokenVerificationError(BookstoreError):
    """A bearer token failed signature, issuer, audience or lifetime checks."""


class RecordOperationError(BookstoreError):
    """A record operation was rejected by the store and rolled back."""
