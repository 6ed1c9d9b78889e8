"""Password sign-in against the identity store."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

from sqlmodel import Session

from src.bookstore.core.security import verify_password
from src.bookstore.entities.core.identity import IdentityRepository, IdentityUser


class SignInStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    LOCKED_OUT = "locked_out"
    NOT_ALLOWED = "not_allowed"


@dataclass(frozen=True)
class SignInResult:
    status: SignInStatus
    user: IdentityUser | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is SignInStatus.SUCCEEDED


def _utc_now() -> datetime:
    return datetime.now(UTC)


class CredentialVerifier:
    """Checks a username/password pair.

    Unknown usernames and wrong passwords produce the same ``FAILED`` status.
    Lockout and disabled-account state are read from the stored identity;
    this class never mutates it.
    """

    def __init__(self, db_session: Session, clock: Callable[[], datetime] = _utc_now):
        self._identity_repo = IdentityRepository(db_session)
        self._clock = clock

    def password_sign_in(self, username: str, password: str) -> SignInResult:
        user = self._identity_repo.find_by_username(username)
        if user is None:
            return SignInResult(SignInStatus.FAILED)

        if self._is_locked_out(user):
            return SignInResult(SignInStatus.LOCKED_OUT)

        if not verify_password(password, user.password_hash):
            return SignInResult(SignInStatus.FAILED)

        if not user.is_active:
            return SignInResult(SignInStatus.NOT_ALLOWED)

        return SignInResult(SignInStatus.SUCCEEDED, user=user)

    def _is_locked_out(self, user: IdentityUser) -> bool:
        if user.lockout_end is None:
            return False
        lockout_end = user.lockout_end
        if lockout_end.tzinfo is None:
            # SQLite drops tzinfo; values are always written as UTC.
            lockout_end = lockout_end.replace(tzinfo=UTC)
        return lockout_end > self._clock()
