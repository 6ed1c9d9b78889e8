"""Login flow: credential check followed by token issuance."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from src.bookstore.core.services.auth.credential_verifier import CredentialVerifier
from src.bookstore.core.services.jwt.jwt_gen import JwtGeneratorService


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a login attempt.

    A failed result deliberately carries no reason; the caller must not be
    able to tell a wrong username from a wrong password.
    """

    token: str | None = None

    @classmethod
    def failed(cls) -> LoginResult:
        return cls(token=None)

    @property
    def succeeded(self) -> bool:
        return self.token is not None


class LoginService:
    def __init__(
        self,
        credential_verifier: CredentialVerifier,
        token_issuer: JwtGeneratorService,
    ) -> None:
        self._credential_verifier = credential_verifier
        self._token_issuer = token_issuer

    def login(self, username: str, password: str) -> LoginResult:
        """Verify ``username``/``password`` and issue an access token.

        The password is never logged.
        """
        logger.info("{} login attempt", username)

        result = self._credential_verifier.password_sign_in(username, password)
        if not result.succeeded or result.user is None:
            logger.warning("{} not authenticated ({})", username, result.status.value)
            return LoginResult.failed()

        logger.info("{} successfully authenticated", username)
        return LoginResult(token=self._token_issuer.issue_token(result.user))
