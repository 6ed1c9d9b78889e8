import time
import uuid
from collections.abc import Callable
from typing import Any

from authlib.jose import JoseError, jwt
from loguru import logger

from src.bookstore.core.exceptions import ConfigurationError
from src.bookstore.entities.core.identity.entity import IdentityUser
from src.bookstore.runtime.config.config_data import JWTConfig

MIN_SIGNING_KEY_BYTES = 32


def validate_signing_key(signing_key: str | None) -> str:
    """Return the key if it is usable for HS256, raise ConfigurationError otherwise."""
    if not signing_key:
        raise ConfigurationError("JWT signing key not configured")
    if len(signing_key.encode("utf-8")) < MIN_SIGNING_KEY_BYTES:
        raise ConfigurationError(
            f"JWT signing key must be at least {MIN_SIGNING_KEY_BYTES} bytes"
        )
    return signing_key


def _new_jti() -> str:
    return str(uuid.uuid4())


class JwtGeneratorService:
    """Issues signed access tokens for identities that already passed sign-in.

    The service never checks passwords. Given the same identity, config and
    clock, two tokens differ only in their ``jti``.
    """

    def __init__(
        self,
        jwt_config: JWTConfig,
        clock: Callable[[], float] = time.time,
        jti_factory: Callable[[], str] = _new_jti,
    ) -> None:
        self._config = jwt_config
        self._secret = validate_signing_key(jwt_config.signing_key)
        self._clock = clock
        self._jti_factory = jti_factory

    @property
    def lifetime_seconds(self) -> int:
        return self._config.access_token_ttl_seconds

    def build_claims(self, identity: IdentityUser) -> dict[str, Any]:
        """Assemble the payload for ``identity`` at the current clock reading.

        Args:
            identity: Verified identity with its roles loaded

        Returns:
            Claims dictionary ready for signing
        """
        if not identity.email:
            raise ValueError("Identity has no email to use as token subject")

        now = int(self._clock())
        names = self._config.claims
        return {
            "iss": self._config.issuer,
            "aud": self._config.issuer,
            "sub": identity.email,
            "jti": self._jti_factory(),
            names.subject_id: identity.id,
            names.roles: list(identity.roles),
            "iat": now,
            "nbf": now,
            "exp": now + self.lifetime_seconds,
        }

    def issue_token(self, identity: IdentityUser) -> str:
        """Sign an access token for ``identity``.

        Returns:
            Compact JWS string
        """
        payload = self.build_claims(identity)
        header = {"alg": self._config.algorithm, "typ": "JWT"}
        try:
            token = jwt.encode(header, payload, self._secret)
        except JoseError as e:
            # Only reachable with a broken key or algorithm, both checked at startup.
            logger.error("JWT encoding failed: {}", type(e).__name__)
            raise ConfigurationError("JWT encoding failed") from e

        logger.debug("Issued access token jti={} for subject id {}", payload["jti"], identity.id)
        return token.decode() if isinstance(token, bytes) else token
