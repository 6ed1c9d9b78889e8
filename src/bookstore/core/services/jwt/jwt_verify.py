"""JWT verification service."""

import time
from collections.abc import Callable

from authlib.jose import JoseError, jwt
from loguru import logger

from src.bookstore.core.exceptions import TokenVerificationError
from src.bookstore.core.models.claims import TokenClaims
from src.bookstore.core.services.jwt.jwt_gen import validate_signing_key
from src.bookstore.runtime.config.config_data import JWTConfig


def _as_list(v) -> list[str]:
    if v is None:
        return []
    return [v] if isinstance(v, str) else list(v)


class JwtVerificationService:
    """Validates tokens issued by :class:`JwtGeneratorService`.

    Signature, issuer, audience and lifetime are all enforced.
    """

    def __init__(
        self,
        jwt_config: JWTConfig,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config = jwt_config
        self._secret = validate_signing_key(jwt_config.signing_key)
        self._clock = clock

    def verify(self, token: str, *, key: str | None = None) -> TokenClaims:
        """Verify ``token`` and return its claims.

        Args:
            token: Compact JWS string
            key: Override verification key (defaults to the configured key)

        Raises:
            TokenVerificationError: If any check fails
        """
        cfg = self._config
        claims_options = {
            "iss": {"essential": True, "value": cfg.issuer},
            "aud": {"essential": True, "value": cfg.issuer},
            "sub": {"essential": True},
            "exp": {"essential": True},
        }

        try:
            claims = jwt.decode(token, key or self._secret, claims_options=claims_options)
            if claims.header.get("alg") != cfg.algorithm:
                raise TokenVerificationError("Disallowed JWT algorithm")
            claims.validate(now=int(self._clock()), leeway=cfg.clock_skew)
        except (JoseError, ValueError) as exc:
            logger.debug("JWT rejected: {}", type(exc).__name__)
            raise TokenVerificationError(f"JWT error: {exc}") from exc

        names = cfg.claims
        return TokenClaims(
            raw_token=token,
            issuer=claims["iss"],
            audience=claims["aud"],
            subject=claims["sub"],
            subject_id=claims.get(names.subject_id),
            roles=_as_list(claims.get(names.roles)),
            jti=claims.get("jti"),
            issued_at=claims.get("iat"),
            expires_at=claims["exp"],
            all_claims=dict(claims),
        )
