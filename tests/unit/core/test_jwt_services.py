"""Access token issuance and verification."""

import pytest
from authlib.jose import jwt

from src.bookstore.core.exceptions import ConfigurationError, TokenVerificationError
from src.bookstore.core.services import JwtGeneratorService, JwtVerificationService
from src.bookstore.entities.core.identity import IdentityUser
from src.bookstore.runtime.config.config_data import JWTConfig
from tests.fixtures.auth import FIXED_NOW, ISSUER, SIGNING_KEY


@pytest.fixture
def admin_identity() -> IdentityUser:
    return IdentityUser(
        id="42",
        username="a@b.com",
        email="a@b.com",
        password_hash="unused",
        roles=["Admin"],
    )


class TestJwtGeneratorService:
    """Token payload and construction checks."""

    def test_claims_for_admin_identity(self, token_issuer: JwtGeneratorService, admin_identity):
        token = token_issuer.issue_token(admin_identity)

        claims = jwt.decode(token, SIGNING_KEY)

        assert claims["sub"] == "a@b.com"
        assert claims["nameid"] == "42"
        assert claims["role"] == ["Admin"]
        assert claims["iss"] == ISSUER
        assert claims["aud"] == ISSUER
        assert claims["iat"] == FIXED_NOW
        assert claims["nbf"] == FIXED_NOW
        assert claims["exp"] == FIXED_NOW + 300
        assert claims.header["alg"] == "HS256"

    def test_tokens_differ_only_in_jti(self, token_issuer: JwtGeneratorService, admin_identity):
        first = jwt.decode(token_issuer.issue_token(admin_identity), SIGNING_KEY)
        second = jwt.decode(token_issuer.issue_token(admin_identity), SIGNING_KEY)

        assert first["jti"] != second["jti"]
        assert {k: v for k, v in first.items() if k != "jti"} == {
            k: v for k, v in second.items() if k != "jti"
        }

    def test_identity_without_roles_gets_empty_role_list(self, token_issuer: JwtGeneratorService):
        user = IdentityUser(username="plain", email="plain@b.com", password_hash="x")

        claims = token_issuer.build_claims(user)

        assert claims["role"] == []
        assert claims["nameid"] == user.id

    def test_configured_lifetime_is_used(self, admin_identity):
        config = JWTConfig(signing_key=SIGNING_KEY, issuer=ISSUER, access_token_ttl_seconds=60)
        issuer = JwtGeneratorService(config, clock=lambda: FIXED_NOW)

        assert issuer.build_claims(admin_identity)["exp"] == FIXED_NOW + 60

    def test_custom_claim_names(self, admin_identity):
        config = JWTConfig(
            signing_key=SIGNING_KEY,
            claims={"subject_id": "uid", "roles": "roles"},
        )
        claims = JwtGeneratorService(config, clock=lambda: FIXED_NOW).build_claims(admin_identity)

        assert claims["uid"] == "42"
        assert claims["roles"] == ["Admin"]

    def test_missing_signing_key_fails_at_construction(self):
        with pytest.raises(ConfigurationError):
            JwtGeneratorService(JWTConfig(signing_key=None))

    def test_short_signing_key_fails_at_construction(self):
        with pytest.raises(ConfigurationError):
            JwtGeneratorService(JWTConfig(signing_key="too-short"))


class TestJwtVerificationService:
    """Signature, issuer, audience and lifetime enforcement."""

    def test_issued_token_verifies(
        self,
        token_issuer: JwtGeneratorService,
        token_verifier: JwtVerificationService,
        admin_identity,
    ):
        token = token_issuer.issue_token(admin_identity)

        claims = token_verifier.verify(token)

        assert claims.subject == "a@b.com"
        assert claims.subject_id == "42"
        assert claims.roles == ["Admin"]
        assert claims.expires_at == FIXED_NOW + 300
        assert claims.jti

    def test_wrong_key_fails(
        self,
        token_issuer: JwtGeneratorService,
        token_verifier: JwtVerificationService,
        admin_identity,
    ):
        token = token_issuer.issue_token(admin_identity)

        with pytest.raises(TokenVerificationError):
            token_verifier.verify(token, key="some-other-signing-key-that-is-long-enough")

    def test_expired_token_fails(self, jwt_config, token_issuer: JwtGeneratorService, admin_identity):
        token = token_issuer.issue_token(admin_identity)
        later = JwtVerificationService(jwt_config, clock=lambda: FIXED_NOW + 301)

        with pytest.raises(TokenVerificationError):
            later.verify(token)

    def test_foreign_issuer_fails(self, token_verifier: JwtVerificationService, admin_identity):
        config = JWTConfig(signing_key=SIGNING_KEY, issuer="someone-else")
        token = JwtGeneratorService(config, clock=lambda: FIXED_NOW).issue_token(admin_identity)

        with pytest.raises(TokenVerificationError):
            token_verifier.verify(token)

    def test_garbage_fails(self, token_verifier: JwtVerificationService):
        with pytest.raises(TokenVerificationError):
            token_verifier.verify("not-a-jwt")
