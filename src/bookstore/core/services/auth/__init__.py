"""Authentication services."""

from .credential_verifier import CredentialVerifier, SignInResult, SignInStatus
from .login_service import LoginResult, LoginService
from .seed import create_identity, seed_identities

__all__ = [
    "CredentialVerifier",
    "LoginResult",
    "LoginService",
    "SignInResult",
    "SignInStatus",
    "create_identity",
    "seed_identities",
]
