"""Core services exports."""

from .auth import CredentialVerifier, LoginResult, LoginService, seed_identities
from .database.db_session import DbSessionService
from .jwt import JwtGeneratorService, JwtVerificationService
from .records import RecordService

__all__ = [
    # Auth Services
    "CredentialVerifier",
    "LoginResult",
    "LoginService",
    "seed_identities",
    # Database Service
    "DbSessionService",
    # JWT Services
    "JwtGeneratorService",
    "JwtVerificationService",
    # Record Services
    "RecordService",
]
