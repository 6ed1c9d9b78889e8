from dataclasses import dataclass

from src.bookstore.core.services import (
    DbSessionService,
    JwtGeneratorService,
    JwtVerificationService,
)


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    token_issuer: JwtGeneratorService
    token_verifier: JwtVerificationService
